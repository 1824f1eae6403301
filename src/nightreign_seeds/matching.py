"""Constraint filter: which catalog seeds agree with the player's observations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .catalog import CatalogStore
from .geometry import MATCH_TOLERANCE, slots_for
from .models import CLASSIFIED_KINDS, Assertion, Nightlord, PoiKind, SeedRecord
from .observation import ObservationState
from .sources import GroundTruth, PoiDatabaseGroundTruth

_logger = logging.getLogger("nightreign_seeds.matching")

_EXACT_KINDS = {
    Assertion.CHURCH: PoiKind.CHURCH,
    Assertion.MAGE: PoiKind.MAGE,
    Assertion.VILLAGE: PoiKind.VILLAGE,
}


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Seeds consistent with the observations, ascending by seed number."""

    seeds: tuple[SeedRecord, ...] = field(default_factory=tuple)
    constrained: bool = False
    poi_filtered: bool = False

    def __len__(self) -> int:
        return len(self.seeds)

    @property
    def is_empty(self) -> bool:
        return not self.seeds

    @property
    def is_unique(self) -> bool:
        return len(self.seeds) == 1

    @property
    def seed_numbers(self) -> list[int]:
        return [seed.seed_number for seed in self.seeds]


def slot_matches(assertion: Assertion, real: PoiKind | None) -> bool:
    """Whether a seed whose slot holds ``real`` is consistent with ``assertion``.

    ``unknown`` accepts an unclassified POI or nothing at all, while ``other``
    requires an unclassified POI to actually be present.
    """
    if assertion == Assertion.UNMARKED:
        return True
    if assertion == Assertion.UNKNOWN:
        return real not in CLASSIFIED_KINDS
    if assertion == Assertion.OTHER:
        return real is not None and real not in CLASSIFIED_KINDS
    return real == _EXACT_KINDS[assertion]


def seed_matches(seed: SeedRecord, observation: ObservationState, ground_truth: GroundTruth) -> bool:
    for slot in slots_for(observation.map_type):
        assertion = observation.assertions.get(slot.id, Assertion.UNMARKED)
        if assertion == Assertion.UNMARKED:
            continue
        real = ground_truth.poi_kind_at(seed.seed_number, slot.x, slot.y, MATCH_TOLERANCE)
        if not slot_matches(assertion, real):
            return False
    return True


def _sorted(seeds: list[SeedRecord]) -> tuple[SeedRecord, ...]:
    return tuple(sorted(seeds, key=lambda seed: seed.seed_number))


def compute_matches(
    catalog: CatalogStore,
    observation: ObservationState,
    ground_truth: GroundTruth | None = None,
) -> MatchResult:
    if observation.nightlord is None and observation.map_type is None:
        return MatchResult(seeds=_sorted(catalog.all_seeds()))

    effective_nightlord = observation.nightlord
    if effective_nightlord == Nightlord.UNKNOWN:
        effective_nightlord = None

    candidates = catalog.filter_seeds(effective_nightlord, observation.map_type)
    if observation.map_type is None or not observation.poi_filter_enabled:
        return MatchResult(seeds=_sorted(candidates), constrained=True)

    truth = ground_truth or PoiDatabaseGroundTruth(catalog)
    survivors = [seed for seed in candidates if seed_matches(seed, observation, truth)]
    _logger.debug(
        "seeds_filtered",
        extra={
            "candidate_count": len(candidates),
            "match_count": len(survivors),
            "marked_slots": len(observation.marked_slots),
        },
    )
    return MatchResult(seeds=_sorted(survivors), constrained=True, poi_filtered=True)
