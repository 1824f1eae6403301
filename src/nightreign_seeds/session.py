"""Session orchestration: observation edits, recompute, cursor."""

from __future__ import annotations

import logging

from .catalog import CatalogStore
from .matching import MatchResult, compute_matches
from .models import Assertion, MapType, Nightlord, SeedRecord
from .navigation import NavigationCursor, StepDirection
from .observation import ObservationState
from .sources import GroundTruth, build_ground_truth


class FinderSession:
    """Owns one player's observations and keeps the match result in sync with them."""

    def __init__(
        self,
        catalog: CatalogStore,
        *,
        ground_truth: GroundTruth | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._catalog = catalog
        self._ground_truth = ground_truth or build_ground_truth(catalog)
        self._logger = logger or logging.getLogger("nightreign_seeds.session")
        self._observation = ObservationState()
        self._cursor = NavigationCursor()
        self._result = MatchResult()
        self._recompute()

    @property
    def catalog(self) -> CatalogStore:
        return self._catalog

    @property
    def observation(self) -> ObservationState:
        return self._observation

    @property
    def result(self) -> MatchResult:
        return self._result

    @property
    def cursor(self) -> NavigationCursor:
        return self._cursor

    @property
    def should_auto_select(self) -> bool:
        """True when filtering by POIs has narrowed a fully-specified map down to one seed."""
        state = self._observation
        return (
            self._result.is_unique
            and state.nightlord is not None
            and state.map_type is not None
            and self._result.poi_filtered
        )

    def set_nightlord(self, nightlord: Nightlord) -> MatchResult:
        self._observation.set_nightlord(nightlord)
        return self._recompute()

    def set_map_type(self, map_type: MapType) -> MatchResult:
        self._observation.set_map_type(map_type)
        return self._recompute()

    def set_assertion(self, slot_id: int, value: Assertion) -> MatchResult:
        if not self._observation.set_assertion(slot_id, value):
            self._logger.debug(
                "assertion_ignored",
                extra={"slot_id": slot_id, "map_type": self._map_label()},
            )
        return self._recompute()

    def clear_assertion(self, slot_id: int) -> MatchResult:
        return self.set_assertion(slot_id, Assertion.UNMARKED)

    def clear_all_assertions(self) -> MatchResult:
        self._observation.clear_all_assertions()
        return self._recompute()

    def set_poi_filter(self, enabled: bool) -> MatchResult:
        self._observation.set_poi_filter(enabled)
        return self._recompute()

    def reset(self) -> MatchResult:
        self._observation.reset()
        return self._recompute()

    def step(self, direction: StepDirection) -> SeedRecord | None:
        return self._cursor.step(direction)

    def select_index(self, index: int) -> bool:
        return self._cursor.select_index(index)

    def select_seed(self, seed_number: int) -> bool:
        """Move the cursor onto ``seed_number`` if it is part of the current result."""
        numbers = self._result.seed_numbers
        if seed_number not in numbers:
            return False
        return self._cursor.select_index(numbers.index(seed_number))

    def seed_by_number(self, seed_number: int) -> SeedRecord | None:
        return self._catalog.seed_by_number(seed_number)

    def _recompute(self) -> MatchResult:
        self._result = compute_matches(self._catalog, self._observation, self._ground_truth)
        self._cursor.reset(self._result)
        self._logger.info(
            "match_result_updated",
            extra={
                "nightlord": self._observation.nightlord.value if self._observation.nightlord else None,
                "map_type": self._map_label(),
                "match_count": len(self._result),
                "poi_filtered": self._result.poi_filtered,
            },
        )
        return self._result

    def _map_label(self) -> str | None:
        return self._observation.map_type.value if self._observation.map_type else None
