"""Read-only access to the seed catalog loaded from the dataset JSON."""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .geometry import within
from .models import Coordinates, MapType, Nightlord, PoiKind, PoiObservation, SeedRecord, normalize_poi_kind

_logger = logging.getLogger("nightreign_seeds.catalog")


@dataclass(slots=True)
class CatalogSummary:
    total: int
    by_nightlord: dict[str, int] = field(default_factory=dict)
    by_map_type: dict[str, int] = field(default_factory=dict)
    has_classifications: bool = False


class CatalogStore:
    """Immutable seed catalog with the query helpers the matcher relies on."""

    def __init__(
        self,
        seeds: dict[int, SeedRecord] | None = None,
        classifications: dict[int, dict[int, str]] | None = None,
    ) -> None:
        self._seeds = dict(seeds or {})
        self._classifications = dict(classifications or {})

    @classmethod
    def empty(cls) -> CatalogStore:
        return cls()

    def __len__(self) -> int:
        return len(self._seeds)

    @property
    def has_classifications(self) -> bool:
        return bool(self._classifications)

    def all_seeds(self) -> list[SeedRecord]:
        return list(self._seeds.values())

    def filter_seeds(self, nightlord: Nightlord | None = None, map_type: MapType | None = None) -> list[SeedRecord]:
        """Seeds matching both constraints; ``None`` or ``Unknown`` means unconstrained."""
        wildcard_nightlord = nightlord is None or nightlord == Nightlord.UNKNOWN
        return [
            seed
            for seed in self._seeds.values()
            if (wildcard_nightlord or seed.nightlord == nightlord) and (map_type is None or seed.map_type == map_type)
        ]

    def seed_by_number(self, seed_number: int) -> SeedRecord | None:
        return self._seeds.get(seed_number)

    def poi_type_at_coordinate(self, seed_number: int, x: float, y: float, tolerance: float) -> PoiKind | None:
        """Kind of the first POI of the seed within ``tolerance`` of ``(x, y)``.

        POIs are scanned in record order and the first hit wins, even when a
        later POI is closer.
        """
        seed = self._seeds.get(seed_number)
        if seed is None:
            return None
        for poi in seed.pois.values():
            if within(x, y, poi.coordinates.x, poi.coordinates.y, tolerance):
                return poi.kind
        return None

    def classification_for(self, seed_number: int) -> dict[int, str]:
        return dict(self._classifications.get(seed_number, {}))

    def summary(self) -> CatalogSummary:
        seeds = self._seeds.values()
        by_nightlord = Counter(seed.nightlord.value for seed in seeds)
        by_map_type = Counter(seed.map_type.value for seed in seeds)
        return CatalogSummary(
            total=len(self._seeds),
            by_nightlord=dict(sorted(by_nightlord.items())),
            by_map_type=dict(sorted(by_map_type.items())),
            has_classifications=self.has_classifications,
        )


def _parse_seed(key: str, payload: dict[str, Any]) -> SeedRecord:
    seed_number = int(payload.get("seedNumber", key))
    pois: dict[str, PoiObservation] = {}
    for slot_key, raw in (payload.get("pois") or {}).items():
        kind = normalize_poi_kind(raw.get("type"))
        if kind is None:
            continue
        coords = raw["coordinates"]
        pois[str(slot_key)] = PoiObservation(
            coordinates=Coordinates(x=float(coords["x"]), y=float(coords["y"])),
            kind=kind,
        )

    nightlord = Nightlord(payload["nightlord"])
    if nightlord == Nightlord.UNKNOWN:
        raise ValueError("Unknown is not a valid stored nightlord")
    return SeedRecord(
        seed_number=seed_number,
        nightlord=nightlord,
        map_type=MapType(payload["mapType"]),
        pois=pois,
    )


def _parse_classifications(payload: dict[str, Any]) -> dict[int, dict[int, str]]:
    overlay: dict[int, dict[int, str]] = {}
    for seed_key, labels in payload.items():
        try:
            seed_number = int(seed_key)
        except ValueError:
            _logger.warning("classification_seed_skipped", extra={"seed_key": seed_key})
            continue
        if not isinstance(labels, dict):
            _logger.warning("classification_seed_skipped", extra={"seed_key": seed_key})
            continue
        slots: dict[int, str] = {}
        for poi_key, label in labels.items():
            if not str(poi_key).startswith("POI"):
                continue
            try:
                slots[int(str(poi_key)[3:])] = str(label)
            except ValueError:
                _logger.warning("classification_slot_skipped", extra={"seed_key": seed_key, "poi_key": poi_key})
        overlay[seed_number] = slots
    return overlay


def parse_catalog(payload: Any) -> CatalogStore:
    """Build a catalog from decoded dataset JSON; malformed parts are skipped."""
    if not isinstance(payload, dict):
        _logger.warning("catalog_payload_invalid", extra={"payload_type": type(payload).__name__})
        return CatalogStore.empty()

    database = payload.get("poiDatabase")
    raw_seeds = database.get("seeds") if isinstance(database, dict) else None
    if not isinstance(raw_seeds, dict):
        _logger.warning("catalog_seeds_missing")
        raw_seeds = {}

    seeds: dict[int, SeedRecord] = {}
    for key, raw in raw_seeds.items():
        try:
            record = _parse_seed(key, raw)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            _logger.warning("catalog_seed_skipped", extra={"seed_key": key, "error": f"{type(exc).__name__}: {exc}"})
            continue
        if record.seed_number in seeds:
            _logger.warning("catalog_seed_duplicate", extra={"seed_key": key, "seed_number": record.seed_number})
            continue
        seeds[record.seed_number] = record

    classifications: dict[int, dict[int, str]] = {}
    raw_classifications = payload.get("classifications")
    if isinstance(raw_classifications, dict):
        classifications = _parse_classifications(raw_classifications)

    _logger.info(
        "catalog_parsed",
        extra={"seed_count": len(seeds), "classified_seed_count": len(classifications)},
    )
    return CatalogStore(seeds=seeds, classifications=classifications)


def load_catalog(path: str | Path) -> CatalogStore:
    """Load the dataset file, degrading to an empty catalog on any failure."""
    catalog_path = Path(path)
    try:
        payload = json.loads(catalog_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        _logger.warning(
            "catalog_load_failed",
            extra={"path": str(catalog_path), "error": f"{type(exc).__name__}: {exc}"},
        )
        return CatalogStore.empty()
    return parse_catalog(payload)
