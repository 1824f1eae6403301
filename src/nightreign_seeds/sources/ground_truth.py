from __future__ import annotations

import logging
from typing import Protocol

from nightreign_seeds.catalog import CatalogStore
from nightreign_seeds.geometry import slot_at
from nightreign_seeds.models import PoiKind, normalize_poi_kind

_logger = logging.getLogger("nightreign_seeds.sources")

POI_DATABASE = "poi_database"
CLASSIFICATIONS = "classifications"


class GroundTruth(Protocol):
    def poi_kind_at(self, seed_number: int, x: float, y: float, tolerance: float) -> PoiKind | None:
        ...


class PoiDatabaseGroundTruth:
    """Reads POI kinds straight from the seed records' coordinate list."""

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def poi_kind_at(self, seed_number: int, x: float, y: float, tolerance: float) -> PoiKind | None:
        return self._catalog.poi_type_at_coordinate(seed_number, x, y, tolerance)


class ClassificationGroundTruth:
    """Reads POI kinds from the precomputed classification overlay.

    The coordinate is first resolved to a slot id of the seed's own map type,
    then the ``POI<id>`` label is looked up. A ``nothing`` label or a missing
    entry both mean no POI.
    """

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def poi_kind_at(self, seed_number: int, x: float, y: float, tolerance: float) -> PoiKind | None:
        seed = self._catalog.seed_by_number(seed_number)
        if seed is None:
            return None

        slot = slot_at(seed.map_type, x, y, tolerance)
        if slot is None:
            return None

        label = self._catalog.classification_for(seed_number).get(slot.id)
        return normalize_poi_kind(label)


def build_ground_truth(catalog: CatalogStore, source: str = POI_DATABASE) -> GroundTruth:
    normalized = source.lower()
    if normalized == CLASSIFICATIONS:
        if catalog.has_classifications:
            return ClassificationGroundTruth(catalog)
        _logger.warning("classifications_unavailable", extra={"fallback": POI_DATABASE})
    elif normalized != POI_DATABASE:
        _logger.warning("ground_truth_source_unrecognised", extra={"source": source, "fallback": POI_DATABASE})
    return PoiDatabaseGroundTruth(catalog)
