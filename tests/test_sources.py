from __future__ import annotations

import logging

from nightreign_seeds.catalog import CatalogStore
from nightreign_seeds.matching import compute_matches
from nightreign_seeds.models import Assertion, MapType, PoiKind
from nightreign_seeds.observation import ObservationState
from nightreign_seeds.sources import (
    ClassificationGroundTruth,
    PoiDatabaseGroundTruth,
    build_ground_truth,
)


def test_classification_overlay_resolves_nearest_slot(catalog: CatalogStore) -> None:
    truth = ClassificationGroundTruth(catalog)

    assert truth.poi_kind_at(1, 160, 548, 40) == PoiKind.VILLAGE
    assert truth.poi_kind_at(1, 350, 545, 40) is None
    assert truth.poi_kind_at(1, 700, 40, 40) is None
    assert truth.poi_kind_at(3, 155, 551, 40) is None


def test_build_ground_truth_selects_source(catalog: CatalogStore) -> None:
    assert isinstance(build_ground_truth(catalog), PoiDatabaseGroundTruth)
    assert isinstance(build_ground_truth(catalog, "classifications"), ClassificationGroundTruth)
    assert isinstance(build_ground_truth(CatalogStore.empty(), "classifications"), PoiDatabaseGroundTruth)


def test_matching_against_classification_overlay(catalog: CatalogStore) -> None:
    observation = ObservationState(map_type=MapType.DEFAULT)
    observation.set_assertion(1, Assertion.VILLAGE)

    overlay = compute_matches(catalog, observation, ClassificationGroundTruth(catalog))
    database = compute_matches(catalog, observation, PoiDatabaseGroundTruth(catalog))

    assert overlay.seed_numbers == [1]
    assert database.seed_numbers == []


def test_unrecognised_source_falls_back_with_warning(catalog: CatalogStore, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="nightreign_seeds.sources"):
        truth = build_ground_truth(catalog, "classificatons")

    assert isinstance(truth, PoiDatabaseGroundTruth)
    assert "ground_truth_source_unrecognised" in caplog.messages
