from __future__ import annotations

import json
from pathlib import Path

import pytest

from nightreign_seeds.catalog import CatalogStore, parse_catalog


def _poi(x: float, y: float, kind: str) -> dict:
    return {"coordinates": {"x": x, "y": y}, "type": kind}


@pytest.fixture()
def dataset_payload() -> dict:
    return {
        "poiDatabase": {
            "seeds": {
                "1": {"seedNumber": 1, "nightlord": "Gladius", "mapType": "Default", "pois": {"1": _poi(155, 551, "church")}},
                "2": {"seedNumber": 2, "nightlord": "Gladius", "mapType": "Default", "pois": {"1": _poi(155, 551, "mage")}},
                "3": {
                    "seedNumber": 3,
                    "nightlord": "Adel",
                    "mapType": "Default",
                    "pois": {"1": _poi(156, 550, "Fort"), "2": _poi(350, 545, "village")},
                },
                "4": {"seedNumber": 4, "nightlord": "Adel", "mapType": "Crater", "pois": {"5": _poi(165, 284, "church")}},
                "5": {"seedNumber": 5, "nightlord": "Maris", "mapType": "Noklateo", "pois": {}},
            }
        },
        "classifications": {
            "001": {"POI1": "village", "POI2": "nothing"},
            "002": {"POI1": "mage"},
        },
    }


@pytest.fixture()
def catalog(dataset_payload: dict) -> CatalogStore:
    return parse_catalog(dataset_payload)


@pytest.fixture()
def dataset_file(tmp_path: Path, dataset_payload: dict) -> Path:
    path = tmp_path / "dataset" / "dataset.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(dataset_payload), encoding="utf-8")
    return path
