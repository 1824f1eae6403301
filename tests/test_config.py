from __future__ import annotations

import pytest
from pydantic import ValidationError

from nightreign_seeds.config import Settings


def test_log_level_is_normalised(monkeypatch) -> None:
    monkeypatch.setenv("NIGHTREIGN_SEEDS_LOG_LEVEL", "debug")

    assert Settings().log_level == "DEBUG"


def test_invalid_log_level_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("NIGHTREIGN_SEEDS_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        Settings()


def test_invalid_ground_truth_source_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("NIGHTREIGN_SEEDS_GROUND_TRUTH_SOURCE", "cv")

    with pytest.raises(ValidationError):
        Settings()
