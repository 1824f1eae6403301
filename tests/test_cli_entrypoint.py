from __future__ import annotations

from pathlib import Path

import pytest

typer_testing = pytest.importorskip("typer.testing")

from nightreign_seeds.main import app  # noqa: E402


def _invoke(*args: str):
    return typer_testing.CliRunner().invoke(app, list(args))


def test_match_command_auto_selects_single_seed(dataset_file: Path) -> None:
    result = _invoke(
        "match", "--nightlord", "gladius", "--map", "Default", "--poi", "1=church", "--catalog-file", str(dataset_file)
    )

    assert result.exit_code == 0
    assert "'seeds': [1]" in result.output
    assert "'match_count': 1" in result.output
    assert "'seed_number': 1" in result.output


def test_match_command_exits_non_zero_when_nothing_matches(dataset_file: Path) -> None:
    result = _invoke(
        "match", "--nightlord", "Gladius", "--map", "Default", "--poi", "1=village", "--catalog-file", str(dataset_file)
    )

    assert result.exit_code == 1
    assert "'seeds': []" in result.output


def test_match_command_without_poi_filter_keeps_candidates(dataset_file: Path) -> None:
    result = _invoke(
        "match",
        "--nightlord",
        "Gladius",
        "--map",
        "Default",
        "--poi",
        "1=village",
        "--no-poi-filter",
        "--catalog-file",
        str(dataset_file),
    )

    assert result.exit_code == 0
    assert "'seeds': [1, 2]" in result.output
    assert "'selected': None" in result.output


def test_match_command_rejects_bad_poi(dataset_file: Path) -> None:
    result = _invoke("match", "--map", "Default", "--poi", "church", "--catalog-file", str(dataset_file))

    assert result.exit_code == 2


def test_seed_command_reports_missing_seed(dataset_file: Path) -> None:
    result = _invoke("seed", "404", "--catalog-file", str(dataset_file))

    assert result.exit_code == 1


def test_stats_command_summarises_catalog(dataset_file: Path) -> None:
    result = _invoke("stats", "--catalog-file", str(dataset_file))

    assert result.exit_code == 0
    assert "'total': 5" in result.output
    assert "'Gladius': 2" in result.output
    assert "'has_classifications': True" in result.output


def test_slots_command_lists_map_slots() -> None:
    result = _invoke("slots", "--map", "Crater")

    assert result.exit_code == 0
    assert "'map_type': 'Crater'" in result.output
    assert "'id': 10" in result.output
    assert "'id': 11" not in result.output
