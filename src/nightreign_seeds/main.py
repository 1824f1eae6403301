"""CLI startup entrypoint for the Nightreign seed finder."""

from __future__ import annotations

import logging
from dataclasses import asdict

import typer
from rich import print

from nightreign_seeds.catalog import CatalogStore, load_catalog
from nightreign_seeds.config import settings
from nightreign_seeds.geometry import slots_for
from nightreign_seeds.models import Assertion, MapType, Nightlord, SeedRecord
from nightreign_seeds.session import FinderSession
from nightreign_seeds.sources import build_ground_truth

app = typer.Typer(help="Narrow down Nightreign map seeds from observed points of interest")


def _parse_enum(enum_cls, value: str | None, option: str):
    if value is None:
        return None
    for member in enum_cls:
        if value.casefold() in (member.value.casefold(), member.name.casefold()):
            return member
    choices = ", ".join(member.value for member in enum_cls)
    raise typer.BadParameter(f"{value!r} is not one of: {choices}", param_hint=option)


def _parse_poi(raw: str) -> tuple[int, Assertion]:
    slot_text, sep, state_text = raw.partition("=")
    if not sep:
        raise typer.BadParameter(f"Expected ID=STATE, got {raw!r}", param_hint="--poi")
    try:
        slot_id = int(slot_text)
    except ValueError as exc:
        raise typer.BadParameter(f"Slot id must be an integer, got {slot_text!r}", param_hint="--poi") from exc
    return slot_id, _parse_enum(Assertion, state_text.strip(), "--poi")


def _seed_payload(seed: SeedRecord) -> dict:
    return {
        "seed_number": seed.seed_number,
        "nightlord": seed.nightlord.value,
        "map_type": seed.map_type.value,
        "pois": {
            slot_id: {"x": poi.coordinates.x, "y": poi.coordinates.y, "type": poi.kind.value}
            for slot_id, poi in seed.pois.items()
        },
    }


def _load(catalog_file: str | None) -> CatalogStore:
    return load_catalog(catalog_file or settings.catalog_path)


def _build_session(catalog_file: str | None) -> FinderSession:
    catalog = _load(catalog_file)
    return FinderSession(catalog, ground_truth=build_ground_truth(catalog, settings.ground_truth_source))


@app.callback()
def main() -> None:
    logging.basicConfig(level=settings.log_level)


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "catalog_path": settings.catalog_path,
            "ground_truth_source": settings.ground_truth_source,
            "log_level": settings.log_level,
        }
    )


@app.command()
def stats(catalog_file: str = typer.Option(None, help="Path to dataset JSON")) -> None:
    """Summarise the loaded catalog."""
    print(asdict(_load(catalog_file).summary()))


@app.command()
def seed(
    seed_number: int = typer.Argument(..., help="Seed number to display"),
    catalog_file: str = typer.Option(None, help="Path to dataset JSON"),
) -> None:
    record = _load(catalog_file).seed_by_number(seed_number)
    if record is None:
        print({"seed": None, "error": f"No seed {seed_number} in catalog"})
        raise typer.Exit(code=1)
    print({"seed": _seed_payload(record)})


@app.command()
def slots(map_type: str = typer.Option(..., "--map", help="Map type, e.g. Default")) -> None:
    """List the POI slots that can be marked on a map type."""
    resolved = _parse_enum(MapType, map_type, "--map")
    print({"map_type": resolved.value, "slots": [asdict(slot) for slot in slots_for(resolved)]})


@app.command()
def match(
    nightlord: str = typer.Option(None, help="Nightlord name, or Unknown"),
    map_type: str = typer.Option(None, "--map", help="Map type, e.g. Default"),
    poi: list[str] = typer.Option(None, help="Slot observation as ID=STATE (church/mage/village/other/unknown)"),
    poi_filter: bool = typer.Option(True, help="Apply POI observations when a map type is chosen"),
    catalog_file: str = typer.Option(None, help="Path to dataset JSON"),
) -> None:
    """Print the seeds consistent with the given observations."""
    chosen_nightlord = _parse_enum(Nightlord, nightlord, "--nightlord")
    chosen_map = _parse_enum(MapType, map_type, "--map")
    observations = [_parse_poi(raw) for raw in poi or []]

    session = _build_session(catalog_file)
    if chosen_nightlord is not None:
        session.set_nightlord(chosen_nightlord)
    if chosen_map is not None:
        session.set_map_type(chosen_map)
    if not poi_filter:
        session.set_poi_filter(False)
    for slot_id, state in observations:
        session.set_assertion(slot_id, state)

    result = session.result
    if session.should_auto_select:
        session.select_index(0)

    selected = session.cursor.current
    print(
        {
            "constrained": result.constrained,
            "poi_filtered": result.poi_filtered,
            "match_count": len(result),
            "seeds": result.seed_numbers,
            "selected": _seed_payload(selected) if selected else None,
        }
    )
    if result.is_empty:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
