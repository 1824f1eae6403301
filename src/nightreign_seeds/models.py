from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Nightlord(str, Enum):
    GLADIUS = "Gladius"
    ADEL = "Adel"
    GNOSTER = "Gnoster"
    MARIS = "Maris"
    LIBRA = "Libra"
    FULGHOR = "Fulghor"
    CALIGO = "Caligo"
    HEOLSTOR = "Heolstor"
    # Filter value only; never stored on a seed record.
    UNKNOWN = "Unknown"


class MapType(str, Enum):
    DEFAULT = "Default"
    MOUNTAINTOP = "Mountaintop"
    CRATER = "Crater"
    ROTTED_WOODS = "Rotted Woods"
    NOKLATEO = "Noklateo"


class PoiKind(str, Enum):
    """Ground-truth POI classes stored in the catalog."""

    CHURCH = "church"
    MAGE = "mage"
    VILLAGE = "village"
    OTHER = "other"


class Assertion(str, Enum):
    """What the player claims to see at a POI slot."""

    UNMARKED = "unmarked"
    CHURCH = "church"
    MAGE = "mage"
    VILLAGE = "village"
    OTHER = "other"
    UNKNOWN = "unknown"


CLASSIFIED_KINDS = frozenset({PoiKind.CHURCH, PoiKind.MAGE, PoiKind.VILLAGE})
NOTHING_LABEL = "nothing"


def normalize_poi_kind(label: str | None) -> PoiKind | None:
    """Map a raw catalog label onto a PoiKind; ``None`` means no POI."""
    if label is None:
        return None
    text = str(label).strip().casefold()
    if not text or text == NOTHING_LABEL:
        return None
    for kind in CLASSIFIED_KINDS:
        if text == kind.value:
            return kind
    return PoiKind.OTHER


@dataclass(frozen=True, slots=True)
class Coordinates:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class PoiObservation:
    coordinates: Coordinates
    kind: PoiKind


@dataclass(frozen=True, slots=True)
class PoiSlot:
    """Clickable POI location on a map type, in base canvas space."""

    id: int
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class SeedRecord:
    seed_number: int
    nightlord: Nightlord
    map_type: MapType
    pois: dict[str, PoiObservation] = field(default_factory=dict)
