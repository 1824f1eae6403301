"""Static POI slot layout per map type, in the 768x768 base canvas space."""

from __future__ import annotations

import math

from .models import MapType, PoiSlot

CANVAS_SIZE = 768
MATCH_TOLERANCE = 40.0


def _slots(*triples: tuple[int, float, float]) -> tuple[PoiSlot, ...]:
    return tuple(PoiSlot(id=slot_id, x=x, y=y) for slot_id, x, y in triples)


POI_SLOTS_BY_MAP: dict[MapType, tuple[PoiSlot, ...]] = {
    MapType.DEFAULT: _slots(
        (1, 155, 551),
        (2, 350, 545),
        (3, 155, 436),
        (4, 280, 308),
        (5, 165, 284),
        (6, 436, 620),
        (7, 420, 495),
        (8, 620, 455),
        (9, 530, 285),
        (10, 595, 278),
        (11, 410, 180),
    ),
    MapType.CRATER: _slots(
        (1, 155, 551),
        (2, 348, 545),
        (3, 155, 440),
        (5, 165, 284),
        (6, 436, 630),
        (7, 420, 495),
        (8, 620, 455),
        (9, 530, 295),
        (10, 595, 278),
    ),
    MapType.ROTTED_WOODS: _slots(
        (1, 153, 557),
        (2, 350, 545),
        (3, 155, 442),
        (4, 275, 315),
        (5, 165, 284),
        (9, 530, 285),
        (10, 597, 285),
        (11, 410, 180),
    ),
    MapType.MOUNTAINTOP: _slots(
        (1, 155, 551),
        (2, 345, 547),
        (3, 155, 440),
        (6, 436, 620),
        (7, 420, 495),
        (8, 620, 460),
        (9, 530, 285),
        (10, 595, 278),
        (11, 410, 180),
    ),
    MapType.NOKLATEO: _slots(
        (4, 278, 308),
        (5, 165, 284),
        (6, 436, 620),
        (7, 420, 495),
        (8, 620, 455),
        (9, 530, 287),
        (10, 595, 278),
        (11, 410, 182),
    ),
}


def slots_for(map_type: MapType | None) -> tuple[PoiSlot, ...]:
    if map_type is None:
        return ()
    return POI_SLOTS_BY_MAP.get(map_type, ())


def within(x: float, y: float, target_x: float, target_y: float, tolerance: float) -> bool:
    return math.dist((x, y), (target_x, target_y)) <= tolerance


def slot_at(map_type: MapType | None, x: float, y: float, tolerance: float = MATCH_TOLERANCE) -> PoiSlot | None:
    """Return the first slot of ``map_type`` within ``tolerance`` of ``(x, y)``."""
    for slot in slots_for(map_type):
        if within(x, y, slot.x, slot.y, tolerance):
            return slot
    return None
