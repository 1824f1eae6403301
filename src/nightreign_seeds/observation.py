"""Mutable record of what the player has observed so far."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import slots_for
from .models import Assertion, MapType, Nightlord


def _blank_assertions(map_type: MapType | None) -> dict[int, Assertion]:
    return {slot.id: Assertion.UNMARKED for slot in slots_for(map_type)}


@dataclass(slots=True)
class ObservationState:
    nightlord: Nightlord | None = None
    map_type: MapType | None = None
    assertions: dict[int, Assertion] = field(default_factory=dict)
    poi_filter_enabled: bool = True

    def __post_init__(self) -> None:
        given = self.assertions
        self.assertions = _blank_assertions(self.map_type)
        for slot_id, value in given.items():
            if slot_id in self.assertions:
                self.assertions[slot_id] = value

    def set_nightlord(self, nightlord: Nightlord) -> None:
        """Select ``nightlord``, or clear it when it is already selected."""
        self.nightlord = None if self.nightlord == nightlord else nightlord

    def set_map_type(self, map_type: MapType) -> None:
        """Select ``map_type`` (toggling off when repeated) and reset every assertion."""
        self.map_type = None if self.map_type == map_type else map_type
        self.assertions = _blank_assertions(self.map_type)

    def set_assertion(self, slot_id: int, value: Assertion) -> bool:
        if slot_id not in {slot.id for slot in slots_for(self.map_type)}:
            return False
        self.assertions[slot_id] = value
        return True

    def clear_all_assertions(self) -> None:
        self.assertions = _blank_assertions(self.map_type)

    def set_poi_filter(self, enabled: bool) -> None:
        self.poi_filter_enabled = enabled

    def reset(self) -> None:
        self.nightlord = None
        self.map_type = None
        self.assertions = {}
        self.poi_filter_enabled = True

    @property
    def marked_slots(self) -> dict[int, Assertion]:
        return {slot_id: value for slot_id, value in self.assertions.items() if value != Assertion.UNMARKED}
