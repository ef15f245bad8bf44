"""
Zone Model
==========

Demand node of the network. A zone carries one expected demand value
(MW) per future timestep of its reference timeline.
"""

from dataclasses import dataclass, replace
import logging
from typing import Any, Dict

import numpy as np

from ..config import DEFAULT_LIMITS, Limits
from ..errors import SizeMismatchError
from ..timeline import Timeline
from ..validation import (
    ensure_identifier_length,
    ensure_json_array_has_size,
    ensure_json_is_array_of_numbers,
    ensure_json_is_object,
    ensure_json_is_string,
    ensure_json_object_contains_key,
    ensure_json_object_has_size,
)

LOGGER = logging.getLogger(__name__)

JSON_ZONE_ID = "id"
JSON_ZONE_EXPECTED_DEMANDS = "expected-demands"


def as_power_array(values, timeline: Timeline, name: str) -> np.ndarray:
    """
    Copy per-timestep MW values into a read-only float array.

    Raises:
        SizeMismatchError: if the number of values differs from the
                           number of timesteps of the timeline
    """
    arr = np.array(values, dtype=float).reshape(-1)
    if arr.size != timeline.num_future_timesteps:
        raise SizeMismatchError(
            f"{name} has {arr.size} values but the timeline has "
            f"{timeline.num_future_timesteps} timesteps"
        )
    arr.setflags(write=False)
    return arr


def format_powers(values: np.ndarray) -> str:
    return ", ".join(f"{v:f}" for v in values.tolist())


@dataclass(frozen=True, eq=False)
class Zone:
    """
    Demand zone.

    Attributes:
        id: Zone identifier
        timeline: Reference timeline (not owned)
        expected_demands: Expected demand for each timestep (MW)
    """
    id: str
    timeline: Timeline
    expected_demands: np.ndarray

    def __post_init__(self):
        object.__setattr__(
            self,
            "expected_demands",
            as_power_array(self.expected_demands, self.timeline, f"Zone {self.id} expected demands"),
        )

    def copy(self) -> "Zone":
        return replace(self)

    @classmethod
    def from_json(cls, timeline: Timeline, j: Any, limits: Limits = DEFAULT_LIMITS) -> "Zone":
        """
        Build a zone from its JSON value.

        Args:
            timeline: Reference timeline of the zone
            j: ``{"id": str, "expected-demands": [number, ...]}``
            limits: Identifier length limit

        Raises:
            SimprodValidationError: on any shape or size violation
        """
        ensure_json_is_object(j, "zone")
        ensure_json_object_contains_key(j, JSON_ZONE_ID, "zone")
        ensure_json_object_contains_key(j, JSON_ZONE_EXPECTED_DEMANDS, "zone")
        ensure_json_object_has_size(j, 2, "zone")
        zone_id = j[JSON_ZONE_ID]
        ensure_json_is_string(zone_id, "zone.id")
        ensure_identifier_length(zone_id, limits.id_max_length)
        j_demands = j[JSON_ZONE_EXPECTED_DEMANDS]
        ensure_json_is_array_of_numbers(j_demands, f"{zone_id}.{JSON_ZONE_EXPECTED_DEMANDS}")
        ensure_json_array_has_size(
            j_demands, timeline.num_future_timesteps, f"{zone_id}.{JSON_ZONE_EXPECTED_DEMANDS}"
        )
        LOGGER.debug("Loaded zone %s", zone_id)
        return cls(id=zone_id, timeline=timeline, expected_demands=j_demands)

    def to_json(self) -> Dict[str, Any]:
        return {
            JSON_ZONE_EXPECTED_DEMANDS: self.expected_demands.tolist(),
            JSON_ZONE_ID: self.id,
        }

    def equals(self, other: "Zone") -> bool:
        if self.id != other.id:
            return False
        if not self.timeline.equals(other.timeline):
            return False
        return bool(np.array_equal(self.expected_demands, other.expected_demands))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zone):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def describe(self) -> str:
        return (f'A zone with identifier "{self.id}"\n'
                f"  Expected demands: {format_powers(self.expected_demands)}")
