"""
Plant Model
===========

Production unit located in a zone. A plant carries a (min, max) power
bound pair for every future timestep of its reference timeline.
"""

from dataclasses import dataclass, replace
import logging
from typing import Any, Dict, Optional

import numpy as np

from ..config import DEFAULT_LIMITS, Limits
from ..errors import InvariantError, UnresolvedReferenceError
from ..timeline import Timeline
from ..validation import (
    ensure_identifier_length,
    ensure_json_array_has_size,
    ensure_json_is_array_of_numbers,
    ensure_json_is_object,
    ensure_json_is_string,
    ensure_json_object_contains_key,
    ensure_json_object_has_size,
    ensure_zone_identifiers_are_the_same,
)
from .zone import Zone, as_power_array, format_powers

LOGGER = logging.getLogger(__name__)

JSON_PLANT_ID = "id"
JSON_PLANT_ZONE = "zone"
JSON_PLANT_MIN_POWERS = "min-powers"
JSON_PLANT_MAX_POWERS = "max-powers"


@dataclass(frozen=True, eq=False)
class Plant:
    """
    Production plant.

    Attributes:
        id: Plant identifier
        timeline: Reference timeline (not owned)
        zone: Zone where the plant is located (not owned)
        min_powers: Minimum power for each timestep (MW)
        max_powers: Maximum power for each timestep (MW)
    """
    id: str
    timeline: Timeline
    zone: Zone
    min_powers: np.ndarray
    max_powers: np.ndarray

    def __post_init__(self):
        """Copy power bounds and validate them against the timeline."""
        min_powers = as_power_array(self.min_powers, self.timeline, f"Plant {self.id} min powers")
        max_powers = as_power_array(self.max_powers, self.timeline, f"Plant {self.id} max powers")
        above = min_powers > max_powers
        if np.any(above):
            t = int(np.argmax(above))
            raise InvariantError(
                f"Plant {self.id} min power {min_powers[t]} exceeds max power "
                f"{max_powers[t]} at timestep {t}"
            )
        object.__setattr__(self, "min_powers", min_powers)
        object.__setattr__(self, "max_powers", max_powers)

    def copy(self) -> "Plant":
        return replace(self)

    @classmethod
    def from_json(
        cls,
        timeline: Timeline,
        zone: Optional[Zone],
        j: Any,
        limits: Limits = DEFAULT_LIMITS,
    ) -> "Plant":
        """
        Build a plant from its JSON value.

        Args:
            timeline: Reference timeline of the plant
            zone: Zone resolved from the ``zone`` identifier of the value,
                  None if the identifier could not be resolved
            j: ``{"id": str, "zone": str, "min-powers": [...], "max-powers": [...]}``
            limits: Identifier length limit

        Raises:
            SimprodValidationError: on any shape, size or reference violation
        """
        ensure_json_is_object(j, "plant")
        for key in (JSON_PLANT_ID, JSON_PLANT_ZONE, JSON_PLANT_MIN_POWERS, JSON_PLANT_MAX_POWERS):
            ensure_json_object_contains_key(j, key, "plant")
        ensure_json_object_has_size(j, 4, "plant")
        plant_id = j[JSON_PLANT_ID]
        ensure_json_is_string(plant_id, "plant.id")
        ensure_identifier_length(plant_id, limits.id_max_length)
        zone_id = j[JSON_PLANT_ZONE]
        ensure_json_is_string(zone_id, f"{plant_id}.zone")
        if zone is None:
            raise UnresolvedReferenceError(f"Plant {plant_id} refers to unknown zone {zone_id}")
        ensure_zone_identifiers_are_the_same(zone_id, zone.id)

        powers = {}
        for key in (JSON_PLANT_MIN_POWERS, JSON_PLANT_MAX_POWERS):
            j_powers = j[key]
            ensure_json_is_array_of_numbers(j_powers, f"{plant_id}.{key}")
            ensure_json_array_has_size(j_powers, timeline.num_future_timesteps, f"{plant_id}.{key}")
            powers[key] = j_powers

        LOGGER.debug("Loaded plant %s in zone %s", plant_id, zone_id)
        return cls(
            id=plant_id,
            timeline=timeline,
            zone=zone,
            min_powers=powers[JSON_PLANT_MIN_POWERS],
            max_powers=powers[JSON_PLANT_MAX_POWERS],
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            JSON_PLANT_ID: self.id,
            JSON_PLANT_MAX_POWERS: self.max_powers.tolist(),
            JSON_PLANT_MIN_POWERS: self.min_powers.tolist(),
            JSON_PLANT_ZONE: self.zone.id,
        }

    def equals(self, other: "Plant") -> bool:
        if self.id != other.id:
            return False
        if not self.timeline.equals(other.timeline):
            return False
        if not self.zone.equals(other.zone):
            return False
        return (bool(np.array_equal(self.min_powers, other.min_powers))
                and bool(np.array_equal(self.max_powers, other.max_powers)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plant):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def describe(self) -> str:
        return "\n".join([
            f'A plant with identifier "{self.id}"',
            f"  Zone: {self.zone.id}",
            f"  Minimum powers: {format_powers(self.min_powers)}",
            f"  Maximum powers: {format_powers(self.max_powers)}",
        ])
