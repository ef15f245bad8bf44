"""
Timeline
========

Discretization of the future into a fixed number of timesteps of
variable duration (in minutes). Every per-timestep vector in a scenario
or a plan is indexed by the timeline it was built against.
"""

from dataclasses import dataclass
import logging
import numbers
from typing import Any, Dict

import numpy as np

from .errors import InvariantError, ShapeError
from .validation import (
    ensure_json_is_array_of_integers,
    ensure_json_is_object,
    ensure_json_object_contains_key,
    ensure_json_object_has_size,
)

LOGGER = logging.getLogger(__name__)

JSON_TIMELINE_FUTURE_DURATIONS = "future-durations"

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


def as_duration_array(values) -> np.ndarray:
    """
    Copy durations into an int64 array.

    Raises:
        ShapeError: if a value is not a whole number of minutes, or does not
                    fit in 64 bits
    """
    durations = values.tolist() if isinstance(values, np.ndarray) else list(values)
    for t, d in enumerate(durations):
        if isinstance(d, (bool, np.bool_)) or not isinstance(d, numbers.Integral):
            raise ShapeError(f"Duration of timestep {t} is not an integer: {d!r}")
        if not INT64_MIN <= d <= INT64_MAX:
            raise ShapeError(f"Duration of timestep {t} is out of range: {d}")
    return np.array(durations, dtype=np.int64)


@dataclass(frozen=True, eq=False)
class Timeline:
    """
    Ordered sequence of future timestep durations.

    Attributes:
        future_durations: Duration of each future timestep (minutes),
                          stored as a read-only integer array
    """
    future_durations: np.ndarray

    def __post_init__(self):
        durations = as_duration_array(self.future_durations)
        if np.any(durations < 0):
            t = int(np.argmax(durations < 0))
            raise InvariantError(
                f"Timestep {t} has negative duration {int(durations[t])}min"
            )
        durations.setflags(write=False)
        object.__setattr__(self, "future_durations", durations)

    @property
    def num_future_timesteps(self) -> int:
        return int(self.future_durations.size)

    @property
    def total_duration(self) -> int:
        """Length of the whole horizon (minutes)."""
        return int(self.future_durations.sum())

    def copy(self) -> "Timeline":
        return Timeline(self.future_durations)

    @classmethod
    def from_json(cls, j: Any) -> "Timeline":
        """
        Build a timeline from its JSON value.

        Args:
            j: ``{"future-durations": [int, ...]}``

        Raises:
            SimprodValidationError: if the value does not have this exact shape
        """
        ensure_json_is_object(j, "timeline")
        ensure_json_object_contains_key(j, JSON_TIMELINE_FUTURE_DURATIONS, "timeline")
        ensure_json_object_has_size(j, 1, "timeline")
        j_durations = j[JSON_TIMELINE_FUTURE_DURATIONS]
        ensure_json_is_array_of_integers(j_durations, JSON_TIMELINE_FUTURE_DURATIONS)
        LOGGER.debug("Loaded timeline with %d future timesteps", len(j_durations))
        return cls(j_durations)

    def to_json(self) -> Dict[str, Any]:
        return {JSON_TIMELINE_FUTURE_DURATIONS: self.future_durations.tolist()}

    def equals(self, other: "Timeline") -> bool:
        if self.num_future_timesteps != other.num_future_timesteps:
            return False
        return bool(np.array_equal(self.future_durations, other.future_durations))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeline):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def describe(self) -> str:
        durations = ", ".join(f"{d}min" for d in self.future_durations.tolist())
        return (f"A timeline of {self.num_future_timesteps} future timesteps "
                f"with durations {durations}")


def empty_timeline() -> Timeline:
    """Timeline without any future timestep."""
    return Timeline([])
