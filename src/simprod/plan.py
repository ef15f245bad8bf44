"""
Production Plan
===============

Output dataset: for every future timestep, the production (MW) of each
plant, keyed by plant identifier. A plant without an entry at some
timestep produces zero there.

A plan is a data container only; it is not linked to any scenario and
plant identifiers are never checked against one.
"""

import logging
from typing import Any, Dict, List

import pandas as pd

from .errors import SizeMismatchError
from .timeline import Timeline
from .utils.ordered_map import OrderedMap
from .validation import (
    ensure_json_is_array_of_numbers,
    ensure_json_is_object,
    ensure_json_object_contains_key,
)

LOGGER = logging.getLogger(__name__)

JSON_PLAN_PRODUCTIONS = "productions"
JSON_PLAN_TIMELINE = "timeline"


class Plan:
    """
    Per-timestep production schedule.

    Attributes:
        timeline: Private copy of the plan timeline
        productions: One OrderedMap (plant id -> MW) per timestep
    """

    def __init__(self, timeline: Timeline):
        self.timeline = timeline.copy()
        self.productions: List[OrderedMap] = [
            OrderedMap() for _ in range(self.timeline.num_future_timesteps)
        ]

    def _production_at(self, t: int) -> OrderedMap:
        if not 0 <= t < len(self.productions):
            raise IndexError(
                f"Timestep {t} is out of range for a timeline of {len(self.productions)} timesteps"
            )
        return self.productions[t]

    def set_production(self, t: int, plant_id: str, production: float) -> None:
        self._production_at(t).set(plant_id, float(production))

    def get_production(self, t: int, plant_id: str) -> float:
        """Production of a plant at timestep t, 0.0 if never set."""
        return self._production_at(t).get(plant_id)

    def plant_ids(self) -> List[str]:
        """Identifiers of the plants exported by ``to_json``."""
        if not self.productions:
            return []
        return self.productions[0].keys()

    def all_plant_ids(self) -> List[str]:
        """Identifiers of the plants with an entry at any timestep."""
        ids = set()
        for production in self.productions:
            ids.update(production.keys())
        return sorted(ids)

    def equals(self, other: "Plan") -> bool:
        if not self.timeline.equals(other.timeline):
            return False
        return all(a.equals(b) for a, b in zip(self.productions, other.productions))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plan):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    # JSON
    # ----

    @classmethod
    def from_json(cls, j: Any) -> "Plan":
        """
        Build a plan from its JSON value.

        Production arrays may be shorter than the timeline; missing
        timesteps are left unset.

        Args:
            j: ``{"timeline": ..., "productions": {plant_id: [number, ...]}}``

        Raises:
            SimprodValidationError: on a shape violation, or if a production
                                    array is longer than the timeline
        """
        ensure_json_is_object(j, "plan")
        ensure_json_object_contains_key(j, JSON_PLAN_TIMELINE, "plan")
        ensure_json_object_contains_key(j, JSON_PLAN_PRODUCTIONS, "plan")
        plan = cls(Timeline.from_json(j[JSON_PLAN_TIMELINE]))
        j_productions = j[JSON_PLAN_PRODUCTIONS]
        ensure_json_is_object(j_productions, JSON_PLAN_PRODUCTIONS)
        n = plan.timeline.num_future_timesteps
        for plant_id, j_plant_productions in j_productions.items():
            ensure_json_is_array_of_numbers(j_plant_productions, f"{JSON_PLAN_PRODUCTIONS}.{plant_id}")
            if len(j_plant_productions) > n:
                raise SizeMismatchError(
                    f"Plant {plant_id} has {len(j_plant_productions)} productions "
                    f"but the timeline has {n} timesteps"
                )
            for t, production in enumerate(j_plant_productions):
                plan.set_production(t, plant_id, production)
        LOGGER.debug("Loaded plan over %d timesteps for %d plants", n, len(j_productions))
        return plan

    def to_json(self) -> Dict[str, Any]:
        """
        JSON value of the plan.

        Only plants with an entry at the first timestep are exported; each
        gets one value per timestep, 0.0 where it has no entry.
        """
        plant_ids = self.plant_ids()
        dropped = sorted(set(self.all_plant_ids()) - set(plant_ids))
        if dropped:
            LOGGER.warning(
                "Plants without a production at timestep 0 are not exported: %s",
                ", ".join(dropped),
            )
        j_productions = {
            plant_id: [
                production.get(plant_id) if production.has_key(plant_id) else 0.0
                for production in self.productions
            ]
            for plant_id in plant_ids
        }
        return {
            JSON_PLAN_PRODUCTIONS: j_productions,
            JSON_PLAN_TIMELINE: self.timeline.to_json(),
        }

    # Tabular view
    # ------------

    def to_frame(self) -> pd.DataFrame:
        """
        Productions as a table.

        Returns:
            DataFrame indexed by timestep, with a ``duration_min`` column
            followed by one column per plant (every plant with an entry at
            any timestep, 0.0 where it has none)
        """
        plant_ids = self.all_plant_ids()
        df = pd.DataFrame(
            {
                plant_id: [production.get(plant_id) for production in self.productions]
                for plant_id in plant_ids
            },
            index=pd.RangeIndex(self.timeline.num_future_timesteps, name="timestep"),
            columns=plant_ids,
            dtype=float,
        )
        df.insert(0, "duration_min", self.timeline.future_durations)
        return df

    def describe(self) -> str:
        lines = [f"A plan over {self.timeline.describe().lower()}"]
        for t, production in enumerate(self.productions):
            entries = ", ".join(f"{k}: {production.get(k):f}" for k in production.keys())
            lines.append(f"  Timestep {t}: {entries}" if entries else f"  Timestep {t}: no production")
        return "\n".join(lines)


def empty_plan() -> Plan:
    """Plan over an empty timeline."""
    return Plan(Timeline([]))
