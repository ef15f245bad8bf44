"""
Scenario
========

Input dataset of the energy network: one timeline plus the zones,
plants and links defined over it.

Plants and links refer to zones by object reference. When a scenario
is loaded from JSON, these references are resolved by identifier
against the zones already loaded into the same scenario, so zones are
always loaded first, then links, then plants.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from .components.link import JSON_LINK_SOURCE, JSON_LINK_TARGET, Link
from .components.plant import JSON_PLANT_ZONE, Plant
from .components.zone import Zone
from .config import DEFAULT_LIMITS, Limits
from .errors import CapacityExceededError
from .timeline import Timeline
from .validation import (
    ensure_identifier_length,
    ensure_json_is_array,
    ensure_json_is_object,
    ensure_json_object_contains_key,
)

LOGGER = logging.getLogger(__name__)

JSON_SCENARIO_LINKS = "links"
JSON_SCENARIO_PLANTS = "plants"
JSON_SCENARIO_TIMELINE = "timeline"
JSON_SCENARIO_ZONES = "zones"


class Scenario:
    """
    Aggregate of a timeline, zones, plants and links.

    The scenario owns a private copy of its timeline. Collections keep
    insertion order and are bounded by ``limits``; no duplicate
    identifier check is performed.

    Attributes:
        timeline: Timeline of the scenario
        limits: Capacity limits of the collections
    """

    def __init__(self, timeline: Timeline, limits: Optional[Limits] = None):
        self.timeline = timeline.copy()
        self.limits = limits if limits is not None else DEFAULT_LIMITS
        self._zones: List[Zone] = []
        self._plants: List[Plant] = []
        self._links: List[Link] = []

    @property
    def zones(self) -> Tuple[Zone, ...]:
        return tuple(self._zones)

    @property
    def plants(self) -> Tuple[Plant, ...]:
        return tuple(self._plants)

    @property
    def links(self) -> Tuple[Link, ...]:
        return tuple(self._links)

    # Modifiers
    # ---------

    def _ensure_capacity(self, kind: str, count: int, limit: int) -> None:
        if count >= limit:
            raise CapacityExceededError(f"Cannot add more than {limit} {kind} to a scenario")

    def add_zone(self, zone: Zone) -> None:
        self._ensure_capacity("zones", len(self._zones), self.limits.max_num_zones)
        ensure_identifier_length(zone.id, self.limits.id_max_length)
        self._zones.append(zone.copy())

    def add_plant(self, plant: Plant) -> None:
        self._ensure_capacity("plants", len(self._plants), self.limits.max_num_plants)
        ensure_identifier_length(plant.id, self.limits.id_max_length)
        self._plants.append(plant.copy())

    def add_link(self, link: Link) -> None:
        self._ensure_capacity("links", len(self._links), self.limits.max_num_links)
        ensure_identifier_length(link.id, self.limits.id_max_length)
        self._links.append(link.copy())

    # Accessors
    # ---------

    def zone_by_id(self, zone_id: str) -> Optional[Zone]:
        """First zone (in insertion order) with the given identifier, or None."""
        for zone in self._zones:
            if zone.id == zone_id:
                return zone
        return None

    def equals(self, other: "Scenario") -> bool:
        """
        Structural equality.

        Collections are compared position by position, so the same
        entities added in a different order make the scenarios differ.
        """
        if not self.timeline.equals(other.timeline):
            return False
        for mine, theirs in ((self._links, other._links),
                             (self._plants, other._plants),
                             (self._zones, other._zones)):
            if len(mine) != len(theirs):
                return False
            if not all(a.equals(b) for a, b in zip(mine, theirs)):
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scenario):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def describe(self) -> str:
        lines = ["A scenario with the following components:",
                 f"  {self.timeline.describe()}"]
        lines.extend(plant.describe() for plant in self._plants)
        lines.extend(zone.describe() for zone in self._zones)
        lines.extend(link.describe() for link in self._links)
        return "\n".join(lines)

    # JSON
    # ----

    def _referenced_zone(self, j: Any, key: str) -> Optional[Zone]:
        if isinstance(j, dict) and isinstance(j.get(key), str):
            return self.zone_by_id(j[key])
        return None

    def _add_zones_from_json(self, j_zones: Any) -> None:
        ensure_json_is_array(j_zones, JSON_SCENARIO_ZONES)
        for j_zone in j_zones:
            self.add_zone(Zone.from_json(self.timeline, j_zone, self.limits))

    def _add_links_from_json(self, j_links: Any) -> None:
        ensure_json_is_array(j_links, JSON_SCENARIO_LINKS)
        for j_link in j_links:
            source = self._referenced_zone(j_link, JSON_LINK_SOURCE)
            target = self._referenced_zone(j_link, JSON_LINK_TARGET)
            self.add_link(Link.from_json(source, target, j_link, self.limits))

    def _add_plants_from_json(self, j_plants: Any) -> None:
        ensure_json_is_array(j_plants, JSON_SCENARIO_PLANTS)
        for j_plant in j_plants:
            zone = self._referenced_zone(j_plant, JSON_PLANT_ZONE)
            self.add_plant(Plant.from_json(self.timeline, zone, j_plant, self.limits))

    @classmethod
    def from_json(cls, j: Any, limits: Optional[Limits] = None) -> "Scenario":
        """
        Build a scenario from its JSON value.

        Args:
            j: ``{"timeline": ..., "zones": [...]?, "links": [...]?, "plants": [...]?}``
            limits: Capacity limits (defaults apply if None)

        Returns:
            Fully loaded Scenario

        Raises:
            SimprodValidationError: on the first violation found; no partial
                                    scenario is returned
        """
        ensure_json_is_object(j, "scenario")
        ensure_json_object_contains_key(j, JSON_SCENARIO_TIMELINE, "scenario")
        scenario = cls(Timeline.from_json(j[JSON_SCENARIO_TIMELINE]), limits)
        if JSON_SCENARIO_ZONES in j:
            scenario._add_zones_from_json(j[JSON_SCENARIO_ZONES])
        if JSON_SCENARIO_LINKS in j:
            scenario._add_links_from_json(j[JSON_SCENARIO_LINKS])
        if JSON_SCENARIO_PLANTS in j:
            scenario._add_plants_from_json(j[JSON_SCENARIO_PLANTS])
        LOGGER.debug(
            "Loaded scenario with %d zones, %d plants and %d links",
            len(scenario._zones), len(scenario._plants), len(scenario._links),
        )
        return scenario

    def to_json(self) -> Dict[str, Any]:
        return {
            JSON_SCENARIO_LINKS: [link.to_json() for link in self._links],
            JSON_SCENARIO_PLANTS: [plant.to_json() for plant in self._plants],
            JSON_SCENARIO_TIMELINE: self.timeline.to_json(),
            JSON_SCENARIO_ZONES: [zone.to_json() for zone in self._zones],
        }


def empty_scenario(limits: Optional[Limits] = None) -> Scenario:
    """Scenario over an empty timeline, without any component."""
    return Scenario(Timeline([]), limits)
