"""Shared examples for the data model tests."""

from __future__ import annotations

import pytest

from simprod.components import Link, Plant, Zone
from simprod.plan import Plan
from simprod.scenario import Scenario
from simprod.timeline import Timeline


@pytest.fixture
def timeline() -> Timeline:
    return Timeline([10, 30, 60])


@pytest.fixture
def zone(timeline: Timeline) -> Zone:
    return Zone(id="Z1", timeline=timeline, expected_demands=[5, 10, 8])


@pytest.fixture
def other_zone(timeline: Timeline) -> Zone:
    return Zone(id="Z2", timeline=timeline, expected_demands=[1.5, 2.5, 3.5])


@pytest.fixture
def plant(timeline: Timeline, zone: Zone) -> Plant:
    return Plant(
        id="P1",
        timeline=timeline,
        zone=zone,
        min_powers=[1, 2, 3],
        max_powers=[7, 8, 9],
    )


@pytest.fixture
def link(zone: Zone, other_zone: Zone) -> Link:
    return Link(id="L1", source=zone, target=other_zone)


@pytest.fixture
def scenario(timeline: Timeline, zone: Zone, other_zone: Zone, plant: Plant, link: Link) -> Scenario:
    s = Scenario(timeline)
    s.add_zone(zone)
    s.add_zone(other_zone)
    s.add_plant(plant)
    s.add_link(link)
    return s


@pytest.fixture
def plan(timeline: Timeline) -> Plan:
    p = Plan(timeline)
    p.set_production(0, "P1", 1.0)
    p.set_production(1, "P1", 2.0)
    p.set_production(2, "P1", 3.0)
    return p
