"""The JSON files shipped under examples/ load and round-trip."""

from __future__ import annotations

import json
from pathlib import Path

from simprod.config import load_limits
from simprod.plan import Plan
from simprod.scenario import Scenario

EXAMPLES = Path(__file__).parent.parent / "examples"


def load(name: str):
    with (EXAMPLES / name).open("r", encoding="utf-8") as f:
        return json.load(f)


def test_example_scenario() -> None:
    limits = load_limits(str(EXAMPLES / "limits.json"))
    scenario = Scenario.from_json(load("scenario_two_zones.json"), limits)

    assert [z.id for z in scenario.zones] == ["north", "south"]
    assert scenario.plants[1].zone is scenario.zone_by_id("south")
    assert Scenario.from_json(scenario.to_json(), limits) == scenario


def test_example_plan() -> None:
    plan = Plan.from_json(load("plan_two_plants.json"))

    assert plan.get_production(1, "hydro-1") == 150.0
    assert plan.to_json() == load("plan_two_plants.json")
