"""Tests for production plans."""

from __future__ import annotations

import json
import logging

import pytest

from simprod.errors import MissingKeyError, ShapeError, SizeMismatchError
from simprod.plan import Plan, empty_plan
from simprod.timeline import Timeline


def test_initialize(timeline: Timeline) -> None:
    plan = Plan(timeline)

    assert plan.timeline == timeline
    assert plan.timeline is not timeline
    assert len(plan.productions) == 3
    assert all(p.num_entries == 0 for p in plan.productions)


def test_set_then_get_production(timeline: Timeline) -> None:
    plan = Plan(timeline)
    plan.set_production(1, "P1", 4.5)
    plan.set_production(1, "P1", 6.0)

    assert plan.get_production(1, "P1") == 6.0
    assert plan.get_production(0, "P1") == 0.0
    assert plan.get_production(2, "P2") == 0.0


@pytest.mark.parametrize("t", [-1, 3])
def test_timestep_out_of_range(timeline: Timeline, t: int) -> None:
    plan = Plan(timeline)

    with pytest.raises(IndexError):
        plan.set_production(t, "P1", 1.0)
    with pytest.raises(IndexError):
        plan.get_production(t, "P1")


def test_end_to_end_to_json(plan: Plan) -> None:
    assert plan.to_json() == {
        "productions": {"P1": [1.0, 2.0, 3.0]},
        "timeline": {"future-durations": [10, 30, 60]},
    }


def test_to_json_exports_only_plants_present_at_first_timestep(caplog) -> None:
    plan = Plan(Timeline([10, 30]))
    plan.set_production(1, "X", 5.0)

    with caplog.at_level(logging.WARNING, logger="simprod.plan"):
        j = plan.to_json()

    assert j["productions"] == {}
    assert "X" in caplog.text


def test_to_json_fills_missing_timesteps_with_zero(timeline: Timeline) -> None:
    plan = Plan(timeline)
    plan.set_production(0, "P2", 1.0)
    plan.set_production(0, "P1", 2.0)
    plan.set_production(2, "P1", 3.0)

    productions = plan.to_json()["productions"]

    assert list(productions) == ["P1", "P2"]
    assert productions["P1"] == [2.0, 0.0, 3.0]
    assert productions["P2"] == [1.0, 0.0, 0.0]


def test_empty_plan_to_json() -> None:
    assert empty_plan().to_json() == {
        "productions": {},
        "timeline": {"future-durations": []},
    }


def test_json_round_trip(plan: Plan) -> None:
    j = json.loads(json.dumps(plan.to_json()))

    assert Plan.from_json(j) == plan


def test_json_round_trip_with_many_plants() -> None:
    plan = Plan(Timeline([10, 30]))
    for i in range(1500):
        plan.set_production(0, f"P{i:05d}", 1.0)
        plan.set_production(1, f"P{i:05d}", float(i))

    reloaded = Plan.from_json(json.loads(json.dumps(plan.to_json())))

    assert reloaded == plan
    assert reloaded.get_production(1, "P01499") == 1499.0


def test_round_trip_loses_plants_absent_at_first_timestep(timeline: Timeline) -> None:
    plan = Plan(timeline)
    plan.set_production(0, "P1", 1.0)
    plan.set_production(2, "P2", 1.0)

    assert Plan.from_json(plan.to_json()) != plan


def test_from_json_accepts_short_arrays() -> None:
    j = {
        "timeline": {"future-durations": [10, 30, 60]},
        "productions": {"P1": [1.0], "P2": [2, 3]},
    }

    plan = Plan.from_json(j)

    assert plan.get_production(0, "P1") == 1.0
    assert not plan.productions[1].has_key("P1")
    assert plan.get_production(1, "P2") == 3.0
    assert plan.to_json()["productions"] == {
        "P1": [1.0, 0.0, 0.0],
        "P2": [2.0, 3.0, 0.0],
    }


def test_from_json_rejects_long_arrays() -> None:
    j = {"timeline": {"future-durations": [10]}, "productions": {"P1": [1.0, 2.0]}}

    with pytest.raises(SizeMismatchError):
        Plan.from_json(j)


@pytest.mark.parametrize(
    "j, error",
    [
        ([], ShapeError),
        ({"productions": {}}, MissingKeyError),
        ({"timeline": {"future-durations": [10]}}, MissingKeyError),
        ({"timeline": {"future-durations": [10]}, "productions": []}, ShapeError),
        ({"timeline": {"future-durations": [10]}, "productions": {"P1": 1.0}}, ShapeError),
        ({"timeline": {"future-durations": [10]}, "productions": {"P1": ["1"]}}, ShapeError),
    ],
)
def test_from_json_rejects_invalid_values(j, error) -> None:
    with pytest.raises(error):
        Plan.from_json(j)


def test_equality(plan: Plan, timeline: Timeline) -> None:
    other = Plan(timeline)
    other.set_production(2, "P1", 3.0)
    other.set_production(0, "P1", 1.0)
    other.set_production(1, "P1", 2.0)

    assert plan == other
    other.set_production(1, "P2", 0.0)
    assert plan != other
    assert plan != Plan(Timeline([10, 30, 90]))


def test_to_frame(plan: Plan) -> None:
    plan.set_production(2, "P2", 4.0)

    df = plan.to_frame()

    assert list(df.columns) == ["duration_min", "P1", "P2"]
    assert df.index.name == "timestep"
    assert df["duration_min"].tolist() == [10, 30, 60]
    assert df["P1"].tolist() == [1.0, 2.0, 3.0]
    assert df["P2"].tolist() == [0.0, 0.0, 4.0]


def test_to_frame_of_empty_plan() -> None:
    df = empty_plan().to_frame()

    assert list(df.columns) == ["duration_min"]
    assert len(df) == 0


def test_describe(plan: Plan, timeline: Timeline) -> None:
    lines = plan.describe().splitlines()

    assert lines[0] == "A plan over a timeline of 3 future timesteps with durations 10min, 30min, 60min"
    assert lines[1] == "  Timestep 0: P1: 1.000000"
    assert Plan(timeline).describe().splitlines()[1] == "  Timestep 0: no production"
