"""Tests for the timeline and its JSON encoding."""

from __future__ import annotations

import json

import numpy as np
import pytest

from simprod.errors import InvariantError, MissingKeyError, ShapeError
from simprod.scenario import Scenario
from simprod.timeline import Timeline, empty_timeline


def test_initialize_copies_durations() -> None:
    durations = [10, 30, 60]
    timeline = Timeline(durations)
    durations[0] = 99

    assert timeline.num_future_timesteps == 3
    assert timeline.future_durations.tolist() == [10, 30, 60]
    assert timeline.total_duration == 100


def test_durations_are_read_only() -> None:
    timeline = Timeline([10, 30])

    with pytest.raises(ValueError):
        timeline.future_durations[0] = 5


def test_copy_is_equal() -> None:
    timeline = Timeline([10, 30, 60])

    assert timeline.copy().equals(timeline)
    assert timeline.copy() == timeline


def test_equality_checks_length_then_values() -> None:
    assert Timeline([10, 30]) != Timeline([10, 30, 60])
    assert Timeline([10, 30, 60]) != Timeline([10, 30, 61])
    assert empty_timeline() == Timeline([])


def test_negative_duration_is_rejected() -> None:
    with pytest.raises(InvariantError):
        Timeline([10, -5])


@pytest.mark.parametrize("durations", [[1.5, 30], [10.0], [10, "30"], np.array([1.5, 30.0])])
def test_non_integer_duration_is_rejected(durations) -> None:
    with pytest.raises(ShapeError):
        Timeline(durations)


def test_integer_array_is_accepted() -> None:
    timeline = Timeline(np.array([10, 30], dtype=np.int32))

    assert timeline.future_durations.dtype == np.int64
    assert timeline == Timeline([10, 30])


def test_oversized_duration_fails_scenario_load() -> None:
    with pytest.raises(ShapeError, match="out of range"):
        Scenario.from_json({"timeline": {"future-durations": [2**64]}})


def test_to_json() -> None:
    assert Timeline([10, 30, 60]).to_json() == {"future-durations": [10, 30, 60]}
    assert empty_timeline().to_json() == {"future-durations": []}


@pytest.mark.parametrize("durations", [[], [60], [10, 30, 60], [5] * 96])
def test_json_round_trip(durations) -> None:
    timeline = Timeline(durations)
    j = json.loads(json.dumps(timeline.to_json()))

    assert Timeline.from_json(j) == timeline


@pytest.mark.parametrize(
    "j",
    [
        [10, 30],
        {"future-durations": [10, 30], "extra": 1},
        {"future-durations": "10,30"},
        {"future-durations": [10, 30.5]},
        {"future-durations": [10, True]},
        {"future-durations": [2**64]},
        {"future-durations": [10, -(2**63) - 1]},
    ],
)
def test_from_json_rejects_bad_shapes(j) -> None:
    with pytest.raises(ShapeError):
        Timeline.from_json(j)


def test_from_json_requires_future_durations() -> None:
    with pytest.raises(MissingKeyError):
        Timeline.from_json({"durations": [10]})


def test_describe() -> None:
    assert Timeline([10, 30]).describe() == (
        "A timeline of 2 future timesteps with durations 10min, 30min"
    )
