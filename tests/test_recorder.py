"""Tests for run recording and side-by-side comparison."""

import pytest

from engine import Recorder, RunMetrics, compare


def recorded(key, values, order="asc"):
    rec = Recorder()
    rec.start(key, values, order)
    rec.run_to_completion()
    return rec


def test_metrics_for_bubble():
    rec = recorded("bubble", [3, 1, 2])
    m = rec.get_metrics()
    assert m.algo_key == "bubble"
    assert m.algo_label == "Bubble Sort"
    assert m.input_size == 3
    assert m.total_steps == len(rec.steps)
    assert m.comparisons == sum(1 for s in rec.steps if s.phase.value == "compare")
    assert m.swaps == 2
    assert m.stable
    assert m.phase_counts["initial"] == 1
    assert m.phase_counts["complete"] == 1
    assert rec.steps[-1].values == [1, 2, 3]


def test_metrics_for_radix():
    m = recorded("radix", [170, 45, 75, 90, 802, 24, 2, 66]).metrics
    assert m.distributions == 24
    assert m.passes == 3
    assert m.comparisons == 0
    assert m.moves == 24


def test_run_before_start_raises():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_start_rejects_unknown_algorithm():
    with pytest.raises(ValueError):
        Recorder().start("bogo", [1, 2])


def test_start_validates_values():
    with pytest.raises(ValueError):
        Recorder().start("radix", [-1, 2])


def test_export():
    data = recorded("merge", [2, 1], "desc").export()
    assert data["algo_key"] == "merge"
    assert data["order"] == "desc"
    assert data["values"] == [2, 1]
    assert data["metrics"]["total_steps"] == len(data["steps"])
    assert data["steps"][-1]["phase"] == "complete"


def test_compare_picks_fewer():
    left = recorded("bubble", [1, 2, 3, 4, 5])
    right = recorded("selection", [1, 2, 3, 4, 5])
    result = compare(left, right)
    # bubble exits after one clean pass; selection always scans everything
    assert result.winner_comparisons == "Bubble Sort"
    assert result.winner_moves == "tie"
    assert result.to_dict()["left"]["algo_key"] == "bubble"


def test_compare_same_algorithm_ties():
    result = compare(recorded("quick", [4, 2, 3]), recorded("quick", [4, 2, 3]))
    assert result.winner_steps == result.winner_comparisons == result.winner_moves == "tie"


def test_compare_unrun_recorders():
    result = compare(Recorder(), Recorder())
    assert result.left == RunMetrics()
    assert result.winner_steps == "tie"
