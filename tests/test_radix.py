"""Tests for the LSD radix sort generator and its key helpers."""

import pytest

from elements import PADDING, make_elements
from sorting import ASC, DESC, RadixPhase, generate_steps
from sorting.radix import bucket_keys, digit_name, extract_key, max_positions

CLASSIC = [170, 45, 75, 90, 802, 24, 2, 66]


def run(values, order=ASC):
    return generate_steps("radix", make_elements(values), order)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "values, expected",
    [
        (CLASSIC, 3),
        ([0], 1),
        ([], 1),
        ([9999, 1], 4),
        ([10], 2),
        (["abc", "z"], 3),
        (["", ""], 1),
    ],
)
def test_max_positions(values, expected):
    assert max_positions(values) == expected


def test_extract_key_digits():
    assert extract_key(802, 0) == 2
    assert extract_key(802, 1) == 0
    assert extract_key(802, 2) == 8
    assert extract_key(2, 2) == 0


def test_extract_key_characters_right_aligned():
    assert extract_key("ab", 0, True) == "b"
    assert extract_key("ab", 1, True) == "a"
    assert extract_key("ab", 2, True) == PADDING


def test_digit_names():
    assert digit_name(0) == "units"
    assert digit_name(2) == "hundreds"
    assert digit_name(5) == "10^5"
    assert digit_name(0, True) == "last character"
    assert digit_name(1, True) == "character 2 from the end"


def test_bucket_keys():
    assert bucket_keys([1, 2], 0) == list(range(10))
    assert bucket_keys(["bb", "a", "ccc"], 1, True) == [PADDING, "b", "c"]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def test_numeric_ascending():
    steps = run(CLASSIC)
    assert steps[-1].values == [2, 24, 45, 66, 75, 90, 170, 802]
    # initial + 3 × (8 distribute + 1 collect) + complete
    assert len(steps) == 1 + 3 * (len(CLASSIC) + 1) + 1
    assert [s.step_number for s in steps] == list(range(len(steps)))


def test_numeric_descending():
    steps = run(CLASSIC, DESC)
    assert steps[-1].values == sorted(CLASSIC, reverse=True)


def test_strings_ascending():
    steps = run(["bb", "a", "ccc"])
    assert steps[-1].values == ["a", "bb", "ccc"]


def test_strings_descending():
    steps = run(["bb", "a", "ccc"], DESC)
    assert steps[-1].values == ["ccc", "bb", "a"]


def test_strings_with_shared_suffix():
    values = ["CAT", "AT", "BAT", "T"]
    assert run(values)[-1].values == ["T", "AT", "BAT", "CAT"]


def test_empty_input():
    steps = run([])
    assert [s.phase for s in steps] == [RadixPhase.INITIAL, RadixPhase.COMPLETE]
    assert steps[-1].values == []


def test_single_element():
    steps = run([7])
    assert steps[0].phase is RadixPhase.INITIAL
    assert steps[-1].phase is RadixPhase.COMPLETE
    assert steps[-1].values == [7]


def test_initial_step_has_empty_bucket_row():
    first = run(CLASSIC)[0]
    assert first.phase is RadixPhase.INITIAL
    assert [b.key for b in first.buckets] == list(range(10))
    assert all(len(b) == 0 for b in first.buckets)
    assert first.values == CLASSIC


def test_distribute_fills_buckets_one_element_at_a_time():
    steps = run(CLASSIC)
    first_pass = [s for s in steps if s.phase is RadixPhase.DISTRIBUTE and s.digit_position == 0]
    assert len(first_pass) == len(CLASSIC)
    for k, step in enumerate(first_pass):
        assert step.current_element_index == k
        assert sum(len(b) for b in step.buckets) == k + 1
        active = [el for el in step.array if el.is_active]
        assert len(active) == 1
        assert active[0].current_digit == CLASSIC[k] % 10
    last = first_pass[-1]
    assert [el.value for el in last.buckets[0].elements] == [170, 90]
    assert [el.value for el in last.buckets[5].elements] == [45, 75]


def test_collect_empties_buckets_and_reorders():
    steps = run(CLASSIC)
    collect = next(s for s in steps if s.phase is RadixPhase.COLLECT)
    assert collect.digit_position == 0
    assert collect.values == [170, 90, 802, 2, 24, 45, 75, 66]
    assert all(len(b) == 0 for b in collect.buckets)
    assert collect.current_element_index is None


def test_string_bucket_row_uses_present_keys():
    steps = run(["bb", "a", "ccc"])
    second_pass = next(s for s in steps if s.phase is RadixPhase.DISTRIBUTE and s.digit_position == 1)
    assert [b.label for b in second_pass.buckets] == ["Empty", "b", "c"]


def test_complete_step():
    last = run(CLASSIC)[-1]
    assert last.is_final
    assert last.buckets == ()
    assert last.digit_position == 2
    assert not any(el.is_active for el in last.array)


@pytest.mark.parametrize("order", [ASC, DESC])
def test_equal_keys_keep_input_order(order):
    els = make_elements([5, 3, 5, 5, 1])
    fives = [e.id for e in els if e.value == 5]
    final = generate_steps("radix", els, order)[-1]
    assert [el.id for el in final.array if el.value == 5] == fives


def test_ids_preserved_across_passes():
    els = make_elements(CLASSIC)
    by_id = {e.id: e.value for e in els}
    for step in generate_steps("radix", els, ASC):
        assert {el.id: el.value for el in step.array} == by_id


def test_to_dict():
    data = run(["ab", "b"])[1].to_dict()
    assert data["phase"] == "distribute"
    assert data["buckets"][0]["label"] in ("Empty", "b")
    assert data["current_element_index"] == 0
