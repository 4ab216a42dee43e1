"""Tests for the element and bucket value types."""

import dataclasses

import pytest

from elements import (
    PADDING,
    PADDING_LABEL,
    Bucket,
    Element,
    ElementStatus,
    RadixElement,
    bucket_label,
    empty_buckets,
    is_text_mode,
    make_elements,
)


def test_make_elements_assigns_unique_ids():
    els = make_elements([5, 5, 5, 1])
    assert [e.value for e in els] == [5, 5, 5, 1]
    assert len({e.id for e in els}) == 4
    assert all(e.status is ElementStatus.DEFAULT for e in els)


def test_make_elements_ids_differ_between_calls():
    a = make_elements([1, 2])
    b = make_elements([1, 2])
    assert {e.id for e in a}.isdisjoint({e.id for e in b})


def test_element_is_frozen():
    el = Element(value=3, id="x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        el.value = 4


def test_with_status_returns_new_instance():
    el = Element(value=3, id="x")
    marked = el.with_status(ElementStatus.PIVOT)
    assert marked is not el
    assert marked.status is ElementStatus.PIVOT
    assert el.status is ElementStatus.DEFAULT
    assert el.with_status(ElementStatus.DEFAULT) is not el


def test_element_to_dict():
    assert Element(value="ab", id="0-a", status=ElementStatus.SORTED).to_dict() == {
        "id": "0-a", "value": "ab", "status": "sorted",
    }


def test_radix_element_activate_and_clear():
    el = RadixElement.from_element(Element(value=170, id="0-a"))
    active = el.activate(7)
    assert active.is_active and active.current_digit == 7
    assert active.id == el.id
    cleared = active.cleared()
    assert not cleared.is_active and cleared.current_digit is None


def test_is_text_mode():
    assert is_text_mode(["a", "b"])
    assert not is_text_mode([1, 2])
    assert not is_text_mode([])


def test_padding_sorts_lowest_and_is_labelled():
    assert sorted(["b", PADDING, "a"]) == [PADDING, "a", "b"]
    assert bucket_label(PADDING) == PADDING_LABEL == "Empty"
    assert bucket_label(7) == "7"


def test_empty_buckets():
    row = empty_buckets(range(10))
    assert [b.key for b in row] == list(range(10))
    assert all(len(b) == 0 for b in row)
    assert isinstance(row[0], Bucket)
    assert row[3].to_dict() == {"key": 3, "label": "3", "elements": []}
