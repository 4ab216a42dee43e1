"""Tests for the algorithm registry."""

from sorting import (
    COMPARISON,
    COMPARISON_ALGORITHMS,
    DISTRIBUTION,
    REGISTRY,
    get_algorithm,
    list_algorithms,
)


def test_all_algorithms_registered():
    assert set(REGISTRY) == {"bubble", "selection", "insertion", "merge", "quick", "radix"}


def test_comparison_family():
    assert COMPARISON_ALGORITHMS == ["bubble", "selection", "insertion", "merge", "quick"]
    assert [a.key for a in list_algorithms(DISTRIBUTION)] == ["radix"]
    assert len(list_algorithms(COMPARISON)) == 5
    assert len(list_algorithms()) == 6


def test_get_algorithm():
    assert get_algorithm("merge").label == "Merge Sort"
    assert get_algorithm("nope") is None


def test_stability_flags():
    stable = {a.key for a in list_algorithms() if a.stable}
    assert stable == {"bubble", "insertion", "merge", "radix"}


def test_pseudocode_lines_cover_step_lines():
    from elements import make_elements
    from sorting import generate_steps

    for info in list_algorithms():
        steps = generate_steps(info.key, make_elements([3, 1, 2, 10]), "asc")
        assert all(0 <= s.pseudocode_line < len(info.pseudocode) for s in steps), info.key


def test_to_dict_is_serialisable():
    data = get_algorithm("radix").to_dict()
    assert data["family"] == "distribution"
    assert "fn" not in data
    assert isinstance(data["pseudocode"], list)
