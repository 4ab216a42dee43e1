"""
insertion.py — Insertion Sort
==============================
Grows a sorted prefix one element at a time.  The selected key walks
left one adjacent shift at a time until the element to its left no
longer belongs after it.  Every comparison (including the final one
that stops the walk) gets its own step.
"""

from typing import Generator, List, Sequence

from elements import Element, ElementStatus
from sorting.step import Phase, SortStep, StepBuilder, format_value, order_words, should_swap, validate_order


PSEUDOCODE: List[str] = [
    "def insertion_sort(arr):",                          # 0
    "    for i in 1 .. n-1:",                            # 1
    "        key ← arr[i]",                              # 2
    "        j ← i - 1",                                 # 3
    "        while j ≥ 0 and out_of_order(arr[j], key):",# 4
    "            shift arr[j] one place right",          # 5
    "            j ← j - 1",                             # 6
    "        arr[j+1] ← key",                            # 7
    "    return arr",                                    # 8
]


def insertion_sort(elements: Sequence[Element], order: str = "asc") -> Generator[SortStep, None, None]:
    validate_order(order)
    words = order_words(order)
    sb = StepBuilder(elements)
    n  = len(sb)

    yield sb.initial("Insertion Sort", "The first element on its own is already a sorted prefix.")

    if n:
        sb.mark_sorted(0)

    for i in range(1, n):
        key = sb.arr[i]
        key_label = format_value(key.value)
        yield sb.build(
            Phase.SELECT, (i,), ElementStatus.PIVOT,
            f"Selected {key_label} to insert",
            "Taking the next unsorted element to place it in the sorted portion.",
            line=2,
        )

        j = i - 1
        while j >= 0:
            left = sb.label(j)
            out_of_order = should_swap(sb.value(j), key.value, order)
            if out_of_order:
                detail = f"{left} is {words['opposite']} than {key_label}, so it shifts right."
            else:
                detail = f"{left} is not {words['opposite']} than {key_label}, so {key_label} stops here."
            yield sb.build(
                Phase.COMPARE, (j, j + 1), ElementStatus.COMPARING,
                f"Comparing {left} with key {key_label}",
                detail,
                line=4,
            )
            if not out_of_order:
                break

            sb.swap(j, j + 1)
            yield sb.build(
                Phase.SWAP, (j, j + 1), ElementStatus.SWAPPING,
                f"Shifting {left} right",
                "Moving a sorted element one place right to make space for the key.",
                line=5,
            )
            j -= 1

        sb.mark_sorted(*range(i + 1))
        yield sb.build(
            Phase.SORTED, (j + 1,), ElementStatus.SORTED,
            f"Inserted {key_label} at position {j + 1}",
            f"Positions 0-{i} now form a sorted prefix.",
            line=7,
        )

    yield sb.complete(line=8)
