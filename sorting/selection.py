"""
selection.py — Selection Sort
==============================
Each outer iteration assumes the first unsorted element is the extreme
(minimum for asc, maximum for desc), scans the rest for a better one,
and swaps it into place.
"""

from typing import Generator, List, Sequence

from elements import Element, ElementStatus
from sorting.step import Phase, SortStep, StepBuilder, order_words, should_swap, validate_order


PSEUDOCODE: List[str] = [
    "def selection_sort(arr):",                       # 0
    "    for i in 0 .. n-2:",                         # 1
    "        best ← i",                               # 2
    "        for j in i+1 .. n-1:",                   # 3
    "            if out_of_order(arr[best], arr[j]):",# 4
    "                best ← j",                       # 5
    "        if best ≠ i:",                           # 6
    "            swap(arr[i], arr[best])",            # 7
    "        arr[i] is now in place",                 # 8
    "    return arr",                                 # 9
]


def selection_sort(elements: Sequence[Element], order: str = "asc") -> Generator[SortStep, None, None]:
    validate_order(order)
    words = order_words(order)
    sb = StepBuilder(elements)
    n  = len(sb)

    yield sb.initial(
        "Selection Sort",
        f"Each pass selects the {words['superlative']} remaining element and moves it to the front.",
    )

    for i in range(n - 1):
        best = i
        yield sb.build(
            Phase.SELECT, (i,), ElementStatus.PIVOT,
            f"Current {words['extreme']}: {sb.label(i)}",
            f"Assume the first unsorted element is the {words['extreme']}.",
            line=2,
        )

        for j in range(i + 1, n):
            yield sb.build(
                Phase.COMPARE, (best, j),
                explanation=f"Comparing {sb.label(j)} with current {words['extreme']} {sb.label(best)}",
                detailed=f"Looking for a value {words['comparative']} than {sb.label(best)}.",
                line=4,
                highlight={best: ElementStatus.PIVOT, j: ElementStatus.COMPARING},
            )
            if should_swap(sb.value(best), sb.value(j), order):
                best = j
                yield sb.build(
                    Phase.SELECT, (best,), ElementStatus.PIVOT,
                    f"Found new {words['extreme']}: {sb.label(best)}",
                    f"Updating our record of the {words['superlative']} element found so far.",
                    line=5,
                )

        if best != i:
            sb.swap(i, best)
            yield sb.build(
                Phase.SWAP, (i, best), ElementStatus.SWAPPING,
                f"Swapping {sb.label(i)} with {sb.label(best)}",
                f"Moving the {words['extreme']} into position {i}.",
                line=7,
            )

        sb.mark_sorted(i)

    yield sb.complete(line=9)
