"""
quick.py — Quick Sort
======================
Lomuto partitioning with the LAST element of the range as pivot.  No
randomisation and no median-of-three, so the step list is fully
determined by the input.

Sorted positions appear one at a time: each pivot is final as soon as
its partition ends, and a one-element range is final on its own.
Placing the pivot is always a SORTED step, even when it moves, so SWAP
steps (and the swap metric) count partition swaps only.
"""

from typing import Generator, List, Sequence

from elements import Element, ElementStatus
from sorting.step import Phase, SortStep, StepBuilder, order_words, should_swap, validate_order


PSEUDOCODE: List[str] = [
    "def quick_sort(arr, lo, hi):",               # 0
    "    if lo < hi:",                            # 1
    "        p ← partition(arr, lo, hi)",         # 2
    "        quick_sort(arr, lo, p-1)",           # 3
    "        quick_sort(arr, p+1, hi)",           # 4
    "    elif lo == hi: arr[lo] is in place",     # 5
    "def partition(arr, lo, hi):",                # 6
    "    pivot ← arr[hi]",                        # 7
    "    i ← lo - 1",                             # 8
    "    for j in lo .. hi-1:",                   # 9
    "        if out_of_order(pivot, arr[j]):",    # 10
    "            i ← i + 1; swap(arr[i], arr[j])",# 11
    "    swap(arr[i+1], arr[hi])",                # 12
    "    return i + 1",                           # 13
]


def quick_sort(elements: Sequence[Element], order: str = "asc") -> Generator[SortStep, None, None]:
    validate_order(order)
    sb = StepBuilder(elements)

    yield sb.initial("Quick Sort", "Divide and conquer around pivots.")
    yield from _sort_range(sb, 0, len(sb) - 1, order)
    yield sb.complete(line=0)


def _sort_range(sb: StepBuilder, lo: int, hi: int, order: str) -> Generator[SortStep, None, None]:
    if lo < hi:
        p = yield from _partition(sb, lo, hi, order)
        yield from _sort_range(sb, lo, p - 1, order)
        yield from _sort_range(sb, p + 1, hi, order)
    elif lo == hi:
        sb.mark_sorted(lo)
        yield sb.build(
            Phase.SORTED, (lo,), ElementStatus.SORTED,
            f"Position {lo} is sorted",
            "Single element range is already sorted.",
            line=5,
        )


def _partition(sb: StepBuilder, lo: int, hi: int, order: str) -> Generator[SortStep, None, int]:
    words = order_words(order)
    pivot = sb.arr[hi]
    pivot_label = sb.label(hi)

    yield sb.build(
        Phase.PARTITION, (hi,), ElementStatus.PIVOT,
        f"Chosen pivot: {pivot_label}",
        f"Everything {words['comparative']} than the pivot will move to the left of it.",
        line=7,
    )

    i = lo - 1
    for j in range(lo, hi):
        condition = should_swap(pivot.value, sb.value(j), order)
        yield sb.build(
            Phase.COMPARE, (j, hi),
            explanation=f"Comparing {sb.label(j)} with pivot {pivot_label}",
            detailed=f"Is {sb.label(j)} {words['symbol']} {pivot_label}? {'Yes' if condition else 'No'}.",
            line=10,
            highlight={j: ElementStatus.COMPARING, hi: ElementStatus.PIVOT},
        )
        if condition:
            i += 1
            if i != j:
                sb.swap(i, j)
                yield sb.build(
                    Phase.SWAP, (i, j),
                    explanation=f"Swapping {sb.label(i)} (idx {i}) and {sb.label(j)} (idx {j})",
                    detailed=f"{sb.label(i)} belongs with the {words['comparative']} values, "
                             f"so it moves into the left partition.",
                    line=11,
                    highlight={i: ElementStatus.SWAPPING, j: ElementStatus.SWAPPING, hi: ElementStatus.PIVOT},
                )

    p = i + 1
    sb.mark_sorted(p)
    if p != hi:
        sb.swap(p, hi)
        yield sb.build(
            Phase.SORTED, (p, hi),
            explanation=f"Placing pivot {pivot_label} at index {p}",
            detailed="The pivot now sits between the two partitions. It is sorted.",
            line=12,
            highlight={p: ElementStatus.SORTED, hi: ElementStatus.SWAPPING},
        )
    else:
        yield sb.build(
            Phase.SORTED, (p,), ElementStatus.SORTED,
            f"Pivot {pivot_label} stays at index {p}",
            "Nothing belongs after the pivot, so it is already in its final place.",
            line=12,
        )
    return p
