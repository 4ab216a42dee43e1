"""
merge.py — Merge Sort
======================
Top-down merge sort on a single working array.

Merging is done in place by SWAPPING each chosen element into slot k
rather than copying into an auxiliary buffer: every element that still
has to be placed sits somewhere in [k, hi], so locating it and swapping
keeps the snapshot a permutation of the input at every step.  Elements
are located by identity, not by value, so duplicates never get mixed up
and the merge stays stable.

No position is reported as sorted until the very end; a merged half is
sorted relative to itself, not in its final place.
"""

from typing import Generator, List, Sequence

from elements import Element, ElementStatus
from sorting.step import Phase, SortStep, StepBuilder, format_value, order_words, should_swap, validate_order


PSEUDOCODE: List[str] = [
    "def merge_sort(arr, lo, hi):",                        # 0
    "    if lo ≥ hi: return",                              # 1
    "    mid ← (lo + hi) // 2",                            # 2
    "    merge_sort(arr, lo, mid)",                        # 3
    "    merge_sort(arr, mid+1, hi)",                      # 4
    "    merge(arr, lo, mid, hi)",                         # 5
    "def merge(arr, lo, mid, hi):",                        # 6
    "    while left and right both have elements:",        # 7
    "        take whichever of left[i], right[j] comes first", # 8
    "        place it at arr[k]; k ← k + 1",               # 9
    "    place whatever remains of left or right",         # 10
    "    return arr",                                      # 11
]


def merge_sort(elements: Sequence[Element], order: str = "asc") -> Generator[SortStep, None, None]:
    validate_order(order)
    sb = StepBuilder(elements)

    yield sb.initial("Merge Sort", "Recursive divide and conquer: split in halves, sort each, merge.")
    yield from _sort_range(sb, 0, len(sb) - 1, order)
    yield sb.complete(line=11)


# ---------------------------------------------------------------------------
# Recursion
# ---------------------------------------------------------------------------
def _sort_range(sb: StepBuilder, lo: int, hi: int, order: str) -> Generator[SortStep, None, None]:
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    yield sb.build(
        Phase.SPLIT, range(lo, hi + 1), ElementStatus.COMPARING,
        f"Dividing range [{lo}-{hi}]",
        f"Splitting into two halves: [{lo}-{mid}] and [{mid + 1}-{hi}]. Each half is sorted recursively.",
        line=2,
    )
    yield from _sort_range(sb, lo, mid, order)
    yield from _sort_range(sb, mid + 1, hi, order)
    yield from _merge(sb, lo, mid, hi, order)


def _merge(sb: StepBuilder, lo: int, mid: int, hi: int, order: str) -> Generator[SortStep, None, None]:
    words = order_words(order)
    left  = sb.arr[lo:mid + 1]
    right = sb.arr[mid + 1:hi + 1]
    i = j = 0
    k = lo

    yield sb.build(
        Phase.MERGE, range(lo, hi + 1), ElementStatus.COMPARING,
        f"Merging range [{lo}-{mid}] and [{mid + 1}-{hi}]",
        "Comparing elements from two sorted subarrays to merge them.",
        line=6,
    )

    while i < len(left) and j < len(right):
        a, b = left[i], right[j]
        # left wins ties, which is what keeps merge sort stable
        take_left = not should_swap(a.value, b.value, order)
        yield sb.build(
            Phase.COMPARE, (_locate(sb, a, k, hi), _locate(sb, b, k, hi)), ElementStatus.COMPARING,
            f"Comparing {format_value(a.value)} (Left) and {format_value(b.value)} (Right)",
            f"We check which value is {words['comparative']} to place it next in the merged sequence.",
            line=8,
        )
        if take_left:
            yield _place(sb, a, k, hi, "")
            i += 1
        else:
            yield _place(sb, b, k, hi, "")
            j += 1
        k += 1

    for target in left[i:]:
        yield _place(sb, target, k, hi, "remaining Left: ")
        k += 1
    for target in right[j:]:
        yield _place(sb, target, k, hi, "remaining Right: ")
        k += 1


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _locate(sb: StepBuilder, target: Element, start: int, end: int) -> int:
    for idx in range(start, end + 1):
        if sb.arr[idx] is target:
            return idx
    raise LookupError(f"{target!r} not found in [{start}-{end}]")


def _place(sb: StepBuilder, target: Element, k: int, hi: int, prefix: str) -> SortStep:
    label = format_value(target.value)
    current = _locate(sb, target, k, hi)
    if current != k:
        sb.swap(k, current)
        return sb.build(
            Phase.SWAP, (k, current), ElementStatus.SWAPPING,
            f"Moving {prefix}{label} to position {k}",
            "Placing the next element of the merged sequence into its slot.",
            line=9 if not prefix else 10,
        )
    return sb.build(
        Phase.OVERWRITE, (k,), ElementStatus.MERGED,
        f"Placed {prefix}{label} at position {k}",
        "Element was already in the correct slot.",
        line=9 if not prefix else 10,
    )
