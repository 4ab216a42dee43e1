"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a SortStep at every meaningful event:
  1. Compare an adjacent pair
  2. Swap the pair if it is out of order
  3. Pass end  →  the element at n-1-i is fixed in place
  4. A pass without swaps  →  early exit, everything left is sorted
"""

from typing import Generator, List, Sequence

from elements import Element, ElementStatus
from sorting.step import Phase, SortStep, StepBuilder, order_words, should_swap, validate_order


PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",                          # 0
    "    for i in 0 .. n-2:",                         # 1
    "        swapped ← false",                        # 2
    "        for j in 0 .. n-i-2:",                   # 3
    "            if out_of_order(arr[j], arr[j+1]):", # 4
    "                swap(arr[j], arr[j+1])",         # 5
    "                swapped ← true",                 # 6
    "        arr[n-1-i] is now in place",             # 7
    "        if not swapped: break",                  # 8
    "    return arr",                                 # 9
]


def bubble_sort(elements: Sequence[Element], order: str = "asc") -> Generator[SortStep, None, None]:
    """
    Yields SortStep snapshots for every event during bubble sort.

    Args:
        elements : Input sequence (never mutated).
        order    : "asc" or "desc".
    """
    validate_order(order)
    words = order_words(order)
    sb = StepBuilder(elements)
    n  = len(sb)

    yield sb.initial("Bubble Sort", "Adjacent pairs are compared and swapped until no pair is out of order.")

    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            a, b = sb.label(j), sb.label(j + 1)
            yield sb.build(
                Phase.COMPARE, (j, j + 1), ElementStatus.COMPARING,
                f"Comparing {a} and {b}",
                f"Checking if {a} should come after {b}.",
                line=4,
            )
            if should_swap(sb.value(j), sb.value(j + 1), order):
                sb.swap(j, j + 1)
                swapped = True
                yield sb.build(
                    Phase.SWAP, (j, j + 1), ElementStatus.SWAPPING,
                    f"Swapping {a} and {b}",
                    f"{a} is {words['opposite']} than {b}, so we swap them.",
                    line=5,
                )

        fixed = n - 1 - i
        sb.mark_sorted(fixed)
        yield sb.build(
            Phase.SORTED, (fixed,), ElementStatus.SORTED,
            f"{sb.label(fixed)} is now sorted",
            f"The {words['opposite_superlative']} remaining element has bubbled up to position {fixed}.",
            line=7,
        )

        if not swapped:
            remaining = tuple(range(fixed))
            sb.mark_sorted(*remaining)
            yield sb.build(
                Phase.EARLY_EXIT, remaining, ElementStatus.SORTED,
                "Optimization triggered",
                "No swaps occurred in this pass, so the array is already sorted.",
                line=8,
            )
            break

    yield sb.complete(line=9)
