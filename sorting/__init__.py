"""
sorting/__init__.py — Algorithm Registry
=========================================
Single source of truth for every sorting algorithm the visualizer knows.

    from sorting import REGISTRY, get_algorithm, generate_steps

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, family, stable, …),
        …
    }

Every `fn` is a generator taking (elements, order) and yielding steps.
Adding an algorithm means writing the generator and adding one entry
here.  The playback engine and the API both consume this registry.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Union

from elements import Element
from sorting.step import ASC, DESC, ORDERS, Phase, RadixPhase, RadixStep, SortStep, should_swap

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from sorting.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from sorting.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from sorting.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from sorting.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from sorting.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from sorting.radix     import radix_sort     as _radix,     PSEUDOCODE as _radix_pc

logger = logging.getLogger(__name__)

Step = Union[SortStep, RadixStep]

COMPARISON = "comparison"
DISTRIBUTION = "distribution"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                   # registry key, e.g. "bubble"
    label:            str                   # human label, e.g. "Bubble Sort"
    fn:               Callable              # the generator function
    pseudocode:       List[str]             # lines for the side-panel
    family:           str       = COMPARISON
    stable:           bool      = False
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str       = ""        # average case
    complexity_space: str       = ""
    description:      str       = ""

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "family":           self.family,
            "stable":           self.stable,
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
            "pseudocode":       list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        stable=True, tags=["quadratic", "in-place", "adaptive"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs. Stops early on a clean pass.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        tags=["quadratic", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Selects the extreme of the unsorted part and swaps it to the front.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        stable=True, tags=["quadratic", "in-place", "adaptive"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Grows a sorted prefix by walking each new key left into place.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        stable=True, tags=["divide-and-conquer"],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits in halves, sorts each recursively, merges the sorted halves.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        tags=["divide-and-conquer", "in-place"],
        complexity_time="O(n log n)", complexity_space="O(log n)",
        description="Partitions around the last element as pivot, then recurses on both sides.",
    ),

    "radix": AlgoInfo(
        key="radix", label="Radix Sort (LSD)", fn=_radix, pseudocode=_radix_pc,
        family=DISTRIBUTION, stable=True, tags=["non-comparison", "buckets"],
        complexity_time="O(d × n)", complexity_space="O(n + k)",
        description="Distributes by one digit or character at a time, right to left.",
    ),
}

COMPARISON_ALGORITHMS: List[str] = [k for k, a in REGISTRY.items() if a.family == COMPARISON]


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms(family: Optional[str] = None) -> List[AlgoInfo]:
    """Return registered algorithms in insertion order, optionally one family only."""
    return [a for a in REGISTRY.values() if family is None or a.family == family]


def generate_steps(key: str, elements: Sequence[Element], order: str = ASC) -> List[Step]:
    """Run one algorithm to completion and return its full step list."""
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")
    steps = list(info.fn(elements, order))
    logger.debug("generated %s/%s: n=%d steps=%d", key, order, len(elements), len(steps))
    return steps


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "COMPARISON",
    "DISTRIBUTION",
    "COMPARISON_ALGORITHMS",
    "ASC",
    "DESC",
    "ORDERS",
    "Phase",
    "RadixPhase",
    "SortStep",
    "RadixStep",
    "Step",
    "get_algorithm",
    "list_algorithms",
    "generate_steps",
    "should_swap",
]
