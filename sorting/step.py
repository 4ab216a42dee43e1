"""
step.py — Sort Step Snapshots
==============================
Every sorting algorithm is a generator that yields step objects.
A step is a frozen-in-time picture of everything the visualizer needs
to render one frame:

    • The FULL element sequence, with a status per element
    • Which positions the action touched (compared / swapped / placed)
    • For radix sort: the bucket row and the element being distributed
    • Which line of pseudocode is executing right now
    • A short and a long plain-English explanation

Design decisions:
  - Steps are frozen dataclasses holding tuples of frozen elements.
    Nothing a generator does after yielding can reach back into a step
    already handed out, so the player can jump to any index at random.
  - Full copies, not diffs.  Memory is cheap at n ≤ 200; random seek is
    the point.
  - StepBuilder is the only writer.  It owns the working array and the
    set of positions already known to be sorted; the status of every
    element in a snapshot is derived from those plus per-step highlights.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from elements import Bucket, Element, ElementStatus, RadixElement, Value

ASC  = "asc"
DESC = "desc"
ORDERS: Tuple[str, ...] = (ASC, DESC)


# ---------------------------------------------------------------------------
# Phases
# ---------------------------------------------------------------------------
class Phase(Enum):
    INITIAL    = "initial"
    SPLIT      = "split"        # merge sort: dividing a range
    MERGE      = "merge"        # merge sort: start merging a range
    PARTITION  = "partition"    # quick sort: pivot chosen
    SELECT     = "select"       # selection extreme / insertion key picked
    COMPARE    = "compare"
    SWAP       = "swap"
    OVERWRITE  = "overwrite"    # placed without moving
    SORTED     = "sorted"       # one or more positions became final
    EARLY_EXIT = "early_exit"   # bubble sort pass without swaps
    COMPLETE   = "complete"


class RadixPhase(Enum):
    INITIAL    = "initial"
    DISTRIBUTE = "distribute"
    COLLECT    = "collect"
    COMPLETE   = "complete"


# ---------------------------------------------------------------------------
# Comparator & formatting helpers
# ---------------------------------------------------------------------------
def validate_order(order: str) -> str:
    if order not in ORDERS:
        raise ValueError(f"Unknown sort order: {order!r} (expected 'asc' or 'desc')")
    return order


def should_swap(a: Value, b: Value, order: str) -> bool:
    """True when `a` must come after `b` under `order`."""
    if order == ASC:
        return a > b
    return a < b


def format_value(value: Value) -> str:
    return f'"{value}"' if isinstance(value, str) else str(value)


def order_words(order: str) -> Dict[str, str]:
    """Direction-dependent vocabulary for explanations."""
    if order == ASC:
        return {"extreme": "minimum", "superlative": "smallest", "comparative": "smaller",
                "opposite": "larger", "opposite_superlative": "largest", "symbol": "<"}
    return {"extreme": "maximum", "superlative": "largest", "comparative": "larger",
            "opposite": "smaller", "opposite_superlative": "smallest", "symbol": ">"}


# ---------------------------------------------------------------------------
# Comparison-sort step
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SortStep:
    """
    Attributes:
        step_number          : 0-based index of this step in the run.
        phase                : What just happened (Phase).
        array                : Every element, with its status for this frame.
        indices              : Positions involved in the action.
        explanation          : One-line caption.
        detailed_explanation : Longer "why" text.
        pseudocode_line      : 0-based index into the algorithm's PSEUDOCODE.
        metrics              : Running tally: comparisons, swaps, writes.
    """

    step_number:          int                 = 0
    phase:                Phase               = Phase.INITIAL
    array:                Tuple[Element, ...] = field(default_factory=tuple)
    indices:              Tuple[int, ...]     = field(default_factory=tuple)
    explanation:          str                 = ""
    detailed_explanation: str                 = ""
    pseudocode_line:      int                 = 0
    metrics:              Dict[str, int]      = field(default_factory=dict)

    @property
    def is_final(self) -> bool:
        return self.phase is Phase.COMPLETE

    @property
    def values(self) -> List[Value]:
        return [el.value for el in self.array]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":          self.step_number,
            "phase":                self.phase.value,
            "array":                [el.to_dict() for el in self.array],
            "indices":              list(self.indices),
            "explanation":          self.explanation,
            "detailed_explanation": self.detailed_explanation,
            "pseudocode_line":      self.pseudocode_line,
            "metrics":              dict(self.metrics),
            "is_final":             self.is_final,
        }


# ---------------------------------------------------------------------------
# Radix-sort step
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class RadixStep:
    """
    Attributes:
        step_number           : 0-based index of this step in the run.
        phase                 : RadixPhase.
        digit_position        : 0 = least significant digit / last character.
        digit_name            : "units", "tens", … or "last character", …
        array                 : Every element in current order.
        buckets               : Bucket row for this position (empty on complete).
        current_element_index : Element being distributed, else None.
        explanation           : One-line caption.
        detailed_explanation  : Longer "why" text.
        pseudocode_line       : 0-based index into radix PSEUDOCODE.
    """

    step_number:           int                      = 0
    phase:                 RadixPhase               = RadixPhase.INITIAL
    digit_position:        int                      = 0
    digit_name:            str                      = ""
    array:                 Tuple[RadixElement, ...] = field(default_factory=tuple)
    buckets:               Tuple[Bucket, ...]       = field(default_factory=tuple)
    current_element_index: Optional[int]            = None
    explanation:           str                      = ""
    detailed_explanation:  str                      = ""
    pseudocode_line:       int                      = 0

    @property
    def is_final(self) -> bool:
        return self.phase is RadixPhase.COMPLETE

    @property
    def values(self) -> List[Value]:
        return [el.value for el in self.array]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":           self.step_number,
            "phase":                 self.phase.value,
            "digit_position":        self.digit_position,
            "digit_name":            self.digit_name,
            "array":                 [el.to_dict() for el in self.array],
            "buckets":               [b.to_dict() for b in self.buckets],
            "current_element_index": self.current_element_index,
            "explanation":           self.explanation,
            "detailed_explanation":  self.detailed_explanation,
            "pseudocode_line":       self.pseudocode_line,
            "is_final":              self.is_final,
        }


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to spell out every snapshot
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that comparison-sort generators use to build steps.

    Usage inside an algorithm generator:
        sb = StepBuilder(elements)
        yield sb.build(Phase.COMPARE, (j, j + 1), ElementStatus.COMPARING,
                       "Comparing 3 and 1", "…", line=4)
        sb.swap(j, j + 1)
    """

    def __init__(self, elements: Sequence[Element]):
        # working copy; statuses live in sorted_positions, not on the elements
        self.arr:              List[Element]  = [Element(value=e.value, id=e.id) for e in elements]
        self.sorted_positions: Set[int]       = set()
        self.metrics:          Dict[str, int] = {"comparisons": 0, "swaps": 0, "writes": 0}
        self._step_no:         int            = 0

    def __len__(self) -> int:
        return len(self.arr)

    # -- mutation helpers --
    def swap(self, i: int, j: int) -> None:
        self.arr[i], self.arr[j] = self.arr[j], self.arr[i]

    def mark_sorted(self, *positions: int) -> None:
        self.sorted_positions.update(positions)

    def mark_all_sorted(self) -> None:
        self.sorted_positions.update(range(len(self.arr)))

    def value(self, idx: int) -> Value:
        return self.arr[idx].value

    def label(self, idx: int) -> str:
        return format_value(self.arr[idx].value)

    # -- snapshot --
    def build(
        self,
        phase: Phase,
        indices: Iterable[int] = (),
        status: Optional[ElementStatus] = None,
        explanation: str = "",
        detailed: str = "",
        line: int = 0,
        highlight: Optional[Dict[int, ElementStatus]] = None,
    ) -> SortStep:
        indices = tuple(indices)
        statuses = [
            ElementStatus.SORTED if idx in self.sorted_positions else ElementStatus.DEFAULT
            for idx in range(len(self.arr))
        ]
        if highlight is None:
            highlight = {idx: status for idx in indices} if status is not None else {}
        for idx, st in highlight.items():
            statuses[idx] = st

        if phase is Phase.COMPARE:
            self.metrics["comparisons"] += 1
        elif phase is Phase.SWAP:
            self.metrics["swaps"] += 1
        elif phase is Phase.OVERWRITE:
            self.metrics["writes"] += 1

        step = SortStep(
            step_number=self._step_no,
            phase=phase,
            array=tuple(el.with_status(st) for el, st in zip(self.arr, statuses)),
            indices=indices,
            explanation=explanation,
            detailed_explanation=detailed,
            pseudocode_line=line,
            metrics=dict(self.metrics),
        )
        self._step_no += 1
        return step

    def initial(self, algo_label: str, detail: str, line: int = 0) -> SortStep:
        n = len(self.arr)
        return self.build(
            Phase.INITIAL,
            explanation=f"Starting {algo_label}",
            detailed=f"We have {n} element{'s' if n != 1 else ''} to sort. {detail}",
            line=line,
        )

    def complete(self, line: int) -> SortStep:
        self.mark_all_sorted()
        return self.build(
            Phase.COMPLETE,
            explanation="Sort Complete!",
            detailed="All elements are sorted.",
            line=line,
        )
