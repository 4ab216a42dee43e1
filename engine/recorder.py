"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete sorting run (all steps), then computes the metrics
for an analytics panel and for side-by-side comparison of two
algorithms on the same input.

Usage:
    rec = Recorder()
    rec.start(algo_key="quick", values=[5, 3, 8, 1], order="desc")
    rec.run_to_completion()          # plays the Stepper to the end
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot

Comparison Mode:
    Hold two Recorders, run both on the SAME values, then call
    compare(rec1, rec2) → ComparisonResult.
"""

import time
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from elements import Value
from sorting import ASC, AlgoInfo, Step, get_algorithm
from engine.stepper import Stepper


# ---------------------------------------------------------------------------
# Metrics dataclass — what an analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    order:         str   = ASC
    input_size:    int   = 0
    total_steps:   int   = 0
    comparisons:   int   = 0        # compare steps
    swaps:         int   = 0        # swap / shift steps
    writes:        int   = 0        # placements without movement (merge)
    distributions: int   = 0        # radix: elements dropped into buckets
    passes:        int   = 0        # radix: collect steps
    stable:        bool  = False
    wall_time_ms:  float = 0.0      # wall-clock time to generate all steps
    phase_counts:  Dict[str, int] = field(default_factory=dict)

    @property
    def moves(self) -> int:
        return self.swaps + self.writes + self.distributions


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:       str = ""   # which algo needed fewer steps
    winner_comparisons: str = ""
    winner_moves:       str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left":               asdict(self.left),
            "right":              asdict(self.right),
            "winner_steps":       self.winner_steps,
            "winner_comparisons": self.winner_comparisons,
            "winner_moves":       self.winner_moves,
        }


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : The underlying Stepper (for live step-by-step access).
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._algo_info:  Optional[AlgoInfo] = None
        self._values:     List[Value]        = []
        self._order:      str                = ASC
        self._start_time: float              = 0.0

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: Sequence[Value], order: str = ASC) -> None:
        """Validate the input and prepare a Stepper for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._order     = order
        self.steps      = []
        self.metrics    = None

        self._start_time = time.monotonic()
        self.stepper = Stepper(values, algo_key, order)
        self._values = list(self.stepper.values)

    def run_to_completion(self) -> RunMetrics:
        """Jump the Stepper to the end, record every step, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        self.stepper.jump_to_end()
        self.steps = list(self.stepper.steps)

        wall_ms = (time.monotonic() - self._start_time) * 1000
        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "order":    self._order,
            "values":   list(self._values),
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info   = self._algo_info
        phases = Counter(s.phase.value for s in self.steps)

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            order=self._order,
            input_size=len(self._values),
            total_steps=len(self.steps),
            comparisons=phases.get("compare", 0),
            swaps=phases.get("swap", 0),
            writes=phases.get("overwrite", 0),
            distributions=phases.get("distribute", 0),
            passes=phases.get("collect", 0),
            stable=info.stable if info else False,
            wall_time_ms=round(wall_ms, 2),
            phase_counts=dict(phases),
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps=winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_moves=winner(l.moves, r.moves, l.algo_label, r.algo_label),
    )
