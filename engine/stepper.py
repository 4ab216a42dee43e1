"""
stepper.py — Step-by-Step Playback Engine
==========================================
A Stepper is the ONLY object a front end interacts with during a run.
It owns the input, the materialised step list, the current index and the
autoplay timer, and exposes a start/next/prev/reset/autoplay/speed API.

State machine:
    IDLE      →  start() / next_step()  →  READY
    READY     →  toggle_autoplay()      →  PLAYING
    PLAYING   →  toggle_autoplay()      →  READY
    PLAYING   →  (last step reached)    →  FINISHED
    IDLE      →  toggle_autoplay()      →  start(), then PLAYING
    any       →  reset()                →  IDLE   (step list kept)
    any       →  set_input / set_algorithm / set_order
                                        →  IDLE   (step list regenerated)

Steps are generated EAGERLY, in one call, whenever the input, algorithm
or order changes.  Navigation only ever moves the index.

Threading:
  Autoplay runs on a background timer thread that calls tick().  Every
  public method takes the instance lock, and starting a timer always
  cancels the previous one first, so at most one timer per Stepper is
  ever live.  A cancelled timer whose thread is already blocked on the
  lock is recognised by identity and its tick is dropped.
"""

import logging
import threading
from enum import Enum
from typing import Callable, List, Optional, Sequence

from elements import Element, Value, make_elements
from engine.inputs import validate_values
from sorting import (
    ASC,
    COMPARISON,
    COMPARISON_ALGORITHMS,
    Step,
    generate_steps,
    get_algorithm,
)
from sorting.radix import max_positions
from sorting.step import validate_order

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlaybackState(Enum):
    IDLE     = "idle"
    READY    = "ready"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1500,   # teaching mode
    "medium": 1000,
    "normal": 500,
    "fast":   250,    # demo mode
    "turbo":  100,
}

DEFAULT_COMPARISON_SPEED: int = 500
DEFAULT_RADIX_SPEED:      int = 1000

DEFAULT_COMPARISON_INPUT: List[Value] = [50, 20, 90, 10, 30]
DEFAULT_RADIX_INPUT:      List[Value] = [170, 45, 75, 90, 802, 24, 2, 66]


# ---------------------------------------------------------------------------
# Autoplay timer
# ---------------------------------------------------------------------------
class AutoplayTimer:
    """
    Repeating timer: calls `callback` every `interval_ms` until cancelled.

    The Event doubles as the cancellation token; cancel() never joins, so
    it is safe to call from inside the callback itself.
    """

    def __init__(self, interval_ms: int, callback: Callable[[], object]):
        self.interval_ms = interval_ms
        self.callback    = callback
        self._cancelled  = threading.Event()
        self._thread     = threading.Thread(target=self._run, name="autoplay", daemon=True)

    def start(self) -> "AutoplayTimer":
        self._thread.start()
        return self

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def _run(self) -> None:
        while not self._cancelled.wait(self.interval_ms / 1000.0):
            self.callback()


TimerFactory = Callable[[int, Callable[[], object]], AutoplayTimer]


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        values      : Raw input values.
        elements    : Input wrapped as Elements (ids fixed for the input's lifetime).
        algorithm   : Registry key of the algorithm being played.
        order       : "asc" or "desc".
        steps       : Full step list for (values, algorithm, order).
        current_idx : Index into `steps` currently displayed; -1 when idle.
        state       : Current PlaybackState.
        speed       : Milliseconds between autoplay ticks.
        on_step     : Optional callback(Step) fired every time the current step changes.
    """

    def __init__(
        self,
        values: Sequence[Value],
        algorithm: str,
        order: str = ASC,
        speed: int = DEFAULT_COMPARISON_SPEED,
        on_step: Optional[Callable[[Step], None]] = None,
        timer_factory: Optional[TimerFactory] = None,
    ):
        if get_algorithm(algorithm) is None:
            raise ValueError(f"Unknown algorithm: {algorithm}")
        self._lock = threading.RLock()
        self._timer_factory: TimerFactory = timer_factory or AutoplayTimer
        self._timer: Optional[AutoplayTimer] = None

        self.values:      List[Value]   = []
        self.elements:    List[Element] = []
        self.algorithm:   str           = algorithm
        self.order:       str           = validate_order(order)
        self.steps:       List[Step]    = []
        self.current_idx: int           = -1
        self.state:       PlaybackState = PlaybackState.IDLE
        self.speed:       int           = _check_speed(speed)
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        self.set_input(values)

    # ------------------------------------------------------------------
    # Configuration (each one regenerates from scratch)
    # ------------------------------------------------------------------
    def set_input(self, values: Sequence[Value]) -> None:
        """New values: fresh elements and ids, fresh steps, back to IDLE."""
        info = get_algorithm(self.algorithm)
        checked = validate_values(values, allow_negative=info.family == COMPARISON)
        with self._lock:
            self.values   = checked
            self.elements = make_elements(checked)
            self._regenerate()

    def set_order(self, order: str) -> None:
        validate_order(order)
        with self._lock:
            self.order = order
            self._regenerate()

    def clear(self) -> None:
        """Drop the materialised steps; the next start() regenerates them."""
        with self._lock:
            self._stop_timer()
            self.steps       = []
            self.current_idx = -1
            self.state       = PlaybackState.IDLE

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Materialise steps if needed and show step 0."""
        with self._lock:
            if not self.steps:
                self.steps = generate_steps(self.algorithm, self.elements, self.order)
            self._goto(0)
            if self.current_idx == self.last_index:
                self._finish()
            elif self.state is not PlaybackState.PLAYING:
                self.state = PlaybackState.READY

    def reset(self) -> None:
        """Back to IDLE, keeping the step list."""
        with self._lock:
            self._stop_timer()
            self.current_idx = -1
            self.state       = PlaybackState.IDLE
            logger.debug("%s: reset", self.algorithm)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  From IDLE this is start().  False at the end."""
        with self._lock:
            if self.current_idx < 0:
                self.start()
                return True
            if self.current_idx >= self.last_index:
                return False
            self._goto(self.current_idx + 1)
            self._settle()
            return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at (or before) the first step."""
        with self._lock:
            if self.current_idx <= 0:
                return False
            self._goto(self.current_idx - 1)
            self._settle()
            return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index."""
        with self._lock:
            if not self.steps:
                self.start()
            if not 0 <= idx < len(self.steps):
                return False
            self._goto(idx)
            self._settle()
            return True

    def rewind(self) -> None:
        """Jump back to step 0."""
        self.goto_step(0)

    def jump_to_end(self) -> None:
        """Jump to the final step."""
        with self._lock:
            if not self.steps:
                self.start()
            self.goto_step(self.last_index)

    # ------------------------------------------------------------------
    # Autoplay
    # ------------------------------------------------------------------
    def play(self) -> bool:
        with self._lock:
            if self.state is PlaybackState.FINISHED:
                return False
            if self.state is PlaybackState.IDLE:
                self.start()
                if self.state is PlaybackState.FINISHED:
                    return False
            self._start_timer()
            self.state = PlaybackState.PLAYING
            logger.debug("%s: playing every %d ms", self.algorithm, self.speed)
            return True

    def pause(self) -> None:
        with self._lock:
            self._stop_timer()
            if self.state is PlaybackState.PLAYING:
                self.state = PlaybackState.READY

    def toggle_autoplay(self) -> None:
        with self._lock:
            if self.state is PlaybackState.PLAYING:
                self.pause()
            else:
                self.play()

    def tick(self) -> bool:
        """
        One autoplay step.  Advances one step while PLAYING; reaching the
        last step stops the timer.  Returns True if a step was taken.
        """
        with self._lock:
            if self.state is not PlaybackState.PLAYING:
                return False
            if self.current_idx >= self.last_index:
                self._finish()
                return False
            self._goto(self.current_idx + 1)
            if self.current_idx == self.last_index:
                self._finish()
            return True

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, milliseconds: int) -> None:
        with self._lock:
            self.speed = _check_speed(milliseconds)
            if self.state is PlaybackState.PLAYING:
                self._start_timer()

    def set_speed_preset(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset!r}")
        self.set_speed(SPEED_PRESETS[preset])

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def last_index(self) -> int:
        return len(self.steps) - 1

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def has_started(self) -> bool:
        return self.current_idx >= 0

    @property
    def can_go_next(self) -> bool:
        return bool(self.steps) and self.current_idx < self.last_index

    @property
    def can_go_prev(self) -> bool:
        return self.current_idx > 0

    @property
    def is_playing(self) -> bool:
        return self.state is PlaybackState.PLAYING

    @property
    def is_finished(self) -> bool:
        return self.state is PlaybackState.FINISHED

    @property
    def is_complete(self) -> bool:
        step = self.current_step
        return step is not None and step.is_final

    def to_dict(self) -> dict:
        """Serialisable view of the session for the API."""
        with self._lock:
            step = self.current_step
            return {
                "algorithm":    self.algorithm,
                "order":        self.order,
                "values":       list(self.values),
                "state":        self.state.value,
                "speed":        self.speed,
                "current_step": self.current_idx,
                "total_steps":  self.total_steps,
                "has_started":  self.has_started,
                "can_go_next":  self.can_go_next,
                "can_go_prev":  self.can_go_prev,
                "is_complete":  self.is_complete,
                "step":         step.to_dict() if step is not None else None,
            }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _regenerate(self) -> None:
        self._stop_timer()
        self.steps       = generate_steps(self.algorithm, self.elements, self.order)
        self.current_idx = -1
        self.state       = PlaybackState.IDLE
        logger.debug("%s/%s: %d values → %d steps", self.algorithm, self.order,
                     len(self.values), len(self.steps))

    def _settle(self) -> None:
        """Derive READY / FINISHED after a manual move; PLAYING keeps playing."""
        if self.current_idx == self.last_index:
            self._finish()
        elif self.state is not PlaybackState.PLAYING:
            self.state = PlaybackState.READY

    def _finish(self) -> None:
        self._stop_timer()
        self.state = PlaybackState.FINISHED

    def _start_timer(self) -> None:
        self._stop_timer()
        timer = self._timer_factory(self.speed, lambda: self._tick_from(timer))
        self._timer = timer
        timer.start()

    def _tick_from(self, timer: AutoplayTimer) -> bool:
        """Timer callback; a tick from a timer that was already replaced is dropped."""
        with self._lock:
            if timer is not self._timer:
                return False
            return self.tick()

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        self._notify(self.steps[idx] if 0 <= idx < len(self.steps) else None)

    def _notify(self, step: Optional[Step]) -> None:
        if self.on_step and step is not None:
            self.on_step(step)


def _check_speed(milliseconds: int) -> int:
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, int) or milliseconds <= 0:
        raise ValueError(f"Speed must be a positive number of milliseconds, got {milliseconds!r}")
    return milliseconds


# ---------------------------------------------------------------------------
# The two controllers
# ---------------------------------------------------------------------------
class ComparisonStepper(Stepper):
    """Playback for the five comparison sorts; the algorithm is switchable."""

    def __init__(
        self,
        values: Sequence[Value] = tuple(DEFAULT_COMPARISON_INPUT),
        algorithm: str = "bubble",
        order: str = ASC,
        speed: int = DEFAULT_COMPARISON_SPEED,
        on_step: Optional[Callable[[Step], None]] = None,
        timer_factory: Optional[TimerFactory] = None,
    ):
        _check_comparison(algorithm)
        super().__init__(values, algorithm, order, speed, on_step, timer_factory)

    def set_algorithm(self, algorithm: str) -> None:
        _check_comparison(algorithm)
        with self._lock:
            self.algorithm = algorithm
            self._regenerate()


class RadixStepper(Stepper):
    """Playback for LSD radix sort (digit or character mode)."""

    def __init__(
        self,
        values: Sequence[Value] = tuple(DEFAULT_RADIX_INPUT),
        order: str = ASC,
        speed: int = DEFAULT_RADIX_SPEED,
        on_step: Optional[Callable[[Step], None]] = None,
        timer_factory: Optional[TimerFactory] = None,
    ):
        super().__init__(values, "radix", order, speed, on_step, timer_factory)

    @property
    def max_digits(self) -> int:
        return max_positions(self.values)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["max_digits"] = self.max_digits
        return data


def _check_comparison(algorithm: str) -> None:
    if algorithm not in COMPARISON_ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {algorithm}")
