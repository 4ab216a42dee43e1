"""
engine/
-------
Playback, recording and input layer.

    from engine import ComparisonStepper, RadixStepper, Recorder, compare
"""

from engine.inputs   import InputError, parse_values, random_values, validate_values
from engine.stepper  import (
    DEFAULT_COMPARISON_INPUT,
    DEFAULT_RADIX_INPUT,
    SPEED_PRESETS,
    AutoplayTimer,
    ComparisonStepper,
    PlaybackState,
    RadixStepper,
    Stepper,
)
from engine.recorder import ComparisonResult, Recorder, RunMetrics, compare

__all__ = [
    "Stepper",
    "ComparisonStepper",
    "RadixStepper",
    "PlaybackState",
    "AutoplayTimer",
    "SPEED_PRESETS",
    "DEFAULT_COMPARISON_INPUT",
    "DEFAULT_RADIX_INPUT",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "InputError",
    "parse_values",
    "random_values",
    "validate_values",
]
