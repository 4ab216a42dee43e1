"""
inputs.py — User Input Parsing & Validation
============================================
Turns what a user typed into a clean, homogeneous list of values the
generators can trust.

    parse_values("170, 45, 75")   → [170, 45, 75]
    parse_values("bb, a, ccc")    → ["bb", "a", "ccc"]
    random_values(random.Random(7))

Rules:
  - Comma separated; blanks are dropped.
  - If every token is an integer literal the run is numeric, otherwise
    every token is kept as a string.
  - At most MAX_ITEMS items, numbers up to MAX_NUMBER, strings up to
    MAX_STRING_LENGTH characters.
  - Radix sort additionally needs non-negative numbers.
"""

import logging
import random
import re
import string
from typing import List, Optional, Sequence

from elements import Value

logger = logging.getLogger(__name__)

MAX_ITEMS:         int = 20
MAX_NUMBER:        int = 9999
MAX_STRING_LENGTH: int = 15

_INT_TOKEN = re.compile(r"^[+-]?\d+$")


class InputError(ValueError):
    """Raised when user-supplied values cannot be visualised."""


def parse_values(text: str) -> List[Value]:
    """Parse comma separated text into ints or strings."""
    parts = [p.strip() for p in (text or "").split(",")]
    parts = [p for p in parts if p]
    if not parts:
        raise _reject("Please enter at least one item")

    if all(_INT_TOKEN.match(p) for p in parts):
        values: List[Value] = [int(p) for p in parts]
    else:
        values = parts
    return validate_values(values)


def _is_number(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _reject(message: str) -> InputError:
    logger.info("rejected input: %s", message)
    return InputError(message)


def validate_values(values: Sequence[Value], allow_negative: bool = True) -> List[Value]:
    """Check limits and homogeneity; return the values as a fresh list."""
    values = list(values)
    if len(values) > MAX_ITEMS:
        raise _reject(f"Maximum {MAX_ITEMS} items allowed for visualization")

    for v in values:
        if not (_is_number(v) or isinstance(v, str)):
            raise _reject(f"Unsupported value {v!r}: use whole numbers or short strings")

    numeric = [v for v in values if _is_number(v)]
    text    = [v for v in values if isinstance(v, str)]
    if numeric and text:
        raise _reject("Mix of numbers and strings: use one kind per run")

    for v in numeric:
        if v > MAX_NUMBER:
            raise _reject(f"Numbers must be at most {MAX_NUMBER}")
        if v < 0 and not allow_negative:
            raise _reject("Radix sort needs non-negative numbers")
    for v in text:
        if len(v) > MAX_STRING_LENGTH:
            raise _reject(f"Strings must be {MAX_STRING_LENGTH} characters or less")
    return values


def random_values(rng: Optional[random.Random] = None, text: Optional[bool] = None) -> List[Value]:
    """5-10 random items: numbers below 100 or 1000, or 2-6 letter uppercase strings."""
    rng = rng or random.Random()
    if text is None:
        text = rng.random() > 0.5
    count = rng.randint(5, 10)

    if not text:
        upper = 999 if rng.random() > 0.5 else 99
        return [rng.randint(1, upper) for _ in range(count)]
    return [
        "".join(rng.choice(string.ascii_uppercase) for _ in range(rng.randint(2, 6)))
        for _ in range(count)
    ]
