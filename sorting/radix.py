"""
radix.py — LSD Radix Sort
==========================
Generator-based least-significant-digit radix sort for non-negative
integers (digit mode) or strings (character mode).

Per position, from the rightmost digit / character leftwards:
  1. Work out the bucket row for this position
  2. Distribute  →  one step per element, appended to the END of its bucket
  3. Collect     →  one step, buckets concatenated back into the array

Appending to the end of a bucket and collecting buckets in order is what
makes each pass stable, and stability of each pass is what makes the
whole sort correct.

Key rules:
  - Digit mode: key = value // 10**pos % 10, and the bucket row is
    always the fixed 0-9 range.
  - Character mode: strings are right-aligned; key = s[len-1-pos], or
    PADDING when the string is too short.  PADDING sorts lowest.  The
    bucket row is the sorted set of keys actually present.
  - Descending order reads the buckets back-to-front on collection.
    Key comparison itself is never inverted.
"""

import logging
from typing import Dict, Generator, Iterable, List, Sequence, Tuple

from elements import (
    PADDING,
    Bucket,
    DigitKey,
    Element,
    RadixElement,
    Value,
    bucket_label,
    empty_buckets,
    is_text_mode,
)
from sorting.step import ASC, RadixPhase, RadixStep, format_value, validate_order

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def radix_sort(arr):",                                 # 0
    "    for pos in 0 .. positions-1:",                     # 1
    "        buckets ← one per key present at pos",         # 2
    "        for x in arr:",                                # 3
    "            buckets[key(x, pos)].append(x)",           # 4
    "        arr ← concat(buckets)   # back-to-front for desc", # 5
    "    return arr",                                       # 6
]

DIGIT_NAMES: List[str] = ["units", "tens", "hundreds", "thousands", "ten-thousands"]


# ---------------------------------------------------------------------------
# Key helpers
# ---------------------------------------------------------------------------
def digit_name(position: int, text_mode: bool = False) -> str:
    if text_mode:
        return "last character" if position == 0 else f"character {position + 1} from the end"
    if position < len(DIGIT_NAMES):
        return DIGIT_NAMES[position]
    return f"10^{position}"


def extract_key(value: Value, position: int, text_mode: bool = False) -> DigitKey:
    if text_mode:
        text = str(value)
        idx = len(text) - 1 - position
        return text[idx] if idx >= 0 else PADDING
    return value // 10 ** position % 10


def max_positions(values: Iterable[Value]) -> int:
    """Digit count of the largest number, or the longest string length; never below 1."""
    values = list(values)
    if not values:
        return 1
    if is_text_mode(values):
        return max(len(str(v)) for v in values) or 1
    largest = max(values)
    return len(str(largest)) if largest > 0 else 1


def bucket_keys(values: Iterable[Value], position: int, text_mode: bool = False) -> List[DigitKey]:
    if not text_mode:
        return list(range(10))
    return sorted({extract_key(v, position, True) for v in values})


def _key_label(key: DigitKey, text_mode: bool) -> str:
    return f'"{key}"' if text_mode and key != PADDING else bucket_label(key)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def radix_sort(elements: Sequence[Element], order: str = "asc") -> Generator[RadixStep, None, None]:
    """
    Yields RadixStep snapshots: initial, (distribute × n, collect) per
    position, complete.

    Args:
        elements : Input sequence (never mutated).  Anything with `value`
                   and `id` attributes works.
        order    : "asc" or "desc".
    """
    validate_order(order)
    current: List[RadixElement] = [RadixElement.from_element(e) for e in elements]
    values    = [el.value for el in current]
    text_mode = is_text_mode(values)
    total     = max_positions(values)
    unit      = "character" if text_mode else "digit"
    step_no   = 0

    yield RadixStep(
        step_number=step_no,
        phase=RadixPhase.INITIAL,
        digit_position=0,
        digit_name=digit_name(0, text_mode),
        array=_snapshot(current),
        buckets=empty_buckets(bucket_keys(values, 0, text_mode)),
        explanation="Initial array ready for sorting",
        detailed_explanation=(
            f"We have {len(current)} {'strings' if text_mode else 'numbers'} to sort. "
            f"The longest has {total} {unit}(s), so we'll process {total} {unit} position(s) "
            f"from right to left."
        ),
        pseudocode_line=0,
    )
    step_no += 1

    # nothing to distribute: initial + complete only
    passes = range(total) if current else range(0)

    for pos in passes:
        name     = digit_name(pos, text_mode)
        keys     = bucket_keys((el.value for el in current), pos, text_mode)
        contents: Dict[DigitKey, List[RadixElement]] = {k: [] for k in keys}

        for i, el in enumerate(current):
            key = extract_key(el.value, pos, text_mode)
            contents[key].append(el.activate(key))
            value_label = format_value(el.value)
            key_label   = _key_label(key, text_mode)
            if key == PADDING:
                reason = f"{value_label} is too short to have a {name}, so it goes to the Empty bucket"
            else:
                reason = f"the {name} of {value_label} is {key_label}, so it goes to bucket {key_label}"

            yield RadixStep(
                step_number=step_no,
                phase=RadixPhase.DISTRIBUTE,
                digit_position=pos,
                digit_name=name,
                array=tuple(
                    other.activate(key) if idx == i else other.cleared()
                    for idx, other in enumerate(current)
                ),
                buckets=_freeze(keys, contents),
                current_element_index=i,
                explanation=f"Moving {value_label} to bucket {bucket_label(key)}",
                detailed_explanation=(
                    f"Looking at the {name}: {reason}. It joins the end of the bucket, which keeps "
                    f"the relative order from previous passes (stability)."
                ),
                pseudocode_line=4,
            )
            step_no += 1

        collect_order = keys if order == ASC else list(reversed(keys))
        current = [el.cleared() for k in collect_order for el in contents[k]]

        if pos < total - 1:
            upcoming = f"Next, we'll process the {digit_name(pos + 1, text_mode)}."
        else:
            upcoming = f"This was the last {unit} position!"
        direction = "in order" if order == ASC else "from the last bucket to the first"
        yield RadixStep(
            step_number=step_no,
            phase=RadixPhase.COLLECT,
            digit_position=pos,
            digit_name=name,
            array=_snapshot(current),
            buckets=empty_buckets(keys),
            explanation=f"Collected all elements from buckets ({name} pass complete)",
            detailed_explanation=(
                f"We've collected every bucket {direction}. After processing the {name}, "
                f"the array is partially sorted. {upcoming}"
            ),
            pseudocode_line=5,
        )
        step_no += 1

    yield RadixStep(
        step_number=step_no,
        phase=RadixPhase.COMPLETE,
        digit_position=total - 1,
        digit_name="complete",
        array=_snapshot(current),
        explanation="Sorting complete! 🎉",
        detailed_explanation=(
            f"The array is now fully sorted! We processed {total} {unit} position(s). "
            f"Radix Sort's time complexity is O(d × n) where d is the number of {unit}s "
            f"and n is the number of elements."
        ),
        pseudocode_line=6,
    )
    logger.debug("radix: n=%d mode=%s positions=%d steps=%d",
                 len(current), "text" if text_mode else "digit", total, step_no + 1)


def _snapshot(elements: Sequence[RadixElement]) -> Tuple[RadixElement, ...]:
    return tuple(el.cleared() for el in elements)


def _freeze(keys: Sequence[DigitKey], contents: Dict[DigitKey, List[RadixElement]]) -> Tuple[Bucket, ...]:
    return tuple(
        Bucket(key=k, label=bucket_label(k), elements=tuple(contents[k]))
        for k in keys
    )
