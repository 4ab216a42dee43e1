"""
bucket.py — Radix Buckets
==========================
A Bucket is one distribution target for the current digit / character
position.  Keys are:

    • 0-9          – numeric mode (the row is always the full 0-9 range)
    • a character  – character mode
    • PADDING      – character mode, string too short for this position

PADDING is the empty string.  It compares lower than every real
character, so sorting a mixed set of keys puts the "Empty" bucket first
without any special casing.
"""

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from elements.element import DigitKey, RadixElement

PADDING: str = ""
PADDING_LABEL: str = "Empty"


def bucket_label(key: DigitKey) -> str:
    if key == PADDING:
        return PADDING_LABEL
    return str(key)


@dataclass(frozen=True)
class Bucket:
    """
    Attributes:
        key      : Digit, character or PADDING.
        label    : Display label ("0" … "9", "a", "Empty").
        elements : Elements currently in the bucket, in arrival order.
    """

    key:      DigitKey
    label:    str
    elements: Tuple[RadixElement, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.elements)

    def to_dict(self) -> dict:
        return {
            "key":      self.key,
            "label":    self.label,
            "elements": [el.to_dict() for el in self.elements],
        }


def empty_buckets(keys: Iterable[DigitKey]) -> Tuple[Bucket, ...]:
    return tuple(Bucket(key=k, label=bucket_label(k)) for k in keys)
