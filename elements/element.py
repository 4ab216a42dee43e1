"""
element.py — Array Elements
============================
One item of the working sequence.

Two flavours exist, one per engine:

    • Element       – comparison sorts; carries an ElementStatus tag
    • RadixElement  – radix sort; carries is_active + current_digit

Design decisions:
  - Both are FROZEN dataclasses.  A status change is a `replace()`, never
    an in-place write, so a snapshot taken for step 3 can never be
    altered by whatever the algorithm does at step 4.
  - `id` is assigned exactly once (make_elements) and then travels with
    the value through every swap, so the renderer can track movement.
"""

import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Union

Value = Union[int, str]
DigitKey = Union[int, str]


# ---------------------------------------------------------------------------
# Element Status Enum — maps 1-to-1 with the bar colour palette
# ---------------------------------------------------------------------------
class ElementStatus(Enum):
    DEFAULT   = "default"     # untouched
    COMPARING = "comparing"   # one side of the current comparison
    SWAPPING  = "swapping"    # just moved
    SORTED    = "sorted"      # in its final position
    PIVOT     = "pivot"       # quick-sort pivot / selection extreme / insertion key
    MERGED    = "merged"      # placed during a merge without moving


# ---------------------------------------------------------------------------
# Element
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Element:
    """
    Attributes:
        value  : int or short string (homogeneous per run).
        id     : Stable identifier, unique within one input sequence.
        status : ElementStatus for visual encoding.
    """

    value:  Value
    id:     str
    status: ElementStatus = ElementStatus.DEFAULT

    def with_status(self, status: ElementStatus) -> "Element":
        if status is self.status:
            return replace(self)
        return replace(self, status=status)

    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "value":  self.value,
            "status": self.status.value,
        }

    def __repr__(self) -> str:
        return f"Element(id={self.id}, value={self.value!r}, status={self.status.value})"


# ---------------------------------------------------------------------------
# RadixElement
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class RadixElement:
    """
    Attributes:
        value         : int or short string.
        id            : Stable identifier (kept across distribution passes).
        is_active     : True while this element is being distributed.
        current_digit : Key extracted for the current position, or None.
    """

    value:         Value
    id:            str
    is_active:     bool               = False
    current_digit: Optional[DigitKey] = None

    @classmethod
    def from_element(cls, element) -> "RadixElement":
        return cls(value=element.value, id=element.id)

    def activate(self, digit: DigitKey) -> "RadixElement":
        return replace(self, is_active=True, current_digit=digit)

    def cleared(self) -> "RadixElement":
        return replace(self, is_active=False, current_digit=None)

    def to_dict(self) -> dict:
        return {
            "id":            self.id,
            "value":         self.value,
            "is_active":     self.is_active,
            "current_digit": self.current_digit,
        }


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------
def make_elements(values: Iterable[Value]) -> List[Element]:
    """Wrap raw values in Elements with fresh ids (position-prefixed so they stay unique)."""
    return [
        Element(value=v, id=f"{idx}-{uuid.uuid4().hex[:8]}")
        for idx, v in enumerate(values)
    ]


def is_text_mode(values: Iterable[Value]) -> bool:
    """A run is textual as soon as one value is a string."""
    return any(isinstance(v, str) for v in values)
