"""
elements/
---------
Core data layer.  Public API:

    from elements import Element, ElementStatus, RadixElement, make_elements
    from elements import Bucket, PADDING
"""

from elements.element import (
    DigitKey,
    Element,
    ElementStatus,
    RadixElement,
    Value,
    is_text_mode,
    make_elements,
)
from elements.bucket import PADDING, PADDING_LABEL, Bucket, bucket_label, empty_buckets

__all__ = [
    "Element",     "ElementStatus",
    "RadixElement",
    "Value",       "DigitKey",
    "make_elements",
    "is_text_mode",
    "Bucket",      "PADDING",  "PADDING_LABEL",
    "bucket_label", "empty_buckets",
]
