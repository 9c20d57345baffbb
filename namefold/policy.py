"""Classification of single ASCII bytes met outside a multi-byte sequence."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

__all__ = ["ByteClass", "COLLAPSE_RANGES", "classify"]


class ByteClass(str, Enum):
    LITERAL = "literal"
    PERIOD = "period"
    COLLAPSE = "collapse"


PERIOD = 0x2E

# Inclusive ranges of ASCII bytes folded into the collapse placeholder.
COLLAPSE_RANGES: Tuple[Tuple[int, int], ...] = (
    (0, 44),
    (47, 47),
    (58, 64),
    (91, 96),
    (123, 127),
)


def _build_classes() -> Tuple[ByteClass, ...]:
    classes = []
    for byte in range(128):
        if byte == PERIOD:
            classes.append(ByteClass.PERIOD)
        elif any(lo <= byte <= hi for lo, hi in COLLAPSE_RANGES):
            classes.append(ByteClass.COLLAPSE)
        else:
            classes.append(ByteClass.LITERAL)
    return tuple(classes)


_CLASSES = _build_classes()


def classify(byte: int) -> ByteClass:
    """Classify one ASCII byte (0-127)."""
    if not 0 <= byte < 128:
        raise ValueError(f"not an ASCII byte: {byte!r}")
    return _CLASSES[byte]
