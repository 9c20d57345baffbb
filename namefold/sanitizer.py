"""Fold one raw path component into an ASCII-only name.

The only state carried across a component is whether the last emission was
the collapse placeholder; it lives in a per-call accumulator so ``sanitize``
stays a pure function of its input.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .decoder import iter_units
from .policy import ByteClass, classify
from .table import FoldKind, lookup

__all__ = ["PLACEHOLDER", "sanitize", "sanitize_name", "needs_rename"]


PLACEHOLDER = "_"


@dataclass
class _Accumulator:
    parts: List[str] = field(default_factory=list)
    last_was_collapse: bool = False

    def literal(self, text: str) -> None:
        self.parts.append(text)
        self.last_was_collapse = False

    def collapse(self) -> None:
        if not self.last_was_collapse:
            self.parts.append(PLACEHOLDER)
        self.last_was_collapse = True

    def result(self) -> str:
        return "".join(self.parts)


def _push_ascii(acc: _Accumulator, byte: int) -> None:
    cls = classify(byte)
    if cls is ByteClass.COLLAPSE:
        acc.collapse()
    else:
        acc.literal(chr(byte))


def _push_scalar(acc: _Accumulator, scalar: Optional[int]) -> None:
    fold = lookup(scalar)
    if fold.kind is FoldKind.SILENT:
        return
    if fold.kind is FoldKind.UNRECOGNIZED:
        acc.collapse()
    else:
        acc.literal(fold.text)


def sanitize(raw: bytes) -> str:
    """Return the ASCII-only replacement for the component bytes ``raw``."""
    acc = _Accumulator()
    for value, consumed in iter_units(bytes(raw)):
        if consumed == 1 and value is not None:
            _push_ascii(acc, value)
        else:
            _push_scalar(acc, value)
    return acc.result()


def sanitize_name(name: Union[str, bytes, os.PathLike]) -> str:
    """Sanitize a component given as str/bytes, using the native path encoding."""
    return sanitize(os.fsencode(name))


def needs_rename(name: Union[str, bytes, os.PathLike]) -> bool:
    raw = os.fsencode(name)
    return sanitize(raw).encode("ascii") != raw
