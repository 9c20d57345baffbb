"""UTF-8 reassembly for raw path component bytes.

A malformed or truncated sequence never raises; it is reported as
``UNDECODABLE`` and the caller folds it like any other unknown character.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

__all__ = [
    "UNDECODABLE",
    "MAX_SCALAR",
    "sequence_length",
    "decode_scalar",
    "iter_units",
]


UNDECODABLE: Optional[int] = None
MAX_SCALAR = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)
_CONT_MASK = 0b0011_1111


def sequence_length(lead: int) -> int:
    """Total byte length announced by a leading byte (1 for ASCII)."""
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        # stray continuation bytes (0x80-0xBF) open a 2-byte sequence too
        return 2
    if lead < 0xF0:
        return 3
    return 4


def _valid(value: int) -> Optional[int]:
    if value > MAX_SCALAR or value in _SURROGATES:
        return UNDECODABLE
    return value


def decode_scalar(seq: Sequence[int]) -> Optional[int]:
    """Assemble one complete multi-byte sequence into a scalar value.

    Continuation bytes only contribute their low six bits; their high bits are
    not checked. Returns ``UNDECODABLE`` for surrogates, values past U+10FFFF
    and sequences whose length does not match the leading byte.
    """
    if not seq:
        return UNDECODABLE
    lead = seq[0]
    size = sequence_length(lead)
    if size == 1 or len(seq) != size:
        return UNDECODABLE
    if size == 2:
        value = ((lead & 0b0001_1111) << 6) | (seq[1] & _CONT_MASK)
    elif size == 3:
        value = (
            ((lead & 0b0000_1111) << 12)
            | ((seq[1] & _CONT_MASK) << 6)
            | (seq[2] & _CONT_MASK)
        )
    else:
        value = (
            ((lead & 0b0000_0111) << 18)
            | ((seq[1] & _CONT_MASK) << 12)
            | ((seq[2] & _CONT_MASK) << 6)
            | (seq[3] & _CONT_MASK)
        )
    return _valid(value)


def iter_units(raw: bytes) -> Iterator[Tuple[Optional[int], int]]:
    """Yield ``(value, consumed)`` pairs over ``raw``.

    A one-byte unit with a value is a plain ASCII byte that belongs to the
    ASCII policy. Longer units carry a decoded scalar or ``UNDECODABLE``. Once
    a sequence is open, the next bytes are taken as its continuation whatever
    their value; a sequence cut short by the end of input is undecodable.
    """
    pos = 0
    end = len(raw)
    while pos < end:
        lead = raw[pos]
        size = sequence_length(lead)
        if size == 1:
            yield lead, 1
            pos += 1
            continue
        chunk = raw[pos:pos + size]
        if len(chunk) < size:
            yield UNDECODABLE, len(chunk)
            return
        yield decode_scalar(chunk), size
        pos += size
