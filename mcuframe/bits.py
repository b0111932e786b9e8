"""Flag and bit-array helpers."""

from __future__ import annotations

from typing import MutableSequence

_WIDTHS = (8, 16, 32)


def xor(a, b):
    """Logical exclusive or of two truth values."""
    return (not a) != (not b)


def flag_set(flag, mask):
    """Return ``flag`` with the bits of ``mask`` set."""
    return flag | mask


def flag_clear(flag, mask):
    """Return ``flag`` with the bits of ``mask`` cleared."""
    return flag & ~mask


def flag_is(flag, mask):
    """Whether any bit of ``mask`` is set in ``flag``."""
    return (flag & mask) != 0


def flag_mask(flag, mask):
    """Return the bits of ``flag`` selected by ``mask``."""
    return flag & mask


def _locate(bit: int, width: int) -> tuple[int, int]:
    if width not in _WIDTHS:
        raise ValueError(f"unsupported word width: {width}")
    if bit < 0:
        raise ValueError(f"negative bit index: {bit}")
    return bit // width, 1 << (bit % width)


def test_bit(words: MutableSequence[int], bit, width=32):
    """Whether ``bit`` is set in an array of ``width``-bit words."""
    index, mask = _locate(bit, width)
    return (words[index] & mask) != 0


def set_bit(words: MutableSequence[int], bit, width=32):
    """Set ``bit`` in an array of ``width``-bit words, in place."""
    index, mask = _locate(bit, width)
    words[index] |= mask


def clear_bit(words: MutableSequence[int], bit, width=32):
    """Clear ``bit`` in an array of ``width``-bit words, in place."""
    index, mask = _locate(bit, width)
    words[index] &= ~mask


def toggle_bit(words: MutableSequence[int], bit, width=32):
    """Flip ``bit`` in an array of ``width``-bit words, in place."""
    index, mask = _locate(bit, width)
    words[index] ^= mask