"""Speck round function and word helpers.

The round function is written once and parameterised by the word width, so
the 32-bit and 64-bit variants share the same code path.

Research / education only. No constant-time guarantees.
"""
from __future__ import annotations

import struct
from typing import Dict, Sequence, Tuple

# Rotation amounts for 64- and 128-bit blocks.
ALPHA = 8
BETA = 3

_STRUCT_CODES: Dict[int, str] = {4: "I", 8: "Q"}


def rotate_left(x: int, r: int, w: int) -> int:
    """Rotate-left x by r bits in a w-bit word."""
    mask = (1 << w) - 1
    r %= w
    x &= mask
    return ((x << r) & mask) | (x >> (w - r))


def rotate_right(x: int, r: int, w: int) -> int:
    """Rotate-right x by r bits in a w-bit word."""
    mask = (1 << w) - 1
    r %= w
    x &= mask
    return (x >> r) | ((x << (w - r)) & mask)


def speck_round(x: int, y: int, k: int, w: int) -> Tuple[int, int]:
    """One Speck encryption round on the word pair (x, y) with subkey k."""
    mask = (1 << w) - 1
    x = rotate_right(x, ALPHA, w)
    x = (x + y) & mask
    x ^= k
    y = rotate_left(y, BETA, w)
    y ^= x
    return x, y


def speck_round_inverse(x: int, y: int, k: int, w: int) -> Tuple[int, int]:
    """Exact inverse of :func:`speck_round` for the same subkey."""
    mask = (1 << w) - 1
    y ^= x
    y = rotate_right(y, BETA, w)
    x ^= k
    x = (x - y) & mask
    x = rotate_left(x, ALPHA, w)
    return x, y


def bytes_to_words(data: bytes, word_size: int) -> Tuple[int, ...]:
    """Split ``data`` into little-endian unsigned words of ``word_size`` bytes."""
    if len(data) % word_size != 0:
        raise ValueError(f"{len(data)} bytes do not split into {word_size}-byte words")
    fmt = "<" + _STRUCT_CODES[word_size] * (len(data) // word_size)
    return struct.unpack(fmt, data)


def words_to_bytes(words: Sequence[int], word_size: int) -> bytes:
    """Inverse of :func:`bytes_to_words`."""
    fmt = "<" + _STRUCT_CODES[word_size] * len(words)
    return struct.pack(fmt, *words)


def xor_words(a: Sequence[int], b: Sequence[int]) -> Tuple[int, ...]:
    if len(a) != len(b):
        raise ValueError("xor_words length mismatch")
    return tuple(x ^ y for x, y in zip(a, b))
