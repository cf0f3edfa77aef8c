"""Speck key expansion.

Research / education only.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple, Union

from .components import bytes_to_words, speck_round
from .errors import InvalidKeyLengthError
from .variants import Variant, get_params


def split_key(variant: Union[Variant, str], key: bytes) -> Tuple[int, ...]:
    """Split raw key bytes into the variant's little-endian key words.

    Raises:
        InvalidKeyLengthError: if the key is not a whole number of words, or
            the word count does not match the variant.
    """
    params = get_params(variant)
    key = bytes(key)
    word_size = params.word_size_bytes
    if len(key) % word_size != 0:
        raise InvalidKeyLengthError(
            f"Key length {len(key)} is not a multiple of the {word_size}-byte word size"
        )
    words = bytes_to_words(key, word_size)
    if len(words) != params.key_words:
        raise InvalidKeyLengthError(
            f"{variant} needs a {params.key_size_bytes}-byte key, got {len(key)} bytes"
        )
    return words


def expand_key(variant: Union[Variant, str], key_words: Sequence[int]) -> Tuple[int, ...]:
    """Derive one subkey per round from the key words.

    ``key_words[0]`` seeds the running subkey; the remaining words are used
    round-robin as the other input of the round function, with the round
    index as its subkey.
    """
    params = get_params(variant)
    if len(key_words) != params.key_words:
        raise InvalidKeyLengthError(
            f"{variant} needs {params.key_words} key words, got {len(key_words)}"
        )

    w = params.word_size_bits
    a = key_words[0]
    taps: List[int] = list(key_words[1:])
    round_keys: List[int] = []

    if params.block_size_bytes == 16:
        # rounds - 1 updates, then the last running value is appended as-is
        for i in range(params.rounds - 1):
            round_keys.append(a)
            t = i % len(taps)
            taps[t], a = speck_round(taps[t], a, i, w)
        round_keys.append(a)
    else:
        # every round updates; the final update is never used
        for i in range(params.rounds):
            round_keys.append(a)
            t = i % len(taps)
            taps[t], a = speck_round(taps[t], a, i, w)

    return tuple(round_keys)


def key_schedule(variant: Union[Variant, str], key: bytes) -> Tuple[int, ...]:
    return expand_key(variant, split_key(variant, key))
