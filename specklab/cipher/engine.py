from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .components import bytes_to_words, speck_round, speck_round_inverse, words_to_bytes
from .variants import VariantParams


@dataclass(frozen=True)
class BlockEngine:
    """Encrypts and decrypts single Speck blocks with a fixed key schedule.

    A block is the word pair ``(x, y)``: ``y`` is decoded from the first half
    of the block bytes and ``x`` from the second half, matching the word
    order of the NSA reference vectors.
    """
    params: VariantParams
    round_keys: Tuple[int, ...]

    def __post_init__(self):
        if len(self.round_keys) != self.params.rounds:
            raise ValueError(
                f"Expected {self.params.rounds} round keys, got {len(self.round_keys)}"
            )

    def encrypt_block(self, x: int, y: int) -> Tuple[int, int]:
        w = self.params.word_size_bits
        for k in self.round_keys:
            x, y = speck_round(x, y, k, w)
        return x, y

    def decrypt_block(self, x: int, y: int) -> Tuple[int, int]:
        w = self.params.word_size_bits
        for k in reversed(self.round_keys):
            x, y = speck_round_inverse(x, y, k, w)
        return x, y

    def encrypt_bytes(self, block: bytes) -> bytes:
        """Encrypt exactly one block of bytes."""
        y, x = self._split(block, "Plaintext")
        x, y = self.encrypt_block(x, y)
        return words_to_bytes((y, x), self.params.word_size_bytes)

    def decrypt_bytes(self, block: bytes) -> bytes:
        """Decrypt exactly one block of bytes."""
        y, x = self._split(block, "Ciphertext")
        x, y = self.decrypt_block(x, y)
        return words_to_bytes((y, x), self.params.word_size_bytes)

    def _split(self, block: bytes, what: str) -> Tuple[int, ...]:
        bs = self.params.block_size_bytes
        if len(block) != bs:
            raise ValueError(f"{what} block must be {bs} bytes, got {len(block)}")
        return bytes_to_words(bytes(block), self.params.word_size_bytes)
