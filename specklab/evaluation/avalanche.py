"""Plaintext and key avalanche measurement for single Speck blocks.

Flipping one input bit should flip about half of the ciphertext bits.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Union

import numpy as np

from specklab.cipher.builder import build_cipher
from specklab.cipher.variants import Mode, Padding, Variant, coerce_variant, get_params


@dataclass
class AvalancheResult:
    variant: str
    input_type: str             # "plaintext" or "key"
    num_trials: int
    num_output_bits: int
    fractions: List[float] = field(default_factory=list, repr=False)

    mean: float = 0.0           # ~0.5 ideal
    std: float = 0.0
    min_fraction: float = 0.0
    max_fraction: float = 0.0

    @property
    def deviation(self) -> float:
        return abs(self.mean - 0.5)

    @property
    def passes(self) -> bool:
        """Heuristic: mean within 0.05 of the ideal 0.5."""
        return self.deviation < 0.05

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d.pop("fractions")
        d["passes"] = self.passes
        return d

    def summary(self) -> str:
        status = "PASS" if self.passes else "FAIL"
        return (
            f"[{status}] {self.variant} avalanche({self.input_type}): "
            f"mean={self.mean:.4f}, std={self.std:.4f}, "
            f"min={self.min_fraction:.4f}, max={self.max_fraction:.4f}"
        )


def _hamming_distance_bytes(a: bytes, b: bytes) -> int:
    if len(a) != len(b):
        raise ValueError("hamming distance length mismatch")
    dist = 0
    for x, y in zip(a, b):
        dist += (x ^ y).bit_count()
    return dist


def _flip_bit(data: bytes, bit_index: int) -> bytes:
    byte_i, bit_i = divmod(bit_index, 8)
    if byte_i < 0 or byte_i >= len(data):
        raise IndexError("bit_index out of range")
    out = bytearray(data)
    out[byte_i] ^= 1 << bit_i
    return bytes(out)


def _rand_bytes(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(0, 256) for _ in range(n))


def compute_avalanche(
    variant: Union[Variant, str],
    *,
    input_type: str = "plaintext",
    trials: int = 200,
    seed: int = 1337,
) -> AvalancheResult:
    """Flip one random input bit per trial and record the flipped ciphertext fraction.

    Args:
        variant: Speck variant.
        input_type: "plaintext" or "key", which input to perturb.
        trials: Number of random trials.
        seed: Random seed for reproducibility.
    """
    if input_type not in ("plaintext", "key"):
        raise ValueError(f"input_type must be 'plaintext' or 'key', got '{input_type}'")

    variant = coerce_variant(variant)
    params = get_params(variant)
    bs = params.block_size_bytes
    ks = params.key_size_bytes
    out_bits = params.block_size_bits
    rng = random.Random(seed if input_type == "plaintext" else seed + 1)

    fractions = np.empty(trials, dtype=np.float64)
    for t in range(trials):
        key = _rand_bytes(rng, ks)
        pt = _rand_bytes(rng, bs)
        ct1 = build_cipher(variant, key).encrypt(pt, Mode.ECB, Padding.NONE)
        if input_type == "plaintext":
            pt2 = _flip_bit(pt, rng.randrange(0, bs * 8))
            ct2 = build_cipher(variant, key).encrypt(pt2, Mode.ECB, Padding.NONE)
        else:
            key2 = _flip_bit(key, rng.randrange(0, ks * 8))
            ct2 = build_cipher(variant, key2).encrypt(pt, Mode.ECB, Padding.NONE)
        fractions[t] = _hamming_distance_bytes(ct1, ct2) / out_bits

    return AvalancheResult(
        variant=variant.value,
        input_type=input_type,
        num_trials=trials,
        num_output_bits=out_bits,
        fractions=fractions.tolist(),
        mean=round(float(fractions.mean()), 6) if trials else 0.0,
        std=round(float(fractions.std()), 6) if trials else 0.0,
        min_fraction=round(float(fractions.min()), 6) if trials else 0.0,
        max_fraction=round(float(fractions.max()), 6) if trials else 0.0,
    )
