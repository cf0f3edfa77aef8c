"""Roundtrip verification P = D(E(P)) over random keys and messages.

Each vector draws a fresh key and a message of random length. For
``Padding.NONE`` the length is rounded down to whole blocks.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import itertools
import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional, Union

from specklab.cipher.builder import build_cipher
from specklab.cipher.variants import (
    Mode,
    Padding,
    Variant,
    coerce_mode,
    coerce_padding,
    coerce_variant,
    get_params,
    list_variants,
)

logger = logging.getLogger(__name__)


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip test vector."""
    vector_index: int
    plaintext_hex: str
    key_hex: str
    ciphertext_hex: str
    decrypted_hex: str       # What decrypt returned (should equal plaintext)
    error: Optional[str]     # Exception message if decrypt/encrypt threw


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing for one variant/mode/padding."""
    variant: str
    mode: str
    padding: str
    block_size_bits: int
    key_size_bits: int
    rounds: int
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.variant} {self.mode.upper()}/{self.padding}: "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def _rand_bytes(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(0, 256) for _ in range(n))


def run_roundtrip_tests(
    variant: Union[Variant, str],
    *,
    mode: Union[Mode, str] = Mode.ECB,
    padding: Union[Padding, str] = Padding.PKCS7,
    num_vectors: int = 200,
    seed: int = 1337,
    max_message_blocks: int = 4,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Run roundtrip verification across many random (key, message) pairs.

    Args:
        variant: Speck variant to test.
        mode: Chaining mode.
        padding: Padding scheme.
        num_vectors: Number of random vectors.
        seed: Random seed for deterministic reproducibility.
        max_message_blocks: Upper bound on message length, in blocks.
        max_failures_recorded: Maximum number of failure details to keep.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    variant = coerce_variant(variant)
    mode = coerce_mode(mode)
    padding = coerce_padding(padding)
    params = get_params(variant)
    bs = params.block_size_bytes

    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        key = _rand_bytes(rng, params.key_size_bytes)
        length = rng.randrange(0, max_message_blocks * bs + 1)
        if padding is Padding.NONE:
            length -= length % bs
        pt = _rand_bytes(rng, length)

        try:
            cipher = build_cipher(variant, key)
            ct = cipher.encrypt(pt, mode, padding)
            pt2 = cipher.decrypt(ct, mode, padding)

            if pt == pt2:
                passed += 1
            else:
                failed += 1
                if len(failures) < max_failures_recorded:
                    failures.append(RoundtripFailure(
                        vector_index=i,
                        plaintext_hex=pt.hex(),
                        key_hex=key.hex(),
                        ciphertext_hex=ct.hex(),
                        decrypted_hex=pt2.hex(),
                        error=None,
                    ))
        except Exception as exc:
            failed += 1
            logger.warning("Roundtrip vector %d for %s raised: %s", i, variant.value, exc)
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(
                    vector_index=i,
                    plaintext_hex=pt.hex(),
                    key_hex=key.hex(),
                    ciphertext_hex="<error>",
                    decrypted_hex="<error>",
                    error=str(exc),
                ))

    elapsed = time.perf_counter() - start

    return RoundtripResult(
        variant=variant.value,
        mode=mode.value,
        padding=padding.value,
        block_size_bits=params.block_size_bits,
        key_size_bits=params.key_size_bits,
        rounds=params.rounds,
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )


def run_all_variants(
    *,
    num_vectors: int = 200,
    seed: int = 1337,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> List[RoundtripResult]:
    """Run roundtrip tests for every variant, mode and padding combination."""
    combos = list(itertools.product(list_variants(), list(Mode), list(Padding)))
    results: List[RoundtripResult] = []

    for idx, (variant, mode, padding) in enumerate(combos):
        if progress_callback:
            progress_callback(f"{variant.value} {mode.value}/{padding.value}", idx, len(combos))
        results.append(run_roundtrip_tests(
            variant,
            mode=mode,
            padding=padding,
            num_vectors=num_vectors,
            seed=seed,
        ))

    return results
