"""Verification tooling for the Speck cipher.

Known-answer tests against the NSA reference vectors, roundtrip checks over
every variant/mode/padding combination, and avalanche statistics.

Research / education only. Do NOT use in production.
"""

from .vectors import KnownAnswerVector, KnownAnswerResult, NSA_VECTORS, check_vector, run_known_answer_tests
from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests, run_all_variants
from .avalanche import AvalancheResult, compute_avalanche
from .report import EvaluationReport

__all__ = [
    "KnownAnswerVector",
    "KnownAnswerResult",
    "NSA_VECTORS",
    "check_vector",
    "run_known_answer_tests",
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "run_all_variants",
    "AvalancheResult",
    "compute_avalanche",
    "EvaluationReport",
]
