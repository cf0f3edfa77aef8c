"""Structured evaluation report builder.

Aggregates known-answer, roundtrip and avalanche results into a single
serializable report for export and CLI display.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from .avalanche import AvalancheResult
from .roundtrip import RoundtripResult
from .vectors import KnownAnswerResult


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    known_answer_results: List[KnownAnswerResult] = field(default_factory=list)
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    avalanche_results: List[AvalancheResult] = field(default_factory=list)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    @property
    def all_pass(self) -> bool:
        return (
            all(r.passed for r in self.known_answer_results)
            and all(r.is_perfect for r in self.roundtrip_results)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "known_answer": [r.to_dict() for r in self.known_answer_results],
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "avalanche": [a.to_dict() for a in self.avalanche_results],
            "summary": {
                "known_answer_all_pass": all(r.passed for r in self.known_answer_results),
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "avalanche_all_pass": all(a.passes for a in self.avalanche_results),
                "failing": self.failing(),
            },
        }

    def to_summary(self) -> str:
        """Human-readable summary for the CLI."""
        lines = [f"Evaluation Report - {self.timestamp}", "=" * 50]

        if self.known_answer_results:
            ok = sum(1 for r in self.known_answer_results if r.passed)
            lines.append(f"\nKnown-answer tests: {ok}/{len(self.known_answer_results)} pass")
            for r in self.known_answer_results:
                lines.append(f"  {r.summary()}")

        if self.roundtrip_results:
            ok = sum(1 for r in self.roundtrip_results if r.is_perfect)
            lines.append(f"\nRoundtrip tests: {ok}/{len(self.roundtrip_results)} configurations pass")
            for r in self.roundtrip_results:
                lines.append(f"  {r.summary()}")

        if self.avalanche_results:
            ok = sum(1 for a in self.avalanche_results if a.passes)
            lines.append(f"\nAvalanche: {ok}/{len(self.avalanche_results)} pass")
            for a in self.avalanche_results:
                lines.append(f"  {a.summary()}")

        return "\n".join(lines)

    def failing(self) -> List[str]:
        """Labels of every failing known-answer or roundtrip check."""
        out = [f"kat:{r.variant}" for r in self.known_answer_results if not r.passed]
        out += [
            f"roundtrip:{r.variant}/{r.mode}/{r.padding}"
            for r in self.roundtrip_results
            if not r.is_perfect
        ]
        return out
