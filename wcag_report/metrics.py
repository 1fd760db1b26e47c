"""Display statistics derived from a report summary."""
from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict

from .classify import SEVERITIES
from .schema import Summary


def percentage(value: int, total: int) -> float:
    """Return value/total as a percentage rounded half-up to one decimal (6.25 -> 6.3).

    Edge cases:
      - total == 0 -> 0.0
    Raises:
      ValueError if either count is negative.
    """
    if value < 0 or total < 0:
        raise ValueError("Require value >= 0 and total >= 0")
    if total == 0:
        return 0.0
    pct = Decimal(value) * 100 / Decimal(total)
    return float(pct.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def compliance_rate(summary: Summary) -> float:
    """Share of evaluated nodes that passed."""
    return percentage(summary.totalPasses, summary.totalTests)


def severity_shares(summary: Summary) -> Dict[str, float]:
    counts = summary.issuesBySeverity
    return {s: percentage(getattr(counts, s), summary.totalIssues) for s in SEVERITIES}


__all__ = ["percentage", "compliance_rate", "severity_shares"]
