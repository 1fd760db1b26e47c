"""Transform raw axe-core results into a compliance report.

The pipeline is a pure function of its inputs apart from reading the clock
for the report timestamp (pass ``now`` to pin it).
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Union

from .classify import CATEGORIES, SEVERITIES, categorize_issue, classify_severity
from .criteria import extract_wcag_criteria
from .remediation import GuidanceEntry, get_remediation_guidance
from .schema import (
    AxeCheckResult,
    AxeResults,
    ProcessedNode,
    ProcessedViolation,
    Report,
    RuleSummary,
    SeverityCounts,
    Summary,
)

logger = logging.getLogger(__name__)

RawResults = Union[AxeResults, Mapping[str, Any], None]


def normalize_results(raw: RawResults) -> AxeResults:
    """Coerce a raw axe-core result into ``AxeResults``; absent lists become empty."""
    if raw is None:
        return AxeResults()
    if isinstance(raw, AxeResults):
        return raw
    return AxeResults.model_validate(dict(raw))


def format_timestamp(now: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def process_violation(
    violation: AxeCheckResult,
    guidance: Optional[Mapping[str, GuidanceEntry]] = None,
) -> ProcessedViolation:
    criteria = extract_wcag_criteria(violation.tags)
    nodes = [
        ProcessedNode(
            html=node.html,
            target=list(node.target),
            failureSummary=node.failureSummary,
            impact=node.impact,
            wcagCriteria=list(criteria),
            remediation=get_remediation_guidance(violation.id, node, guidance),
        )
        for node in violation.nodes
    ]
    return ProcessedViolation(
        id=violation.id,
        impact=violation.impact,
        description=violation.description,
        help=violation.help,
        helpUrl=violation.helpUrl,
        tags=list(violation.tags),
        nodes=nodes,
    )


def summarize_rule(result: AxeCheckResult) -> RuleSummary:
    return RuleSummary(
        id=result.id,
        description=result.description,
        help=result.help,
        nodeCount=len(result.nodes),
    )


def process_results(
    raw: RawResults,
    url: str,
    now: Optional[datetime] = None,
    guidance: Optional[Mapping[str, GuidanceEntry]] = None,
) -> Report:
    """Build the final report for one scan.

    Parameters:
      raw: axe-core result (``violations``/``passes``/``incomplete``, any may be missing)
      url: scanned page URL, used verbatim
      now: timestamp override; defaults to the current UTC time
      guidance: remediation table override; defaults to the built-in ``GUIDANCE``
    """
    results = normalize_results(raw)

    by_severity: Dict[str, List[ProcessedViolation]] = {s: [] for s in SEVERITIES}
    by_category: Dict[str, List[ProcessedViolation]] = {c: [] for c in CATEGORIES}
    severity_counts: Dict[str, int] = {s: 0 for s in SEVERITIES}
    total_issues = 0

    for violation in results.violations:
        severity = classify_severity(violation.impact)
        category = categorize_issue(violation.id, violation.tags)
        processed = process_violation(violation, guidance)
        by_severity[severity].append(processed)
        by_category[category].append(processed)
        node_count = len(violation.nodes)
        severity_counts[severity] += node_count
        total_issues += node_count
        logger.debug("%s -> severity=%s category=%s nodes=%d", violation.id, severity, category, node_count)

    total_passes = sum(len(p.nodes) for p in results.passes)

    summary = Summary(
        totalIssues=total_issues,
        totalPasses=total_passes,
        totalTests=total_issues + total_passes,
        violationTypes=len(results.violations),
        issuesBySeverity=SeverityCounts(**severity_counts),
    )
    logger.info("Processed %s: %d issues across %d rule(s)", url, total_issues, summary.violationTypes)

    return Report(
        url=url,
        timestamp=format_timestamp(now or datetime.now(timezone.utc)),
        summary=summary,
        violations=by_severity,
        categories=by_category,
        passes=[summarize_rule(p) for p in results.passes],
        incomplete=[summarize_rule(i) for i in results.incomplete],
    )


__all__ = [
    "normalize_results",
    "process_results",
    "process_violation",
    "summarize_rule",
    "format_timestamp",
]
