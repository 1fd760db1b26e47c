"""wcag_report

Turns raw axe-core audit output into a structured WCAG compliance report.

Primary entrypoints:
 - pipeline.py (process_results: classification, enrichment, aggregation)
 - remediation.py (remediation guidance knowledge base)
 - report.py (HTML report rendering)
 - cli.py (Typer CLI)
"""

from .pipeline import process_results

__all__ = [
    "process_results",
    "pipeline",
    "report",
]
