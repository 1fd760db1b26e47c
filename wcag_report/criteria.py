"""WCAG success criterion extraction from axe-core tags."""
import re
from typing import Iterable, List

_CRITERION_RE = re.compile(r"wcag(\d)(\d+)")


def format_criterion(tag: str) -> str:
    """Rewrite a machine tag to display form: wcag143 -> WCAG 1.4.3.

    Tags without the ``wcag<digit><digits>`` shape are returned unchanged.
    """
    m = _CRITERION_RE.search(tag)
    if not m:
        return tag
    return f"WCAG {m.group(1)}.{'.'.join(m.group(2))}"


def extract_wcag_criteria(tags: Iterable[str]) -> List[str]:
    # Input order is kept and duplicates are not collapsed.
    return [format_criterion(t) for t in tags if t.startswith("wcag")]


__all__ = ["extract_wcag_criteria", "format_criterion"]
