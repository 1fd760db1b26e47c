"""Severity and topical classification of axe-core violations."""
from typing import Optional, Sequence, Tuple

SEVERITIES = ("critical", "serious", "moderate", "minor")
CATEGORIES = ("colorContrast", "images", "keyboard", "semanticHTML", "other")

DEFAULT_SEVERITY = "minor"
DEFAULT_CATEGORY = "other"

# Ordered: first matching rule wins.
_CATEGORY_RULES: Tuple[Tuple[str, Tuple[str, ...], Tuple[str, ...]], ...] = (
    ("colorContrast", ("color-contrast", "contrast"), ()),
    ("images", ("image", "alt"), ("cat.text-alternatives",)),
    ("keyboard", ("keyboard", "focus", "tabindex"), ()),
    ("semanticHTML", ("heading", "landmark", "aria", "label"), ()),
)


def classify_severity(impact: Optional[str]) -> str:
    """Return the severity bucket for an impact value; unknown or missing -> minor."""
    if impact in SEVERITIES:
        return impact
    return DEFAULT_SEVERITY


def categorize_issue(rule_id: str, tags: Sequence[str]) -> str:
    """Assign a violation to exactly one category.

    Matching is case-insensitive substring search against the rule id and
    against the space-joined tag list.
    """
    rid = rule_id.lower()
    joined_tags = " ".join(tags).lower()
    for category, id_needles, tag_needles in _CATEGORY_RULES:
        if any(n in rid for n in id_needles) or any(n in joined_tags for n in tag_needles):
            return category
    return DEFAULT_CATEGORY


__all__ = ["SEVERITIES", "CATEGORIES", "classify_severity", "categorize_issue"]
