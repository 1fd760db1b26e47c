"""Remediation guidance knowledge base.

``GUIDANCE`` maps axe-core rule ids to a plain-language description of the
problem and ordered fix steps. Rules without an entry get a generic record
built from the node's own failure summary. Extra entries can be supplied as
YAML (see ``load_guidance_file``) without touching the built-in table.
"""
from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict

from .schema import AxeNode, Remediation


class GuidanceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    issue: str
    steps: List[str]


GUIDANCE: Mapping[str, GuidanceEntry] = MappingProxyType({
    "color-contrast": GuidanceEntry(
        issue="Text does not have sufficient color contrast with its background",
        steps=[
            "Use a color contrast checker tool to verify ratios",
            "Ensure normal text has at least 4.5:1 contrast ratio",
            "Ensure large text (18pt+ or 14pt+ bold) has at least 3:1 contrast ratio",
            "Consider using darker text or lighter backgrounds",
            "Test with various color blindness simulators",
        ],
    ),
    "image-alt": GuidanceEntry(
        issue="Images must have alternative text for screen readers",
        steps=[
            "Add descriptive alt text that conveys the image's purpose",
            'For decorative images, use alt=""',
            "Keep alt text concise but meaningful (under 125 characters)",
            'Don\'t include "image of" or "picture of" in alt text',
            "For complex images, provide extended descriptions",
        ],
    ),
    "button-name": GuidanceEntry(
        issue="Buttons must have discernible text",
        steps=[
            "Add visible text content inside the button",
            "Or use aria-label attribute for icon buttons",
            "Ensure button purpose is clear to all users",
            "Avoid using only icons without text alternatives",
        ],
    ),
    "link-name": GuidanceEntry(
        issue="Links must have discernible text",
        steps=[
            "Add descriptive link text that indicates destination",
            'Avoid generic phrases like "click here" or "read more"',
            "For icon links, add aria-label with descriptive text",
            "Ensure link purpose is clear from its text alone",
        ],
    ),
    "heading-order": GuidanceEntry(
        issue="Heading levels should increase by one",
        steps=[
            "Maintain logical heading hierarchy (h1 > h2 > h3)",
            "Don't skip heading levels (e.g., h1 to h3)",
            "Use only one h1 per page",
            "Use headings to structure content, not for styling",
        ],
    ),
    "label": GuidanceEntry(
        issue="Form elements must have labels",
        steps=[
            "Add <label> element associated with the input",
            "Use for/id attributes to connect label and input",
            "Or use aria-label or aria-labelledby attributes",
            "Ensure label describes the input's purpose clearly",
        ],
    ),
    "list": GuidanceEntry(
        issue="List elements must be properly structured",
        steps=[
            "Ensure <li> elements are only direct children of <ul> or <ol>",
            "Use semantic list markup for related items",
            "Don't use lists solely for layout purposes",
        ],
    ),
    "aria-required-attr": GuidanceEntry(
        issue="ARIA roles must have required attributes",
        steps=[
            "Add all required ARIA attributes for the role",
            "Consult ARIA specification for role requirements",
            "Test with screen readers to verify functionality",
        ],
    ),
    "landmark-one-main": GuidanceEntry(
        issue="Document must have one main landmark",
        steps=[
            'Add a <main> element or role="main" to primary content',
            "Use only one main landmark per page",
            "Ensure main content is wrapped in the landmark",
        ],
    ),
    "region": GuidanceEntry(
        issue="Page content must be contained by landmarks",
        steps=[
            "Use semantic HTML5 elements (header, nav, main, footer)",
            "Or use ARIA landmark roles",
            "Ensure all content is within appropriate landmarks",
        ],
    ),
})

FALLBACK_ISSUE = "Accessibility issue detected"
FALLBACK_STEPS = (
    "Review the WCAG documentation for this issue",
    "Test the fix with assistive technologies",
    "Consult with accessibility experts if needed",
)


def join_selector(target: List[Union[str, List[str]]]) -> str:
    """Comma-join a node's target path, flattening frame/shadow sub-paths."""
    parts: List[str] = []
    for t in target:
        if isinstance(t, str):
            parts.append(t)
        else:
            parts.extend(t)
    return ", ".join(parts)


def get_remediation_guidance(
    rule_id: str,
    node: AxeNode,
    guidance: Optional[Mapping[str, GuidanceEntry]] = None,
) -> Remediation:
    table = GUIDANCE if guidance is None else guidance
    entry = table.get(rule_id)
    if entry is not None:
        issue, steps = entry.issue, list(entry.steps)
    else:
        issue, steps = node.failureSummary or FALLBACK_ISSUE, list(FALLBACK_STEPS)
    return Remediation(
        issue=issue,
        steps=steps,
        element=node.html,
        selector=join_selector(node.target),
    )


def merge_guidance(extra: Mapping[str, GuidanceEntry]) -> Mapping[str, GuidanceEntry]:
    """Return built-in guidance overlaid with ``extra``; neither input is modified."""
    merged: Dict[str, GuidanceEntry] = dict(GUIDANCE)
    merged.update(extra)
    return MappingProxyType(merged)


def load_guidance_file(path: Union[str, Path]) -> Dict[str, GuidanceEntry]:
    """Load extra guidance entries from a YAML mapping of rule id -> {issue, steps}.

    Raises:
        ValueError: the document is not a mapping.
        pydantic.ValidationError: an entry lacks ``issue`` or ``steps``.
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Guidance file must contain a mapping of rule ids, got {type(data).__name__}")
    return {str(rule_id): GuidanceEntry.model_validate(entry) for rule_id, entry in data.items()}


__all__ = [
    "GUIDANCE",
    "GuidanceEntry",
    "FALLBACK_STEPS",
    "get_remediation_guidance",
    "join_selector",
    "load_guidance_file",
    "merge_guidance",
]
