import pytest
from pydantic import ValidationError

from wcag_report.remediation import (
    FALLBACK_STEPS,
    GUIDANCE,
    GuidanceEntry,
    get_remediation_guidance,
    join_selector,
    load_guidance_file,
    merge_guidance,
)
from wcag_report.schema import AxeNode

WELL_KNOWN = [
    "color-contrast",
    "image-alt",
    "button-name",
    "link-name",
    "heading-order",
    "label",
    "list",
    "aria-required-attr",
    "landmark-one-main",
    "region",
]


def test_knowledge_base_covers_well_known_rules():
    for rule_id in WELL_KNOWN:
        entry = GUIDANCE[rule_id]
        assert entry.issue
        assert len(entry.steps) >= 3


def test_hit_merges_node_fields():
    node = AxeNode(html='<a href="/x"></a>', target=["nav", "a.icon"], failureSummary="ignored")
    r = get_remediation_guidance("link-name", node)
    assert r.issue == "Links must have discernible text"
    assert r.steps == tuple(GUIDANCE["link-name"].steps)
    assert r.element == '<a href="/x"></a>'
    assert r.selector == "nav, a.icon"


def test_miss_uses_failure_summary():
    node = AxeNode(html="<x>", target=["x"], failureSummary="X is broken")
    r = get_remediation_guidance("some-unknown-rule", node)
    assert r.issue == "X is broken"
    assert r.steps == FALLBACK_STEPS
    assert len(r.steps) == 3
    assert r.element == "<x>"
    assert r.selector == "x"


def test_miss_without_summary_uses_generic_issue():
    r = get_remediation_guidance("some-unknown-rule", AxeNode())
    assert r.issue == "Accessibility issue detected"
    assert r.selector == ""
    assert r.element is None


def test_nested_targets_are_flattened():
    assert join_selector(["#frame", ["my-widget", "button"]]) == "#frame, my-widget, button"


def test_returned_steps_are_read_only():
    r = get_remediation_guidance("region", AxeNode(target=["body"]))
    assert isinstance(r.steps, tuple)
    assert r.steps == tuple(GUIDANCE["region"].steps)


def test_merge_guidance_overlays_without_mutating():
    extra = {"region": GuidanceEntry(issue="Custom", steps=["one"]), "bypass": GuidanceEntry(issue="Skip", steps=["a"])}
    merged = merge_guidance(extra)
    assert merged["region"].issue == "Custom"
    assert merged["bypass"].issue == "Skip"
    assert merged["color-contrast"] is GUIDANCE["color-contrast"]
    assert GUIDANCE["region"].issue == "Page content must be contained by landmarks"
    assert "bypass" not in GUIDANCE
    r = get_remediation_guidance("bypass", AxeNode(target=["body"]), merged)
    assert r.issue == "Skip"


def test_builtin_table_is_read_only():
    with pytest.raises(TypeError):
        GUIDANCE["region"] = GuidanceEntry(issue="x", steps=[])


def test_load_guidance_file(tmp_path):
    p = tmp_path / "guidance.yaml"
    p.write_text(
        "bypass:\n  issue: Page must have means to bypass repeated blocks\n  steps:\n    - Add a skip link\n    - Use landmarks\n",
        encoding="utf-8",
    )
    loaded = load_guidance_file(p)
    assert list(loaded) == ["bypass"]
    assert loaded["bypass"].steps == ["Add a skip link", "Use landmarks"]


def test_load_guidance_file_empty(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_guidance_file(p) == {}


def test_load_guidance_file_rejects_list(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_guidance_file(p)


def test_load_guidance_file_rejects_missing_steps(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("bypass:\n  issue: only an issue\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_guidance_file(p)
