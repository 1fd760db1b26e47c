"""HTML rendering for compliance reports."""
from pathlib import Path
from typing import Any, Dict
import orjson
from jinja2 import Template

from .classify import CATEGORIES, SEVERITIES, classify_severity
from .metrics import compliance_rate, severity_shares
from .schema import Summary

CATEGORY_LABELS = {
    "colorContrast": "Color Contrast",
    "images": "Images",
    "keyboard": "Keyboard",
    "semanticHTML": "Semantic HTML",
    "other": "Other",
}

TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>WCAG Compliance Report - {{ url }}</title>
<style>
body { font-family: system-ui, sans-serif; line-height:1.4; }
table { border-collapse: collapse; width: 100%; }
th, td { border:1px solid #ccc; padding:4px 6px; vertical-align: top; }
th { background:#f2f2f2; }
code, pre { font-size: 0.85rem; }
pre { white-space:pre-wrap; background:#f9f9f9; padding:.5rem; border:1px solid #ddd; }
header, main, footer { max-width: 1200px; margin: 0 auto; }
header:focus-within a.skip-link { top: 0; }
a.skip-link { position:absolute; left:0; top:-40px; background:#000; color:#fff; padding:8px; }
.cards { display:flex; flex-wrap:wrap; gap:1rem; }
.card { border:1px solid #ddd; padding:0.5rem 1rem; border-radius:6px; min-width:140px; }
.card strong { display:block; font-size:1.5rem; }
.tabs { display:flex; flex-wrap:wrap; gap:.5rem; list-style:none; padding:0; }
.tabs a { display:inline-block; border:1px solid #ccc; border-radius:4px; padding:2px 8px; }
.badge { color:#fff; padding:2px 6px; border-radius:4px; }
.badge-critical { background:#a00; }
.badge-serious { background:#c45500; }
.badge-moderate { background:#7a5c00; }
.badge-minor { background:#555; }
.pass-rate-bar { height:8px; background:#eee; position:relative; border-radius:4px; overflow:hidden; margin:1rem 0; }
.pass-rate-bar span { position:absolute; left:0; top:0; bottom:0; background:#0a0; }
details { border: 1px solid #ccc; border-radius: 4px; padding: 0.5rem; margin-bottom: 1rem; }
details summary { cursor: pointer; }
</style>
</head>
<body>
<a href="#main" class="skip-link">Skip to main content</a>
<header>
<h1>WCAG 2.1 AA Compliance Report</h1>
<p>URL: <a href="{{ url }}">{{ url }}</a></p>
<p>Scanned: <time datetime="{{ timestamp }}">{{ timestamp }}</time></p>
</header>
<main id="main">
<section aria-labelledby="summary-h2">
<h2 id="summary-h2">Summary</h2>
<div class="cards">
  <div class="card" id="total-tests"><strong>{{ summary.totalTests }}</strong> Total tests</div>
  <div class="card" id="total-passes"><strong>{{ summary.totalPasses }}</strong> Passed</div>
  <div class="card" id="total-issues"><strong>{{ summary.totalIssues }}</strong> Issues</div>
  <div class="card" id="violation-types"><strong>{{ summary.violationTypes }}</strong> Rules violated</div>
</div>
<div class="pass-rate-bar" role="img" aria-label="Compliance rate - {{ compliance }} percent"><span style="width: {{ compliance }}%"></span></div>
<table>
<caption>Issues by severity</caption>
<thead><tr><th>Severity</th><th>Issues</th><th>Share</th></tr></thead>
<tbody>
{% for s in severities %}
<tr>
  <th><span class="badge badge-{{ s }}">{{ s|capitalize }}</span></th>
  <td>{{ summary.issuesBySeverity[s] }}</td>
  <td>{{ "%.1f%%"|format(shares[s]) }}</td>
</tr>
{% endfor %}
</tbody>
</table>
</section>
<section aria-labelledby="issues-h2">
<h2 id="issues-h2">Issues</h2>
<nav aria-label="Issue categories">
<ul class="tabs">
  <li><a class="tab" href="#category-all">All ({{ summary.violationTypes }})</a></li>
  {% for c in categories %}
  <li><a class="tab" href="#category-{{ c }}">{{ category_labels[c] }} ({{ grouped[c]|length }})</a></li>
  {% endfor %}
</ul>
</nav>
<h3 id="category-all">All issues</h3>
{% if summary.violationTypes %}
{% for s in severities %}
  {% for v in violations[s] %}
  <details>
    <summary><span class="badge badge-{{ s }}">{{ s }}</span> <strong>{{ v.id }}</strong>: {{ v.help }} ({{ v.nodes|length }}x)</summary>
    <p>{{ v.description }}{% if v.helpUrl %} <a href="{{ v.helpUrl }}">Learn more about {{ v.id }}</a>{% endif %}</p>
    {% for n in v.nodes %}
    <div class="node">
      {% if n.wcagCriteria %}<p>Criteria: {{ n.wcagCriteria|join(", ") }}</p>{% endif %}
      <p>{{ n.remediation.issue }}</p>
      <p>Selector: <code>{{ n.remediation.selector }}</code></p>
      {% if n.remediation.element %}<pre>{{ n.remediation.element }}</pre>{% endif %}
      <ol>
        {% for step in n.remediation.steps %}<li>{{ step }}</li>{% endfor %}
      </ol>
    </div>
    {% endfor %}
  </details>
  {% endfor %}
{% endfor %}
{% else %}
<p>No issues found.</p>
{% endif %}
{% for c in categories %}
<h3 id="category-{{ c }}">{{ category_labels[c] }}</h3>
{% if grouped[c] %}
<ul>
  {% for v in grouped[c] %}
  <li>({{ v.nodes|length }}x) - <strong>{{ v.id }}</strong> ({{ severity(v.impact) }}): {{ v.help }}</li>
  {% endfor %}
</ul>
{% else %}
<p>No {{ category_labels[c]|lower }} issues.</p>
{% endif %}
{% endfor %}
</section>
<section aria-labelledby="passes-h2">
<h2 id="passes-h2">Passed rules ({{ passes|length }})</h2>
{% if passes %}
<table>
<thead><tr><th>Rule</th><th>Description</th><th>Elements</th></tr></thead>
<tbody>
{% for p in passes %}
<tr><th>{{ p.id }}</th><td>{{ p.help }}</td><td>{{ p.nodeCount }}</td></tr>
{% endfor %}
</tbody>
</table>
{% endif %}
</section>
<section aria-labelledby="incomplete-h2">
<h2 id="incomplete-h2">Needs review ({{ incomplete|length }})</h2>
{% if incomplete %}
<table>
<thead><tr><th>Rule</th><th>Description</th><th>Elements</th></tr></thead>
<tbody>
{% for i in incomplete %}
<tr><th>{{ i.id }}</th><td>{{ i.help }}</td><td>{{ i.nodeCount }}</td></tr>
{% endfor %}
</tbody>
</table>
{% endif %}
</section>
</main>
<footer>
<p>Automated testing with <a href="https://github.com/dequelabs/axe-core">axe-core</a> covers only part of WCAG. Manual review is still required.</p>
</footer>
</body>
</html>
"""


def render_report_html(data: Dict[str, Any]) -> str:
    """Render a report dict (as produced by ``Report.model_dump()``) to HTML."""
    summary = Summary.model_validate(data["summary"])
    violations = data.get("violations", {}) or {}
    grouped = data.get("categories", {}) or {}
    return Template(TEMPLATE, autoescape=True).render(
        url=data.get("url", "unknown"),
        timestamp=data.get("timestamp", ""),
        summary=summary.model_dump(),
        compliance=compliance_rate(summary),
        shares=severity_shares(summary),
        severities=SEVERITIES,
        severity=classify_severity,
        categories=CATEGORIES,
        category_labels=CATEGORY_LABELS,
        violations={s: violations.get(s, []) for s in SEVERITIES},
        grouped={c: grouped.get(c, []) for c in CATEGORIES},
        passes=data.get("passes", []),
        incomplete=data.get("incomplete", []),
    )


def render_report(report_json_path: Path, out_html: Path):
    data = orjson.loads(Path(report_json_path).read_bytes())
    Path(out_html).write_text(render_report_html(data), encoding="utf-8")
