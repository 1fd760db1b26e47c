"""Typer CLI for turning axe-core output into compliance reports."""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import orjson
import typer
from pydantic import ValidationError
from dotenv import load_dotenv

from .pipeline import process_results
from .remediation import load_guidance_file, merge_guidance
from .report import render_report
from .utils import error_envelope, is_valid_scan_url

# loading variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


def _fail(error: str, message: Optional[str] = None, code: int = 1):
    typer.echo(json.dumps(error_envelope(error, message)), err=True)
    raise typer.Exit(code=code)


@app.callback()
def main_options(
    log_level: str = typer.Option("WARNING", envvar="WCAG_REPORT_LOG_LEVEL", help="Logging level."),
):
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def process(
    raw_file: str = typer.Argument(..., help="axe-core results JSON (output of axe.run)."),
    url: str = typer.Option(None, help="Scanned page URL; defaults to the 'url' field of the results."),
    out: str = typer.Option("reports", envvar="WCAG_REPORT_OUT", help="Output directory"),
    guidance_file: str = typer.Option(
        None, envvar="WCAG_REPORT_GUIDANCE", help="YAML file with extra remediation guidance."
    ),
    html: bool = typer.Option(True, help="Also render report.html."),
):
    """Build a compliance report from raw axe-core results."""
    try:
        raw = orjson.loads(Path(raw_file).read_bytes())
    except (OSError, orjson.JSONDecodeError) as e:
        _fail("Failed to read audit results", str(e))
    if not isinstance(raw, dict):
        _fail("Failed to read audit results", "Expected a JSON object with violations/passes/incomplete")

    target = url or raw.get("url")
    if not target:
        _fail("URL is required", code=2)
    if not is_valid_scan_url(target):
        _fail("Invalid URL format", str(target), code=2)

    guidance = None
    if guidance_file:
        try:
            guidance = merge_guidance(load_guidance_file(guidance_file))
        except (OSError, ValueError) as e:
            # pydantic.ValidationError is a ValueError
            _fail("Invalid guidance file", str(e))

    try:
        report_obj = process_results(raw, target, guidance=guidance)
    except ValidationError as e:
        _fail("Failed to read audit results", str(e))
    except Exception as e:
        logger.debug("Report build failed", exc_info=True)
        _fail("Failed to build report", str(e))

    run_id = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H-%M-%S")
    out_dir = Path(out) / run_id
    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / "report.json").write_text(
        json.dumps(report_obj.model_dump(mode="json"), indent=2), encoding="utf-8"
    )
    latest_link = Path(out) / "latest"
    try:
        if latest_link.exists() or latest_link.is_symlink():
            latest_link.unlink()
        latest_link.symlink_to(out_dir.resolve())
    except OSError:
        pass
    if html:
        try:
            render_report(out_dir / "report.json", out_dir / "report.html")
        except Exception as e:
            logger.debug("HTML render failed", exc_info=True)
            _fail("Failed to build report", str(e))
    s = report_obj.summary
    typer.echo(f"Found {s.totalIssues} issues ({s.violationTypes} rules), {s.totalPasses} passes.")
    typer.echo(f"Report complete: {out_dir}")


@app.command()
def report(run_dir: str):
    """Regenerate HTML report for an existing run directory."""
    rd = Path(run_dir)
    if not (rd / "report.json").exists():
        _fail("Report not found", str(rd / "report.json"))
    try:
        render_report(rd / "report.json", rd / "report.rebuilt.html")
    except Exception as e:
        logger.debug("HTML render failed", exc_info=True)
        _fail("Failed to build report", str(e))
    typer.echo("Report regenerated.")


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
