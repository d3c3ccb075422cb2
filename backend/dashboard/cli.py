"""
Sourcing Pulse command-line entry point.

Runs the dashboard analysis headless: each input field is read from a text
file, and the resulting snapshot is printed as a short report or as JSON.

Install and run::

    pip install -e .
    sourcing-pulse analyze --search-links links.txt --daily-updates eod.txt \\
        --transcript hm.txt --sheet sheet.txt
    sourcing-pulse analyze --sheet sheet.txt --json
    sourcing-pulse demo
"""

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer

from config import Config, load_config
from dashboard.analyzer import DashboardAnalyzer
from dashboard.demo import DEMO_SNAPSHOT
from dashboard.models import DashboardSnapshot, RawInputBundle

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

app = typer.Typer(
    name="sourcing-pulse",
    help="Sourcing Pulse: recruiting signals and recommendations from pasted notes.",
    add_completion=False,
)


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once, at CLI entry."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _load_config_or_exit(config_path: Optional[Path]) -> Config:
    """Load Config, printing a friendly error and exiting on failure."""
    if config_path is None:
        return Config()
    try:
        return load_config(str(config_path))
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _read_text_or_exit(path: Optional[Path]) -> str:
    """Read one input field from disk; a missing option means an empty field."""
    if path is None:
        return ""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        typer.echo(f"[ERROR] Cannot read {path}: {exc}", err=True)
        raise typer.Exit(code=1)


def _render(snapshot: DashboardSnapshot) -> str:
    """Plain-text dashboard report."""
    lines = []
    if snapshot.notice:
        lines.append(f"NOTICE: {snapshot.notice}")
        lines.append("")

    approval = snapshot.approval
    lines.append(f"Approval  {approval.rate}% [{approval.status}] {approval.headline}")
    lines.append(f"          Main blocker: {approval.main_blocker}")
    if approval.approved or approval.rejected:
        lines.append(f"          Approved: {approval.approved}, Rejected: {approval.rejected}")

    drift = snapshot.drift
    flag = "DETECTED" if drift.detected else "none"
    lines.append(f"Drift     {flag} ({drift.severity}) {drift.direction}")
    lines.append(f"          {drift.evidence}")

    coverage = snapshot.coverage
    missing = ", ".join(coverage.missing_methods) or "none"
    lines.append(f"Coverage  {coverage.score}/100, primary: {coverage.overused_method}")
    lines.append(f"          Missing: {missing}")

    search = snapshot.search
    lines.append(
        f"Search    {search.seniority_bias} / {search.company_type} / {search.search_intent}"
    )

    lines.append("")
    lines.append("Recommendations:")
    for i, rec in enumerate(snapshot.recommendations, 1):
        lines.append(f"  {i}. {rec}")
    return "\n".join(lines)


def _emit(snapshot: DashboardSnapshot, as_json: bool) -> None:
    if as_json:
        payload = asdict(snapshot)
        payload["approval_status"] = snapshot.approval_status
        payload["drift_detected"] = snapshot.drift_detected
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        typer.echo(_render(snapshot))


@app.command()
def analyze(
    search_links: Optional[Path] = typer.Option(None, "--search-links", help="File with search links, one per line."),
    daily_updates: Optional[Path] = typer.Option(None, "--daily-updates", help="File with daily sourcing updates."),
    transcript: Optional[Path] = typer.Option(None, "--transcript", help="File with hiring manager meeting notes."),
    retro: Optional[Path] = typer.Option(None, "--retro", help="File with retrospective notes."),
    sheet: Optional[Path] = typer.Option(None, "--sheet", help="File with the pasted sheet summary."),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config YAML."),
    as_json: bool = typer.Option(False, "--json", help="Print the snapshot as JSON."),
) -> None:
    """Analyze pasted recruiting notes and print the dashboard snapshot."""
    cfg = _load_config_or_exit(config)
    configure_logging(cfg.log_level)

    inputs = RawInputBundle(
        search_links=_read_text_or_exit(search_links),
        daily_updates=_read_text_or_exit(daily_updates),
        transcript=_read_text_or_exit(transcript),
        retro_notes=_read_text_or_exit(retro),
        sheet_summary=_read_text_or_exit(sheet),
    )

    snapshot = DashboardAnalyzer(cfg).analyze(inputs)
    _emit(snapshot, as_json)


@app.command()
def demo(
    as_json: bool = typer.Option(False, "--json", help="Print the snapshot as JSON."),
) -> None:
    """Print the built-in demo snapshot."""
    _emit(DEMO_SNAPSHOT, as_json)


if __name__ == "__main__":
    app()
