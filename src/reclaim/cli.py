"""CLI interface for Reclaim."""

from __future__ import annotations

import logging
import sys

import click

from reclaim.core.engine import ReclaimEngine
from reclaim.core.privileges import PrivilegeError, is_admin, relaunch_elevated
from reclaim.models.clean_result import CleanOutcome, OutcomeStatus
from reclaim.models.run_report import RunReport
from reclaim.utils import bytes_to_human, format_elapsed, format_gb

_STATUS_MARKS = {
    OutcomeStatus.SUCCESS: ("✓", "green"),
    OutcomeStatus.SKIPPED: ("·", "bright_black"),
    OutcomeStatus.PARTIAL: ("!", "yellow"),
    OutcomeStatus.FAILED: ("✗", "red"),
}


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _ensure_admin(verbose: int, elevated: bool) -> None:
    """Relaunch elevated when needed. Exits the current process unless already admin."""
    if is_admin():
        return
    if elevated:
        click.echo("Administrator rights are required and could not be obtained.", err=True)
        sys.exit(1)

    click.echo("Administrator rights required, requesting elevation...")
    args = ["--elevated"]
    if verbose:
        args.append("-" + "v" * verbose)
    try:
        rc = relaunch_elevated(args)
    except PrivilegeError as exc:
        click.echo(f"{click.style('Error:', fg='red', bold=True)} {exc}", err=True)
        sys.exit(1)
    sys.exit(rc)


def _echo_outcome(outcome: CleanOutcome) -> None:
    mark, color = _STATUS_MARKS[outcome.status]
    name = outcome.target.display_name
    if outcome.status is OutcomeStatus.SKIPPED:
        click.echo(f"  {click.style(mark, fg=color)} {click.style(f'{name:40s} — {outcome.message}', fg=color)}")
        return
    click.echo(f"  {click.style(mark, fg=color)} {name:40s} — {outcome.message}")
    for error in outcome.errors:
        click.echo(f"      {click.style(error, fg=color)}")


def _echo_summary(report: RunReport) -> None:
    total = report.total_bytes
    cleaned = sum(1 for o in report.outcomes if o.status is OutcomeStatus.SUCCESS)
    click.echo()
    click.echo(f"  Targets processed: {len(report.catalog)} ({cleaned} cleaned)")
    if report.partials:
        click.echo(f"  Partially cleaned: {click.style(str(len(report.partials)), fg='yellow')}")
    if report.failures:
        click.echo(f"  Failed:            {click.style(str(len(report.failures)), fg='red')}")
    if report.scan.warnings:
        click.echo(f"  Unreadable items:  {len(report.scan.warnings)} (not counted in total)")
    click.echo(f"  Elapsed:           {format_elapsed(report.elapsed)}")
    click.echo(
        f"\nSpace cleaned: {click.style(format_gb(total) + ' GB', fg='green', bold=True)}"
        f" ({bytes_to_human(total)})\n"
    )


@click.command()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.option("--elevated", is_flag=True, hidden=True)
def main(verbose: int, elevated: bool) -> None:
    """Reclaim: clear Windows caches, temp files, logs and crash dumps."""
    _setup_logging(verbose)
    _ensure_admin(verbose, elevated)

    engine = ReclaimEngine()
    click.echo(f"\n{click.style('🔍', bold=True)} Measuring and cleaning...\n")
    report = engine.run(on_outcome=_echo_outcome)
    _echo_summary(report)

    if elevated:
        # The elevated copy runs in its own console window.
        click.pause()
