from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from advent.core.models import (
    ChallengeRecord,
    ExecutionOutcome,
    Faulted,
    Mismatched,
    Outcome,
    VerificationReport,
)


def _format_failure(outcome: Outcome) -> str:
    if isinstance(outcome, Mismatched):
        return (
            f"for input: \n\n{escape(outcome.input)}\n\n"
            f"---expected {outcome.expected}, got {outcome.actual}"
        )
    if isinstance(outcome, Faulted):
        return f"Error: {escape(outcome.error)}"
    return ""


def format_verification(report: VerificationReport) -> str:
    head = f"[dim]{report.label}[/dim] - "
    if report.skipped:
        return head + "[dim](skipped)[/dim]"

    counts = f"{report.passed}/{report.total}"
    if report.all_passed:
        return head + f"[green]{counts} ✔[/green]"

    lines = [head + f"[red]{counts} ✘[/red]"]
    for i, outcome in report.failures:
        lines.append(f"  [black on red] Test {i} [/black on red] [red]{_format_failure(outcome)}[/red]")
    return "\n".join(lines)


def format_execution(outcome: ExecutionOutcome) -> str:
    head = f"[dim]{outcome.label}[/dim] - "
    if outcome.skipped:
        return head + "[dim](skipped)[/dim]"
    timing = f"[dim]({outcome.elapsed:.6f}s)[/dim]"
    if outcome.error is not None:
        return head + f"[red]Error - {escape(outcome.error)}[/red] " + timing
    return head + f"{outcome.value} " + timing


def render_verification(reports: Sequence[VerificationReport], console: Console) -> None:
    for report in reports:
        console.print(format_verification(report), highlight=False)


def render_execution(outcomes: Sequence[ExecutionOutcome], console: Console) -> None:
    for outcome in outcomes:
        console.print(format_execution(outcome), highlight=False)


def render_challenges(records: Sequence[ChallengeRecord], console: Console) -> None:
    table = Table(title="Registered Challenges")
    table.add_column("Year", justify="right")
    table.add_column("Day", justify="right")
    table.add_column("Part", justify="right")
    table.add_column("Fixtures", justify="right")
    table.add_column("Enabled")
    for r in records:
        table.add_row(
            str(r.identity.year),
            f"{r.identity.day:02d}",
            str(r.identity.part),
            str(len(r.fixtures)),
            "no" if r.disabled else "yes",
        )
    console.print(table)
