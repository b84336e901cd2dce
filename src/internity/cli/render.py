"""Rendering of command results for the interactive session.

Listings and the dashboard are drawn as Rich tables.  When Rich is not
installed the same rows are printed as aligned plain text.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from internity.cli.console import console, escape
from internity.core.models import CommandResult, DashboardSummary, ListedInternship

HORIZONTAL_LINE: str = "-" * 60

_LISTING_COLUMNS: tuple[str, ...] = ("#", "Company", "Role", "Deadline", "Pay", "Status")


# ---------------------------------------------------------------------------
# Row builders (pure)
# ---------------------------------------------------------------------------

def _format_pay(pay: int | None) -> str:
    """Render pay with thousands separators, or ``"—"`` when unknown."""
    if pay is None:
        return "—"
    return f"{pay:,}"


def listing_rows(listing: Sequence[ListedInternship]) -> list[tuple[str, ...]]:
    return [
        (
            str(item.position),
            item.internship.company,
            item.internship.role,
            str(item.internship.deadline),
            _format_pay(item.internship.pay),
            item.internship.status,
        )
        for item in listing
    ]


def dashboard_rows(summary: DashboardSummary) -> list[tuple[str, str]]:
    rows: list[tuple[str, str]] = [
        ("User", summary.username or "—"),
        ("Total internships", str(summary.total)),
    ]
    for status, count in summary.status_counts:
        rows.append((f"Status: {status}", str(count)))

    if summary.next_deadline is None:
        rows.append(("Next deadline", "—"))
    else:
        upcoming = summary.next_deadline
        rows.append(
            (
                "Next deadline",
                f"{upcoming.internship.deadline} "
                f"({upcoming.internship.company} - {upcoming.internship.role})",
            )
        )
    rows.append(("Average pay", _format_pay(summary.average_pay)))
    return rows


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _print_plain_table(columns: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    widths = [
        max([len(column), *(len(row[i]) for row in rows)])
        for i, column in enumerate(columns)
    ]
    print("  ".join(f"{c:<{w}}" for c, w in zip(columns, widths)), file=sys.stdout)
    for row in rows:
        print("  ".join(f"{v:<{w}}" for v, w in zip(row, widths)), file=sys.stdout)


def _print_table(
    title: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(columns, rows)
        return

    table = Table(
        title=title,
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    for column in columns:
        table.add_column(column, justify="right" if column in ("#", "Pay") else "left")
    for row in rows:
        table.add_row(*(escape(value) for value in row))
    console.print(table)


def render_result(result: CommandResult) -> None:
    """Print *result*: the message first, then any table it carries."""
    console.print(escape(result.message))

    if result.listing:
        _print_table("Internships", _LISTING_COLUMNS, listing_rows(result.listing))

    if result.dashboard is not None:
        _print_table("Dashboard", ("", ""), dashboard_rows(result.dashboard))


def render_error(message: str, hint: str | None = None) -> None:
    console.print(f"[bold red]{escape(message)}[/bold red]")
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


def render_line() -> None:
    console.print(HORIZONTAL_LINE)
