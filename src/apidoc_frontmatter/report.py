"""Rich rendering of batch run reports and the classification table."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from apidoc_frontmatter.categories import CategoryTable
from apidoc_frontmatter.types import Outcome, RunReport

_OUTCOME_STYLES: dict[Outcome, str] = {
    Outcome.ADDED: "green",
    Outcome.REMOVED: "green",
    Outcome.SKIPPED_PRESENT: "dim",
    Outcome.SKIPPED_ABSENT: "dim",
    Outcome.MALFORMED: "yellow",
    Outcome.FAILED: "red",
}


def render_report(report: RunReport, console: Console) -> None:
    """Print per-file outcomes, folder errors and a summary line."""
    title = f"{report.operation.capitalize()} frontmatter — {escape(str(report.root))}"
    if report.dry_run:
        title += " (dry run)"

    table = Table(title=title, show_header=True)
    table.add_column("Folder", style="cyan")
    table.add_column("File")
    table.add_column("Outcome")
    table.add_column("Order", justify="right")
    table.add_column("Detail")

    for folder in report.folders:
        if folder.error:
            table.add_row(
                escape(folder.folder), "-", "[red]folder error[/red]", "-", escape(folder.error)
            )
            continue
        for f in folder.files:
            style = _OUTCOME_STYLES.get(f.outcome, "")
            table.add_row(
                escape(folder.folder),
                escape(f.path.name),
                f"[{style}]{f.outcome.value}[/{style}]" if style else f.outcome.value,
                str(f.order) if f.order is not None else "-",
                escape(f.message or ""),
            )

    console.print(table)

    counts = report.counts
    summary = ", ".join(f"{outcome.value}: {n}" for outcome, n in counts.items() if n)
    console.print(summary or "No markdown files found.")


def render_categories(table: CategoryTable, console: Console) -> None:
    out = Table(title="API Categories", show_header=True)
    out.add_column("Folder", style="cyan")
    out.add_column("Title")
    out.add_column("Base order", justify="right")
    out.add_column("Badge")

    for folder, descriptor in table.items():
        out.add_row(
            escape(folder),
            escape(descriptor.title),
            str(descriptor.base_order),
            escape(descriptor.badge),
        )

    console.print(out)
