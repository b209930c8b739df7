"""Import summary formatting."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from issuetree.config import ImportConfig
from issuetree.models.state import ImportResult, LinkMethod


def build_summary_table(result: ImportResult) -> Table:
    """Tabulate created issues as title → ``#number``, sorted by title."""
    title = "Simulated issues" if result.dry_run else "Created issues"
    table = Table(title=title, show_lines=False)
    table.add_column("Title", overflow="fold")
    table.add_column("Issue", justify="right", no_wrap=True)
    for issue_title, number in sorted(result.issue_map.items()):
        table.add_row(issue_title, f"#{number}")
    return table


def format_totals(result: ImportResult) -> str:
    links = result.link_counts()
    return (
        f"Created: {len(result.issue_map)}  Failed: {len(result.failed)}  "
        f"Labels created: {len(result.labels_created)}  "
        f"Links: {links[LinkMethod.SUB_ISSUE]} sub-issue, "
        f"{links[LinkMethod.TASKLIST]} tasklist, {links[LinkMethod.FAILED]} failed"
    )


def print_summary(result: ImportResult, config: ImportConfig, console: Console | None = None) -> None:
    console = console or Console()
    mode = "dry-run" if result.dry_run else "apply"
    console.print()
    console.print(f"issuetree - import complete ({mode})", markup=False, highlight=False)
    console.print(f"  Target:    {config.target}", markup=False, highlight=False)
    console.print(f"  Project:   {config.project_number}", markup=False, highlight=False)
    console.print()
    if result.issue_map:
        console.print(build_summary_table(result))
    else:
        console.print("  No issues were created.", markup=False)
    console.print(f"  {format_totals(result)}", markup=False, highlight=False)
    if result.failed:
        console.print(f"  Failed:    {', '.join(result.failed)}", markup=False, highlight=False)
    if result.dry_run:
        console.print()
        console.print("  [dry-run] No changes were made", markup=False, highlight=False)
    console.print()
