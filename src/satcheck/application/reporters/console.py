"""Console reporter: CheckResult -> rich tables grouped by file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from satcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from satcheck.domain.model.check_result import CheckResult


class ConsoleReporter(BaseReporter):
    """Rich console reporter.

    Data Completeness: shows all accepted violations; suppressed ones
    only appear in the summary count.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize reporter.

        Args:
            console: Rich console to print to (default: new stdout console)
        """
        self._console = console if console is not None else Console()

    def report(self, result: CheckResult) -> None:
        """Render summary and per-file violation tables."""
        console = self._console
        stats = result.stats

        console.print()
        console.rule("[bold]STATIC ANALYSIS[/bold]")
        console.print()
        console.print(
            f"[bold]Files:[/bold] {stats.files_checked}  "
            f"[bold]Violations:[/bold] {result.violation_count}  "
            f"[dim](suppressed: {stats.events_suppressed})[/dim]"
        )
        console.print()

        for source_file, violations in result.by_file().items():
            console.print(f"[bold]{escape(str(source_file))}[/bold]")
            table = Table(show_header=False, box=None, padding=(0, 1))
            table.add_column("line", style="dim")
            table.add_column("message")
            table.add_column("rule", style="cyan")

            for violation in violations:
                table.add_row(f":{violation.line}", escape(violation.message), violation.rule_id)

            console.print(table)
            console.print()

        status = "[green]PASSED[/green]" if result.passed else "[bold red]FAILED[/bold red]"
        console.print(f"Result: {status}")
