"""Render synchronization outcomes as a rich table and summary."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_cloner.config.models import OutputConfig
from git_cloner.sync.models import SyncOutcome, SyncStatus, SyncSummary


@runtime_checkable
class ResultSink(Protocol):
    """Destination for the outcomes of a finished run."""

    def render(self, outcomes: list[SyncOutcome]) -> None: ...


class RichResultRenderer:
    """Writes a results table followed by per-status counts to a rich Console."""

    def __init__(self, console: Console | None = None, config: OutputConfig | None = None) -> None:
        self.console = console or Console()
        self.config = config or OutputConfig()

    def build_table(self, outcomes: list[SyncOutcome]) -> Table:
        table = Table()
        table.add_column("UserName")
        table.add_column("RepoName")
        table.add_column("Status")
        table.add_column("LastUpdatedTime")

        for outcome in outcomes:
            cells = [
                escape(outcome.owner),
                escape(outcome.repo),
                escape(outcome.status_label),
                escape(outcome.timestamp.strftime(self.config.timestamp_format)),
            ]
            if outcome.changed:
                table.add_row(*(f"[green]{c}[/green]" for c in cells))
            else:
                color = "red" if outcome.status is SyncStatus.error else "white"
                cells[2] = f"[{color}]{cells[2]}[/{color}]"
                table.add_row(*cells)
        return table

    def render(self, outcomes: list[SyncOutcome]) -> None:
        self.console.print()
        self.console.print(self.build_table(outcomes))

        summary = SyncSummary.from_outcomes(outcomes)
        self.console.print()
        self.console.print("[green]Summary:[/green]")
        self.console.print(f"[green]New repositories:[/green] {summary.new}")
        self.console.print(f"[yellow]Updated repositories:[/yellow] {summary.updated}")
        self.console.print(f"[blue]Existing repositories:[/blue] {summary.existing}")
        if summary.error:
            self.console.print(f"[red]Failed repositories:[/red] {summary.error}")
