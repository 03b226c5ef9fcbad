"""Tests for git_cloner.output: results table and summary."""

from datetime import datetime

import pytest
from rich.console import Console

from git_cloner.output.renderer import ResultSink, RichResultRenderer
from git_cloner.sync.models import SyncOutcome, SyncStatus

STAMP = datetime(2024, 5, 17, 9, 30, 5)


@pytest.fixture
def console():
    return Console(record=True, width=140, force_terminal=False, color_system=None)


@pytest.fixture
def outcomes():
    return [
        SyncOutcome(owner="acme", repo="widgets", status=SyncStatus.new, changed=True, timestamp=STAMP),
        SyncOutcome(owner="acme", repo="gizmos", status=SyncStatus.updated, changed=True, timestamp=STAMP),
        SyncOutcome(owner="acme", repo="sprockets", status=SyncStatus.existing, timestamp=STAMP),
        SyncOutcome(
            owner="Unknown",
            repo="Unknown",
            status=SyncStatus.error,
            message="Invalid URL",
            timestamp=STAMP,
        ),
    ]


class TestRichResultRenderer:
    def test_satisfies_result_sink(self, console):
        assert isinstance(RichResultRenderer(console), ResultSink)

    def test_table_headers(self, console, outcomes):
        RichResultRenderer(console).render(outcomes)
        text = console.export_text()
        for header in ("UserName", "RepoName", "Status", "LastUpdatedTime"):
            assert header in text

    def test_rows_and_timestamp_format(self, console, outcomes):
        RichResultRenderer(console).render(outcomes)
        text = console.export_text()
        assert "widgets" in text
        assert "Error: Invalid URL" in text
        assert "2024-05-17 09:30:05" in text

    def test_summary_counts(self, console, outcomes):
        RichResultRenderer(console).render(outcomes)
        text = console.export_text()
        assert "New repositories: 1" in text
        assert "Updated repositories: 1" in text
        assert "Existing repositories: 1" in text
        assert "Failed repositories: 1" in text

    def test_failed_line_hidden_without_errors(self, console, outcomes):
        RichResultRenderer(console).render(outcomes[:3])
        assert "Failed repositories" not in console.export_text()

    def test_changed_rows_are_green(self, outcomes):
        table = RichResultRenderer(Console()).build_table(outcomes)
        status_cells = table.columns[2]._cells
        assert status_cells[0] == "[green]New[/green]"
        assert status_cells[1] == "[green]Updated[/green]"
        assert status_cells[2] == "[white]Existing[/white]"
        assert status_cells[3] == "[red]Error: Invalid URL[/red]"

    def test_markup_in_messages_is_escaped(self, console):
        outcome = SyncOutcome.failure("bad ref [refs/heads/main]")
        RichResultRenderer(console).render([outcome])
        assert "[refs/heads/main]" in console.export_text()

    def test_custom_timestamp_format(self, console, outcomes):
        from git_cloner.config.models import OutputConfig

        RichResultRenderer(console, OutputConfig(timestamp_format="%d/%m/%Y")).render(outcomes)
        assert "17/05/2024" in console.export_text()

    def test_markup_in_timestamp_format_is_escaped(self, console, outcomes):
        from git_cloner.config.models import OutputConfig

        RichResultRenderer(console, OutputConfig(timestamp_format="[bold]%Y %H:%M")).render(outcomes)
        assert "[bold]2024 09:30" in console.export_text()
