"""CLI entry point for git-cloner."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress
from rich.syntax import Syntax

from git_cloner.config import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE, ClonerConfig, load_config
from git_cloner.log import configure_logging
from git_cloner.output import ResultSink, RichResultRenderer
from git_cloner.sync import RepoSynchronizer
from git_cloner.vcs import create_backend

app = typer.Typer(
    name="git-cloner",
    help="Clone missing repositories and fast-forward existing ones from a URL list.",
    add_completion=False,
)


def _print_missing_list(console: Console, repo_list: Path) -> None:
    name = escape(str(repo_list))
    console.print(f"[red]Error: Repository list file '{name}' not found![/red]")
    console.print(
        f"[yellow]Please create a '{name}' file with one repository URL per line.[/yellow]"
    )
    console.print("[dim]Example:[/dim]")
    console.print("[dim]https://github.com/user/repo1[/dim]")
    console.print("[dim]https://github.com/user/repo2[/dim]")


def _init_config(console: Console, force: bool) -> None:
    target = Path(CONFIG_FILENAME)
    if target.exists() and not force:
        console.print(f"[yellow]{CONFIG_FILENAME} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    console.print(f"[green]Created[/green] {target}")


def run_sync(
    cfg: ClonerConfig,
    repo_list: Path,
    clone_dir: Path,
    console: Console,
    sink: ResultSink | None = None,
) -> None:
    """Read *repo_list*, sync each entry into *clone_dir*, then hand outcomes to *sink*."""
    # Undecodable bytes become U+FFFD so a bad line fails on its own
    lines = repo_list.read_text(encoding="utf-8", errors="replace").splitlines()
    clone_dir.mkdir(parents=True, exist_ok=True)

    synchronizer = RepoSynchronizer(create_backend(cfg.vcs), cfg.sync)
    sink = sink or RichResultRenderer(console, cfg.output)

    console.print(f"[green]Found {len(lines)} repositories to process[/green]")
    console.print()

    with Progress(console=console) as progress:
        task = progress.add_task("[green]Cloning repositories...", total=len(lines))
        outcomes = asyncio.run(
            synchronizer.run(lines, clone_dir, on_progress=lambda: progress.advance(task))
        )

    sink.render(outcomes)


@app.command()
def main(
    repo_list: Annotated[
        str | None, typer.Argument(help="File with one repository URL per line")
    ] = None,
    clone_dir: Annotated[
        str | None, typer.Argument(help="Directory to clone repositories into")
    ] = None,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help=f"Path to {CONFIG_FILENAME}")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    init_config: Annotated[
        bool, typer.Option("--init-config", help=f"Create default {CONFIG_FILENAME} and exit")
    ] = False,
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite an existing config with --init-config")
    ] = False,
    show_config: Annotated[
        bool, typer.Option("--show-config", help="Print the resolved configuration and exit")
    ] = False,
) -> None:
    """Clone or update every repository listed in REPO_LIST."""
    console = Console()

    if init_config:
        _init_config(console, force)
        return

    try:
        cfg = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if show_config:
        console.print(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))
        return

    configure_logging("debug" if verbose else cfg.log_level, cfg.log_format, console)

    if cfg.output.show_banner:
        console.print(Panel.fit("[bold blue]Git Cloner[/bold blue]", border_style="blue"))

    list_path = Path(repo_list or cfg.sync.repo_list)
    target_dir = Path(clone_dir or cfg.sync.clone_dir)

    if not list_path.is_file():
        _print_missing_list(console, list_path)
        return

    try:
        run_sync(cfg, list_path, target_dir, console)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
