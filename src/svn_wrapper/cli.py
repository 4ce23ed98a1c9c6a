"""Command-line interface for svn-wrapper."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from svn_wrapper import __version__
from svn_wrapper.config import ConfigurationError, StatusSplitMode, SvnWrapperConfig
from svn_wrapper.vcs.exceptions import CommandFailedError
from svn_wrapper.vcs.svn.manager import SvnManager

app = typer.Typer(
    name="svn-wrapper",
    help="Run Subversion commands and parse their output",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)

# Help text constants
VERBOSE_OUTPUT_HELP = "Verbose output"
ENV_FILE_HELP = "Path to custom environment file (default: .env.svnwrapper or .env)"
PATH_HELP = "Working copy path"


def setup_logging(verbose: bool) -> None:
    """Setup logging configuration.

    Args:
        verbose: If True, enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def create_manager(env_file: str | None, status_split: StatusSplitMode | None = None) -> SvnManager:
    """Load configuration and build a manager from it.

    Args:
        env_file: Optional custom environment file
        status_split: Optional override for the status split mode

    Returns:
        Configured SvnManager

    Raises:
        ConfigurationError: If configuration is invalid
    """
    config = SvnWrapperConfig(env_file=env_file)

    if status_split:
        config.status_split = status_split

    config_file = Path(env_file) if env_file else SvnWrapperConfig.find_env_file()
    logger.debug(f"Configuration file: {config_file or 'none'}")
    logger.debug(f"Status column split: {config.status_split.display_name}")

    return SvnManager(config)


@contextmanager
def handle_errors(verbose: bool) -> Iterator[None]:
    """Report configuration and svn failures on the console and exit with status 1."""
    try:
        yield
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)
    except CommandFailedError as e:
        console.print(f"[red]{escape(str(e).rstrip())}[/red]")
        if verbose:
            console.print_exception()
        sys.exit(1)


@app.command()
def info(
    path: str = typer.Argument(".", help="Working copy path or URL"),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Show repository information for a path."""
    setup_logging(verbose)

    with handle_errors(verbose):
        repo_info = create_manager(env_file).info(path)

        table = Table(show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("URL", escape(repo_info.url))
        table.add_row("Repository Root", escape(repo_info.repository_root))
        table.add_row("Last Changed Author", escape(repo_info.last_changed_author))
        table.add_row("Last Changed Rev", str(repo_info.last_changed_rev))
        table.add_row("Last Changed Date", escape(repo_info.last_changed_date))
        console.print(table)


@app.command()
def status(
    path: str = typer.Argument(".", help=PATH_HELP),
    split: StatusSplitMode | None = typer.Option(
        None,
        "--split",
        help="How status lines are split into columns (overrides config)",
    ),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Show working copy status, including out-of-date items."""
    setup_logging(verbose)

    with handle_errors(verbose):
        entries = create_manager(env_file, split).status(path)

        if not entries:
            console.print("[green]No changes[/green]")
            return

        table = Table(title=f"Status of {escape(path)}")
        table.add_column("Status", style="cyan")
        table.add_column("Item")
        table.add_column("Repository")
        table.add_column("Working Copy")
        for entry in entries:
            table.add_row(
                escape(entry.status),
                escape(entry.item),
                escape(entry.repository_status),
                escape(entry.working_copy_status),
                style="yellow" if entry.is_out_of_date else None,
            )
        console.print(table)


@app.command()
def log(
    path: str = typer.Argument(".", help="Working copy path or URL"),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Show the revision log for a path."""
    setup_logging(verbose)

    with handle_errors(verbose):
        output = create_manager(env_file).log(path)
        console.print(output, markup=False, highlight=False, end="")


@app.command()
def checkout(
    url: str = typer.Argument(..., help="Repository URL to check out"),
    path: str = typer.Argument(..., help="Destination path"),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Check out a repository into a local path."""
    setup_logging(verbose)

    with handle_errors(verbose):
        create_manager(env_file).checkout(url, path)
        console.print(f"[green]✓ Checked out {escape(url)} to {escape(path)}[/green]")


@app.command()
def commit(
    path: str = typer.Argument(".", help=PATH_HELP),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Commit local changes with the configured commit message."""
    setup_logging(verbose)

    with handle_errors(verbose):
        create_manager(env_file).commit(path)
        console.print(f"[green]✓ Committed {escape(path)}[/green]")


@app.command()
def update(
    path: str = typer.Argument(".", help=PATH_HELP),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Update a working copy to the latest revision."""
    setup_logging(verbose)

    with handle_errors(verbose):
        create_manager(env_file).update(path)
        console.print(f"[green]✓ Updated {escape(path)}[/green]")


@app.command()
def version(
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Show svn-wrapper and svn versions."""
    setup_logging(verbose)

    console.print(f"svn-wrapper {__version__}")
    with handle_errors(verbose):
        banner = create_manager(env_file).version()
        first_line = banner.splitlines()[0] if banner.strip() else "unknown"
        console.print(first_line, markup=False, highlight=False)


if __name__ == "__main__":
    app()
