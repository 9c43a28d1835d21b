"""Typer CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from kilo_editor import __version__
from kilo_editor.errors import KiloError


def _version_callback(value: bool) -> None:
    if value:
        print(f"kilo {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="kilo",
        help="A minimal screen-oriented text editor for the terminal.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def edit(
        path: Annotated[Optional[Path], typer.Argument(help="File to open (omit for an empty buffer)")] = None,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", envvar="KILO_LOG_FILE", help="Write a debug log here")] = None,
        read_timeout: Annotated[int, typer.Option("--read-timeout", envvar="KILO_READ_TIMEOUT", min=0, max=255, help="Input poll interval in tenths of a second")] = 1,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")] = False,
        version: Annotated[Optional[bool], typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit")] = None,
    ) -> None:
        """Open FILE in the editor. Ctrl-Q quits."""
        from kilo_editor.cli.studio.editor import run_editor
        from kilo_editor.config import EditorConfig
        from kilo_editor.log import setup_logging

        config = EditorConfig(
            read_timeout_ds=read_timeout,
            log_file=log_file.expanduser() if log_file else None,
            verbose=verbose,
        )
        logger = setup_logging(config.log_file, config.verbose)

        try:
            run_editor(path, config)
        except KiloError as e:
            logger.error("fatal: %s", e)
            console.print(f"[bold red]{escape(e.operation)}:[/] {escape(str(e.reason))}", soft_wrap=True)
            raise typer.Exit(1)

    return app
