"""Typer CLI application."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ansi_color_picker.core.palette import PaletteError, PaletteRegistry
from ansi_color_picker.core.state import SelectionState

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

PaletteOption = Annotated[
    Optional[Path],
    typer.Option(
        "--palette",
        "-p",
        help="JSON file mapping category names to lists of 256-color indexes",
        envvar="ANSI_COLOR_PICKER_PALETTE",
    ),
]


class LogLevel(str, Enum):
    """Levels accepted by --log-level."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def configure_logging(log_file: Optional[Path], level: LogLevel) -> None:
    """
    Send the package's log records to ``log_file``; stdout belongs to the TUI.

    Raises:
        OSError: If the file cannot be opened for appending
    """
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("ansi_color_picker")
    package_logger.addHandler(handler)
    package_logger.setLevel(level.value.upper())


def load_registry(palette: Optional[Path]) -> PaletteRegistry:
    if palette is None:
        return PaletteRegistry.default()
    return PaletteRegistry.from_file(palette)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-color-picker",
        help="Pick a foreground/background color pair from 256-color palettes.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.command()
    def pick(
        palette: PaletteOption = None,
        category: Annotated[Optional[str], typer.Option("--category", "-c", help="Category to start in")] = None,
        log_file: Annotated[
            Optional[Path],
            typer.Option("--log-file", help="Write debug logs to this file", envvar="ANSI_COLOR_PICKER_LOG"),
        ] = None,
        log_level: Annotated[
            LogLevel, typer.Option("--log-level", case_sensitive=False, help="Log level for --log-file")
        ] = LogLevel.DEBUG,
    ) -> None:
        """Launch the interactive color picker."""
        from ansi_color_picker.cli.picker import run_picker

        try:
            configure_logging(log_file, log_level)
        except OSError as e:
            err_console.print(f"[red]Cannot open log file:[/] {escape(str(e))}")
            raise typer.Exit(1)

        try:
            registry = load_registry(palette)
            start = registry.index_of(category) if category else 0
        except PaletteError as e:
            logger.error("Palette configuration rejected: %s", e)
            err_console.print(f"[red]Palette error:[/] {escape(str(e))}")
            raise typer.Exit(1)

        run_picker(registry, SelectionState.initial(start))

    @app.command()
    def palettes(palette: PaletteOption = None) -> None:
        """List palette categories and their color indexes."""
        from ansi_color_picker.render.terminal import swatch

        try:
            registry = load_registry(palette)
        except PaletteError as e:
            err_console.print(f"[red]Palette error:[/] {escape(str(e))}")
            raise typer.Exit(1)

        for category in registry.categories():
            console.print(f"[bold cyan]{category.name}[/] [dim]({len(category)} colors)[/]")
            console.print("  " + " ".join(str(c) for c in category.colors), highlight=False)
            # Swatches are raw SGR, so bypass Rich markup
            print("  " + "".join(swatch(c, " ") + swatch(c, " ") for c in category.colors))

    return app
