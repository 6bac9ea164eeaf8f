"""Typer CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from palette_picker.config import (
    DEFAULT_HIGHLIGHT,
    DEFAULT_SCREEN_HEIGHT,
    DEFAULT_SCREEN_WIDTH,
    PickerConfig,
)
from palette_picker.errors import PickerError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Optional[Path], level: str) -> None:
    """Send log records to a file; the terminal belongs to the picker."""
    if log_file is None:
        return
    if not isinstance(logging.getLevelName(level.upper()), int):
        raise typer.BadParameter(f"unknown log level: {level}")
    logging.basicConfig(
        filename=str(log_file),
        level=level.upper(),
        format=LOG_FORMAT,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="palette-picker",
        help="Pick 256-color foregrounds and backgrounds for words with the mouse.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def pick(
        words: Annotated[Optional[list[str]], typer.Argument(help="Words to color, in order")] = None,
        width: Annotated[int, typer.Option("--width", envvar="PALETTE_PICKER_WIDTH", help="Screen buffer columns")] = DEFAULT_SCREEN_WIDTH,
        height: Annotated[int, typer.Option("--height", envvar="PALETTE_PICKER_HEIGHT", help="Screen buffer rows")] = DEFAULT_SCREEN_HEIGHT,
        highlight: Annotated[int, typer.Option("--highlight", envvar="PALETTE_PICKER_HIGHLIGHT", help="Palette index behind a selected word")] = DEFAULT_HIGHLIGHT,
        definitions: Annotated[bool, typer.Option("--definitions", "-d", help="Print shell variable definitions for the snippet")] = False,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write logs to this file")] = None,
        log_level: Annotated[str, typer.Option("--log-level", help="Log level for --log-file")] = "INFO",
    ) -> None:
        """Open the palette picker; on exit print the colored screen and an echo snippet.

        Click a word to select it, then click swatches in the left (background)
        or right (foreground) panel. Esc, Enter or Ctrl-C finishes.
        """
        from palette_picker.cli.studio.picker import run_picker

        try:
            config = PickerConfig(
                screen_width=width,
                screen_height=height,
                highlight_background=highlight,
                definitions=definitions,
            )
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e

        configure_logging(log_file, log_level)

        try:
            run_picker(words or [], config)
        except PickerError as e:
            console.print(f"[red]Error:[/] {e}")
            raise typer.Exit(1)

    return app
