"""
palette-picker: interactive 256-color palette picker for the terminal

Click swatches to assign foreground and background colors to words, then
get the final screen as ANSI text plus a shell snippet reproducing it.

Quick Start:
    $ palette-picker hello world

Library use (headless):
    >>> from palette_picker import AppState, Renderer, AnsiExporter
    >>> state = AppState.create(["hello", "world"])
    >>> Renderer().render(state)
    >>> print(AnsiExporter().render(state.buffer))
"""

import logging

__version__ = "0.1.0"

# Core types
from palette_picker.core.color import ColorAttribute
from palette_picker.core.cell import Cell
from palette_picker.core.buffer import ScreenBuffer
from palette_picker.core.state import AppState, SelectionState, Word
from palette_picker.core.router import InputRouter
from palette_picker.config import PickerConfig

# Rendering and export
from palette_picker.render.screen import Renderer
from palette_picker.render.ansi import AnsiExporter
from palette_picker.render.snippet import SnippetExporter

# Errors
from palette_picker.errors import (
    InitializationError,
    InputStreamError,
    OutOfRangeIndex,
    PickerError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "ColorAttribute",
    "Cell",
    "ScreenBuffer",
    "AppState",
    "SelectionState",
    "Word",
    "InputRouter",
    "PickerConfig",
    # Rendering
    "Renderer",
    "AnsiExporter",
    "SnippetExporter",
    # Errors
    "PickerError",
    "InitializationError",
    "InputStreamError",
    "OutOfRangeIndex",
]
