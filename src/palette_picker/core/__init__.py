"""Core screen/state model: colors, cells, buffer, selection and routing."""

from palette_picker.core.actions import Action, Deselect, SelectWord, SetBackground, SetForeground
from palette_picker.core.buffer import CellSink, ScreenBuffer
from palette_picker.core.cell import Cell
from palette_picker.core.color import ColorAttribute
from palette_picker.core.state import AppState, SelectionState, Word

__all__ = [
    "Action",
    "AppState",
    "Cell",
    "CellSink",
    "ColorAttribute",
    "Deselect",
    "ScreenBuffer",
    "SelectWord",
    "SelectionState",
    "SetBackground",
    "SetForeground",
    "Word",
]
