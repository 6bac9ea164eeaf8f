"""Picker state: words, selection, and the AppState that owns them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from rich.cells import get_character_cell_size

from palette_picker.config import PickerConfig
from palette_picker.core.actions import Action, Deselect, SelectWord, SetBackground, SetForeground
from palette_picker.core.buffer import CellSink, ScreenBuffer
from palette_picker.core.color import ColorAttribute

logger = logging.getLogger(__name__)


def glyph_width(ch: str) -> int:
    """Terminal columns taken by a single glyph (0, 1 or 2)."""
    return get_character_cell_size(ch)


@dataclass
class Word:
    """
    A clickable word from the command line.

    ``x``, ``y`` and ``width`` are filled in by the renderer from where the
    word was actually drawn and are what hit-testing uses.
    """
    text: str
    fg: ColorAttribute = field(default_factory=ColorAttribute.default)
    bg: ColorAttribute = field(default_factory=ColorAttribute.default)
    x: int = 0
    y: int = 0
    width: int = 0

    def contains(self, x: int, y: int) -> bool:
        """Check if a screen position falls on this word."""
        return y == self.y and self.x <= x < self.x + self.width


@dataclass
class SelectionState:
    """
    Which word color clicks go to.

    With no word selected, color clicks set the pending colors used to
    preview the swatch panels. With a word selected, they overwrite that
    word's colors instead.
    """
    selected_word: Optional[int] = None
    pending_background: ColorAttribute = field(default_factory=ColorAttribute.default)
    pending_foreground: ColorAttribute = field(default_factory=ColorAttribute.default)

    def select(self, index: int) -> None:
        self.selected_word = index

    def deselect(self) -> None:
        self.selected_word = None


@dataclass
class AppState:
    """Everything the event loop owns, passed explicitly into each component."""
    config: PickerConfig
    buffer: ScreenBuffer
    words: list[Word] = field(default_factory=list)
    selection: SelectionState = field(default_factory=SelectionState)

    @classmethod
    def create(
        cls,
        texts: Iterable[str],
        config: Optional[PickerConfig] = None,
        sink: Optional[CellSink] = None,
    ) -> "AppState":
        """Build the initial state: one Default-colored word per text."""
        config = config or PickerConfig()
        buffer = ScreenBuffer(config.screen_width, config.screen_height, sink)
        words = [Word(text) for text in texts]
        return cls(config=config, buffer=buffer, words=words)

    @property
    def selected(self) -> Optional[Word]:
        """The currently selected word, if any."""
        index = self.selection.selected_word
        if index is None or not 0 <= index < len(self.words):
            return None
        return self.words[index]

    def apply(self, action: Action) -> None:
        """Apply a routed click to the selection and word colors."""
        if isinstance(action, SetBackground):
            color = ColorAttribute.indexed(action.index)
            word = self.selected
            if word is not None:
                word.bg = color
            else:
                self.selection.pending_background = color
        elif isinstance(action, SetForeground):
            color = ColorAttribute.indexed(action.index)
            word = self.selected
            if word is not None:
                word.fg = color
            else:
                self.selection.pending_foreground = color
        elif isinstance(action, SelectWord):
            if not 0 <= action.index < len(self.words):
                raise IndexError(f"word index {action.index} out of range")
            self.selection.select(action.index)
        elif isinstance(action, Deselect):
            self.selection.deselect()
        else:
            raise TypeError(f"unknown action: {action!r}")

        logger.debug("applied %s (selected=%s)", action, self.selection.selected_word)
