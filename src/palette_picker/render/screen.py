"""Paint the swatch panels and word row into the screen buffer."""

from __future__ import annotations

from palette_picker.core.buffer import ScreenBuffer
from palette_picker.core.color import ColorAttribute
from palette_picker.core.constants import (
    BLOCK_WIDTH,
    COLORS_PER_ROW,
    LABEL_WIDTH,
    PALETTE_SIZE,
    PANEL_WIDTH,
    WORD_GAP,
    WORD_ROW_MARGIN,
)
from palette_picker.core.state import AppState, Word, glyph_width


def swatch_origin(index: int) -> tuple[int, int]:
    """Top-left (x, y) of a swatch within its panel."""
    return (index % COLORS_PER_ROW) * BLOCK_WIDTH, index // COLORS_PER_ROW


def swatch_label(index: int) -> str:
    return f"{index:0{LABEL_WIDTH}d}"


def draw_text(
    buffer: ScreenBuffer,
    x: int,
    y: int,
    text: str,
    fg: ColorAttribute,
    bg: ColorAttribute,
) -> int:
    """
    Draw text glyph by glyph and return the column after the last one.

    Wide glyphs take their first column; the extra columns are filled
    with blanks in the same colors.
    """
    for ch in text:
        width = glyph_width(ch)
        buffer.set_cell(x, y, ch, fg, bg)
        for i in range(1, width):
            buffer.set_cell(x + i, y, ' ', fg, bg)
        x += width
    return x


class Renderer:
    """
    Repaint the whole screen from state.

    Every call clears the buffer first, so the result depends only on the
    state passed in. Word positions are recorded as they are drawn.
    """

    def render(self, state: AppState) -> None:
        buffer = state.buffer
        buffer.clear()

        self._draw_background_panel(state)
        self._draw_foreground_panel(state)
        self._draw_words(state)

        buffer.flush()

    def _draw_background_panel(self, state: AppState) -> None:
        fg = state.selection.pending_foreground
        for i in range(PALETTE_SIZE):
            x, y = swatch_origin(i)
            draw_text(state.buffer, x, y, swatch_label(i), fg, ColorAttribute.indexed(i))

    def _draw_foreground_panel(self, state: AppState) -> None:
        bg = state.selection.pending_background
        for i in range(PALETTE_SIZE):
            x, y = swatch_origin(i)
            draw_text(state.buffer, x + PANEL_WIDTH, y, swatch_label(i), ColorAttribute.indexed(i), bg)

    def _draw_words(self, state: AppState) -> None:
        y = state.config.word_row
        x = WORD_ROW_MARGIN
        selected = state.selection.selected_word

        for i, word in enumerate(state.words):
            fg, bg = self.word_colors(state, word, selected=(i == selected))
            end = draw_text(state.buffer, x, y, word.text, fg, bg)
            word.x = x
            word.y = y
            word.width = end - x
            x = end + WORD_GAP

    @staticmethod
    def word_colors(
        state: AppState,
        word: Word,
        selected: bool,
    ) -> tuple[ColorAttribute, ColorAttribute]:
        """
        Colors a word is drawn with.

        A selected word with no background gets the highlight background;
        one that already has a background keeps it and gains bold.
        """
        fg, bg = word.fg, word.bg
        if selected:
            if bg.is_default():
                bg = ColorAttribute.indexed(state.config.highlight_background)
            else:
                bg = bg.with_bold()
        return fg, bg
