"""Map pointer coordinates to picker actions."""

from __future__ import annotations

import logging
from typing import Optional

from palette_picker.core.actions import Action, Deselect, SelectWord, SetBackground, SetForeground
from palette_picker.core.color import ColorAttribute
from palette_picker.core.constants import BLOCK_WIDTH, COLORS_PER_ROW
from palette_picker.core.state import AppState
from palette_picker.errors import OutOfRangeIndex
from palette_picker.render.screen import Renderer

logger = logging.getLogger(__name__)


class InputRouter:
    """
    Resolve clicks against the current layout and apply them.

    Resolution order, first match wins:
    background panel, foreground panel, a drawn word, empty space.
    """

    def __init__(self, renderer: Optional[Renderer] = None) -> None:
        self.renderer = renderer or Renderer()

    def resolve(self, state: AppState, x: int, y: int) -> Optional[Action]:
        """
        Work out what a click at (x, y) means without changing anything.

        Returns None for clicks that map to an invalid palette index.
        """
        config = state.config
        panel_w = config.panel_width
        panel_h = config.panel_height

        try:
            if x < panel_w and y < panel_h:
                return SetBackground(self._palette_index(x, y))
            if panel_w <= x < 2 * panel_w and y < panel_h:
                return SetForeground(self._palette_index(x - panel_w, y))
        except OutOfRangeIndex as e:
            logger.debug("ignoring click at (%d, %d): %s", x, y, e)
            return None

        for i, word in enumerate(state.words):
            if word.contains(x, y):
                return SelectWord(i)

        return Deselect()

    def route_click(self, state: AppState, x: int, y: int) -> Optional[Action]:
        """Resolve a click, apply it, and repaint. Returns the applied action."""
        action = self.resolve(state, x, y)
        if action is None:
            return None

        state.apply(action)
        self.renderer.render(state)
        return action

    @staticmethod
    def _palette_index(x: int, y: int) -> int:
        index = y * COLORS_PER_ROW + x // BLOCK_WIDTH
        # Negative coordinates can still land inside [0, 256) after flooring
        if x < 0 or y < 0:
            raise OutOfRangeIndex(index)
        return ColorAttribute.indexed(index).to_index()
