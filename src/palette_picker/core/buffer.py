"""ScreenBuffer - authoritative record of every drawn cell."""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Protocol, runtime_checkable

from palette_picker.core.cell import Cell
from palette_picker.core.color import ColorAttribute

logger = logging.getLogger(__name__)


@runtime_checkable
class CellSink(Protocol):
    """Live view that mirrors buffer writes (usually the real terminal)."""

    def clear(self) -> None:
        ...

    def draw(self, x: int, y: int, glyph: str, fg: ColorAttribute, bg: ColorAttribute) -> None:
        ...

    def flush(self) -> None:
        ...


class ScreenBuffer:
    """
    Fixed-size grid of Cells.

    The buffer is written first and the optional sink is told afterwards,
    so the buffer stays correct with no sink attached or a failing one.
    ``max_x``/``max_y`` track the farthest coordinate ever written and
    bound the export pass.
    """

    def __init__(self, width: int, height: int, sink: Optional[CellSink] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"buffer size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.sink = sink
        self.max_x = -1
        self.max_y = -1
        self._cells: list[list[Cell]] = [
            [Cell() for _ in range(width)] for _ in range(height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_cell(self, x: int, y: int, ch: str, fg: ColorAttribute, bg: ColorAttribute) -> None:
        """Write a cell; coordinates outside the grid are ignored."""
        if not self.in_bounds(x, y):
            return

        cell = self._cells[y][x]
        cell.char = ch
        cell.fg = fg
        cell.bg = bg

        if x > self.max_x:
            self.max_x = x
        if y > self.max_y:
            self.max_y = y

        if self.sink is not None:
            try:
                self.sink.draw(x, y, ch, fg, bg)
            except OSError as e:
                logger.warning("live view draw failed at (%d, %d): %s", x, y, e)

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        return self._cells[y][x]

    def clear(self) -> None:
        """Blank every cell. The running maxima are kept."""
        for row in self._cells:
            for cell in row:
                cell.reset()

        if self.sink is not None:
            try:
                self.sink.clear()
            except OSError as e:
                logger.warning("live view clear failed: %s", e)

    def flush(self) -> None:
        if self.sink is not None:
            try:
                self.sink.flush()
            except OSError as e:
                logger.warning("live view flush failed: %s", e)

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over the used rows, each cut to the used width."""
        for y in range(self.max_y + 1):
            yield self._cells[y][:self.max_x + 1]
