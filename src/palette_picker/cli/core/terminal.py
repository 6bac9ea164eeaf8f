"""Low-level terminal operations and the live cell sink."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from palette_picker.core.color import ColorAttribute
from palette_picker.core.constants import CSI, RESET
from palette_picker.core.state import glyph_width
from palette_picker.errors import InitializationError


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal I/O for the picker's full-screen mode."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def check() -> int:
        """Return the stdin descriptor, failing if it is not a terminal."""
        try:
            fd = sys.stdin.fileno()
        except (OSError, ValueError) as e:
            raise InitializationError(f"stdin has no file descriptor: {e}") from e
        if not os.isatty(fd):
            raise InitializationError("stdin is not a terminal")
        return fd

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        sys.stdout.write(RESET)
        sys.stdout.flush()

    @staticmethod
    def hide_cursor() -> None:
        sys.stdout.write('\x1b[?25l')
        sys.stdout.flush()

    @staticmethod
    def show_cursor() -> None:
        sys.stdout.write('\x1b[?25h')
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode(fd: int) -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError as e:
            raise InitializationError("raw terminal mode needs termios") from e

        try:
            old_settings = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as e:
            raise InitializationError(f"cannot enter raw mode: {e}") from e
        try:
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        sys.stdout.write('\x1b[?1049h')
        sys.stdout.flush()
        try:
            yield
        finally:
            sys.stdout.write('\x1b[?1049l')
            sys.stdout.flush()

    @staticmethod
    @contextmanager
    def mouse_tracking() -> Iterator[None]:
        """Report button presses/releases using SGR (1006) coordinates."""
        sys.stdout.write('\x1b[?1000h\x1b[?1006h')
        sys.stdout.flush()
        try:
            yield
        finally:
            sys.stdout.write('\x1b[?1006l\x1b[?1000l')
            sys.stdout.flush()

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Full TUI mode: alternate screen, hidden cursor, raw input, mouse."""
        fd = Terminal.check()
        with Terminal.raw_mode(fd):
            with Terminal.alternate_screen():
                Terminal.hide_cursor()
                try:
                    with Terminal.mouse_tracking():
                        yield
                finally:
                    Terminal.show_cursor()
                    Terminal.reset()


class TerminalSink:
    """
    Mirror buffer writes onto a real terminal.

    Draw calls are queued as cursor-addressed output and written in one
    go on ``flush()``. Glyphs that do not fit inside ``size`` are dropped,
    since terminals clamp out-of-range cursor positions onto the last
    row or column.
    """

    def __init__(self, stream: Optional[TextIO] = None, size: Optional[TerminalSize] = None) -> None:
        self.stream = sys.stdout if stream is None else stream
        self.size = Terminal.size() if size is None else size
        self._pending: list[str] = []

    def fits(self, x: int, y: int, glyph: str) -> bool:
        """Check if the whole glyph lands on the visible screen."""
        return 0 <= y < self.size.rows and 0 <= x and x + max(glyph_width(glyph), 1) <= self.size.cols

    def clear(self) -> None:
        self._pending.clear()
        self._pending.append(f"{RESET}{CSI}2J")

    def draw(self, x: int, y: int, glyph: str, fg: ColorAttribute, bg: ColorAttribute) -> None:
        if not self.fits(x, y, glyph):
            return
        sgr = ["0", fg.to_sgr_fg(), bg.to_sgr_bg()]
        if fg.bold or bg.bold:
            sgr.insert(1, "1")
        # Terminal rows and columns are 1-indexed
        self._pending.append(f"{CSI}{y + 1};{x + 1}H{CSI}{';'.join(sgr)}m{glyph}")

    def flush(self) -> None:
        if not self._pending:
            return
        self.stream.write(''.join(self._pending) + RESET)
        self.stream.flush()
        self._pending.clear()
