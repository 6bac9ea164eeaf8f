"""Keyboard and mouse input handling with event abstraction."""

from __future__ import annotations

import os
import re
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from palette_picker.errors import InputStreamError

# SGR (1006) mouse report without the leading ESC: [<button;col;row(M|m)
MOUSE_RE = re.compile(r'\[<(\d+);(\d+);(\d+)([Mm])')

# Shift, meta and ctrl modifier bits in a mouse button code
MOUSE_MODIFIERS = 4 | 8 | 16


class Key(Enum):
    """Keys the picker reacts to."""
    ENTER = auto()
    ESCAPE = auto()
    INTERRUPT = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence


@dataclass(frozen=True)
class MouseEvent:
    """A mouse report with 0-based screen coordinates."""
    x: int
    y: int
    button: int
    pressed: bool

    @property
    def is_left_press(self) -> bool:
        """Left button pressed, with or without modifier keys."""
        return self.pressed and (self.button & ~MOUSE_MODIFIERS) == 0


InputEvent = Union[KeyEvent, MouseEvent]


class InputReader:
    """
    Terminal input reader yielding key and mouse events.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    Read failures raise InputStreamError; they are not retried.
    """

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\x03': Key.INTERRUPT,
    }

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd

    def read(self, timeout: float = 0.1) -> Optional[InputEvent]:
        """
        Read a single event.

        Returns None if no input available within timeout.
        """
        # Process any buffered input first
        if self._buffer:
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        self._read_available()

        if self._buffer:
            return self._process_buffer()

        return None

    def read_event(self) -> InputEvent:
        """Read an event, blocking until one is available."""
        while True:
            event = self.read(timeout=1.0)
            if event is not None:
                return event

    def _read_chunk(self) -> str:
        try:
            data = os.read(self._fd, 1024)
        except BlockingIOError:
            return ""
        except OSError as e:
            raise InputStreamError(f"reading input failed: {e}") from e
        if not data:
            raise InputStreamError("input stream closed")
        return data.decode('utf-8', errors='replace')

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        self._buffer += self._read_chunk()

        # Wait for the rest of a split escape sequence
        if self._looks_incomplete():
            self._wait_for_escape_sequence()

    def _looks_incomplete(self) -> bool:
        start = self._buffer.rfind('\x1b')
        if start == -1:
            return False
        tail = self._buffer[start + 1:]
        if not tail:
            return True
        if tail[0] not in '[O':
            return False
        if len(tail) == 1:
            return True
        return not (tail[-1].isalpha() or tail[-1] == '~')

    def _wait_for_escape_sequence(self) -> None:
        """Wait for escape sequence to complete with proper timeouts."""
        deadline = time.monotonic() + 0.1  # 100ms total wait

        while time.monotonic() < deadline:
            remaining = deadline - time.monotonic()
            wait_time = min(remaining, 0.025)  # 25ms intervals

            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                self._buffer += self._read_chunk()
                if not self._looks_incomplete():
                    return

    def _process_buffer(self) -> Optional[InputEvent]:
        """Process buffered input and return next event."""
        if not self._buffer:
            return None

        # Simple keys
        if self._buffer[0] in self.SIMPLE_KEYS:
            key = self.SIMPLE_KEYS[self._buffer[0]]
            raw = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(key=key, raw=raw)

        # Escape sequence
        if self._buffer[0] == '\x1b':
            return self._parse_escape_sequence()

        # Printable character
        if self._buffer[0].isprintable():
            ch = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(char=ch, raw=ch)

        # Unknown control character - skip it
        self._buffer = self._buffer[1:]
        return None

    def _parse_escape_sequence(self) -> InputEvent:
        """Parse an escape sequence from the buffer."""
        # Buffer starts with \x1b
        if len(self._buffer) == 1:
            # Just escape, no sequence
            self._buffer = ""
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        rest = self._buffer[1:]

        # Find where this sequence ends
        end_idx = 0
        for i, ch in enumerate(rest):
            if i == 0 and ch in '[O':
                # CSI or SS3 introducer
                end_idx = 1
                continue
            if ch == '\x1b':
                # Start of next escape sequence
                end_idx = i
                break
            if ch.isalpha() or ch == '~':
                # End of this sequence
                end_idx = i + 1
                break
            end_idx = i + 1

        if end_idx == 0:
            # Escape immediately followed by another escape
            self._buffer = self._buffer[1:]
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        seq = rest[:end_idx]
        raw = '\x1b' + seq
        self._buffer = self._buffer[1 + end_idx:]

        match = MOUSE_RE.fullmatch(seq)
        if match is not None:
            button, col, row, kind = match.groups()
            # Reports are 1-indexed
            return MouseEvent(
                x=int(col) - 1,
                y=int(row) - 1,
                button=int(button),
                pressed=(kind == 'M'),
            )

        # Other sequences (arrows, function keys) carry no named key
        return KeyEvent(raw=raw)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except (ValueError, OSError) as e:
            raise InputStreamError(f"waiting for input failed: {e}") from e
        return bool(ready)
