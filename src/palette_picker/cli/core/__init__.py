"""Core TUI infrastructure - terminal I/O and input handling."""

from palette_picker.cli.core.terminal import Terminal, TerminalSink, TerminalSize
from palette_picker.cli.core.input import InputReader, InputEvent, KeyEvent, Key, MouseEvent

__all__ = [
    "Terminal",
    "TerminalSink",
    "TerminalSize",
    "InputReader",
    "InputEvent",
    "KeyEvent",
    "Key",
    "MouseEvent",
]
