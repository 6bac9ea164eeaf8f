"""Interactive palette picker application.

Layout:
    +----------------------+----------------------+
    |  Background swatches |  Foreground swatches |
    |  (8 x 32, 000-255)   |  (8 x 32, 000-255)   |
    +----------------------+----------------------+

     word1 word2 word3 ...

Mouse Controls:
    Click a swatch: set the selected word's color, or the pending
        color when no word is selected
    Click a word: select it
    Click elsewhere: clear the selection

Keyboard Controls:
    Esc / Enter / Ctrl-C: finish and print the result
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional, Protocol

from palette_picker.cli.core.input import InputEvent, InputReader, Key, KeyEvent, MouseEvent
from palette_picker.cli.core.terminal import Terminal, TerminalSink
from palette_picker.config import PickerConfig
from palette_picker.core.buffer import CellSink
from palette_picker.core.constants import RESET
from palette_picker.core.router import InputRouter
from palette_picker.core.state import AppState
from palette_picker.errors import InputStreamError
from palette_picker.render.ansi import AnsiExporter
from palette_picker.render.screen import Renderer
from palette_picker.render.snippet import SnippetExporter

logger = logging.getLogger(__name__)

EXIT_KEYS = frozenset({Key.ESCAPE, Key.ENTER, Key.INTERRUPT})


class EventSource(Protocol):
    """Anything that blocks until the next input event is available."""

    def read_event(self) -> InputEvent:
        ...


class PickerApp:
    """
    Palette picker event loop.

    Owns the AppState and passes it into the renderer, router and
    exporters. Terminal setup happens in :meth:`run`; the loop itself
    (:meth:`start`, :meth:`handle_event`, :meth:`run_loop`) works with any
    event source and sink, which is how it is driven headless.
    """

    def __init__(
        self,
        words: Iterable[str],
        config: Optional[PickerConfig] = None,
        reader: Optional[EventSource] = None,
        sink: Optional[CellSink] = None,
    ) -> None:
        self.words = list(words)
        self.config = config or PickerConfig()
        self.reader = reader
        self.sink = sink
        self.renderer = Renderer()
        self.router = InputRouter(self.renderer)
        self.state: Optional[AppState] = None
        self.running = False

    def run(self) -> None:
        """Run interactively until the user finishes."""
        with Terminal.managed_mode():
            if self.sink is None:
                self.sink = TerminalSink()
            if self.reader is None:
                self.reader = InputReader()
            self.start()
            self.run_loop()

    def start(self) -> AppState:
        """Build the initial state and draw the first frame."""
        self.state = AppState.create(self.words, self.config, self.sink)
        self.renderer.render(self.state)
        logger.info("picker started with %d word(s)", len(self.state.words))
        return self.state

    def run_loop(self) -> None:
        """Dispatch events until an exit key or an input failure."""
        if self.state is None:
            self.start()
        assert self.reader is not None

        self.running = True
        while self.running:
            try:
                event = self.reader.read_event()
            except InputStreamError as e:
                logger.error("input stream failed, finishing: %s", e)
                break
            self.handle_event(event)
        self.running = False

    def handle_event(self, event: InputEvent) -> None:
        """Handle one input event."""
        assert self.state is not None

        if isinstance(event, KeyEvent):
            if event.key in EXIT_KEYS:
                logger.info("exit requested with %s", event.key.name)
                self.running = False
            return

        if isinstance(event, MouseEvent) and event.is_left_press:
            action = self.router.route_click(self.state, event.x, event.y)
            logger.debug("click at (%d, %d) -> %s", event.x, event.y, action)

    def export(self) -> str:
        """Final screen dump followed by the shell snippet."""
        if self.state is None:
            return ""

        dump = AnsiExporter(reset_at_end=False).render(self.state.buffer)
        snippets = SnippetExporter()

        parts = [dump, "\n\n"]
        if self.config.definitions:
            parts.append("\n".join(snippets.definitions(self.state.words)) + "\n")
        parts.append(snippets.render(self.state.words))
        parts.append("\n\n")
        parts.append(RESET)
        return "".join(parts)


def run_picker(words: Iterable[str], config: Optional[PickerConfig] = None) -> None:
    """Launch the picker and print the result once the terminal is restored."""
    app = PickerApp(words, config)
    try:
        app.run()
    finally:
        # Whatever state exists is exported, even when the loop failed
        sys.stdout.write(app.export())
        sys.stdout.flush()
