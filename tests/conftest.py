"""Shared fixtures for headless picker tests."""

from __future__ import annotations

from typing import Iterable

import pytest

from palette_picker.cli.core.input import InputEvent
from palette_picker.config import PickerConfig
from palette_picker.core.color import ColorAttribute
from palette_picker.core.state import AppState
from palette_picker.errors import InputStreamError
from palette_picker.render.screen import Renderer


class RecordingSink:
    """Cell sink that remembers every call instead of drawing."""

    def __init__(self) -> None:
        self.draws: list[tuple[int, int, str, ColorAttribute, ColorAttribute]] = []
        self.clears = 0
        self.flushes = 0

    def clear(self) -> None:
        self.clears += 1

    def draw(self, x: int, y: int, glyph: str, fg: ColorAttribute, bg: ColorAttribute) -> None:
        self.draws.append((x, y, glyph, fg, bg))

    def flush(self) -> None:
        self.flushes += 1


class BrokenSink(RecordingSink):
    """Sink whose terminal has gone away."""

    def draw(self, x: int, y: int, glyph: str, fg: ColorAttribute, bg: ColorAttribute) -> None:
        raise OSError("terminal closed")

    def flush(self) -> None:
        raise OSError("terminal closed")


class ScriptedReader:
    """Event source that replays a fixed list, then reports a closed stream."""

    def __init__(self, events: Iterable[InputEvent]) -> None:
        self.events = list(events)
        self.reads = 0

    def read_event(self) -> InputEvent:
        self.reads += 1
        if not self.events:
            raise InputStreamError("no more events")
        return self.events.pop(0)


@pytest.fixture
def config() -> PickerConfig:
    return PickerConfig()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def state(config: PickerConfig) -> AppState:
    """Rendered state with the words 'hello' and 'world'."""
    app_state = AppState.create(["hello", "world"], config)
    Renderer().render(app_state)
    return app_state
