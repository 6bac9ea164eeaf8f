"""Tests for the input reader, fed through a pipe instead of a tty."""

import os
from typing import Iterator

import pytest

from palette_picker.cli.core.input import InputReader, Key, KeyEvent, MouseEvent
from palette_picker.errors import InputStreamError


@pytest.fixture
def pipe() -> Iterator[tuple[InputReader, int]]:
    read_fd, write_fd = os.pipe()
    try:
        yield InputReader(fd=read_fd), write_fd
    finally:
        os.close(read_fd)
        try:
            os.close(write_fd)
        except OSError:
            pass


def feed(write_fd: int, data: bytes) -> None:
    os.write(write_fd, data)


class TestKeys:
    """Keyboard events."""

    @pytest.mark.parametrize("data, key", [
        (b'\r', Key.ENTER),
        (b'\x03', Key.INTERRUPT),
        (b'\n', Key.ENTER),
    ])
    def test_named_keys(self, pipe: tuple[InputReader, int], data: bytes, key: Key) -> None:
        reader, write_fd = pipe
        feed(write_fd, data)
        event = reader.read(timeout=1.0)
        assert isinstance(event, KeyEvent)
        assert event.key == key

    def test_lone_escape(self, pipe: tuple[InputReader, int]) -> None:
        reader, write_fd = pipe
        feed(write_fd, b'\x1b')
        event = reader.read(timeout=1.0)
        assert event == KeyEvent(key=Key.ESCAPE, raw='\x1b')

    @pytest.mark.parametrize("data", [b'\x1b[A', b'\x1bOB', b'\x1b[3~'])
    def test_other_sequences_have_no_key(self, pipe: tuple[InputReader, int], data: bytes) -> None:
        reader, write_fd = pipe
        feed(write_fd, data)
        event = reader.read(timeout=1.0)
        assert event == KeyEvent(raw=data.decode())

    def test_printable_characters(self, pipe: tuple[InputReader, int]) -> None:
        reader, write_fd = pipe
        feed(write_fd, b'ab')
        first = reader.read(timeout=1.0)
        second = reader.read(timeout=1.0)
        assert first == KeyEvent(char='a', raw='a')
        assert second is not None and second.char == 'b'

    def test_no_input(self, pipe: tuple[InputReader, int]) -> None:
        reader, _ = pipe
        assert reader.read(timeout=0.01) is None


class TestMouse:
    """SGR mouse reports."""

    def test_left_press(self, pipe: tuple[InputReader, int]) -> None:
        reader, write_fd = pipe
        feed(write_fd, b'\x1b[<0;1;1M')
        event = reader.read_event()
        assert event == MouseEvent(x=0, y=0, button=0, pressed=True)
        assert event.is_left_press

    def test_coordinates_are_zero_based(self, pipe: tuple[InputReader, int]) -> None:
        reader, write_fd = pipe
        feed(write_fd, b'\x1b[<0;101;34M')
        event = reader.read_event()
        assert isinstance(event, MouseEvent)
        assert (event.x, event.y) == (100, 33)

    def test_release_is_not_a_press(self, pipe: tuple[InputReader, int]) -> None:
        reader, write_fd = pipe
        feed(write_fd, b'\x1b[<0;5;5m')
        event = reader.read_event()
        assert isinstance(event, MouseEvent)
        assert not event.pressed
        assert not event.is_left_press

    @pytest.mark.parametrize("button, left", [(0, True), (4, True), (16, True), (1, False), (2, False), (32, False), (64, False)])
    def test_left_button_detection(self, button: int, left: bool) -> None:
        assert MouseEvent(x=0, y=0, button=button, pressed=True).is_left_press is left

    def test_press_and_release_in_one_read(self, pipe: tuple[InputReader, int]) -> None:
        reader, write_fd = pipe
        feed(write_fd, b'\x1b[<0;3;4M\x1b[<0;3;4m')
        press = reader.read_event()
        release = reader.read_event()
        assert isinstance(press, MouseEvent) and press.pressed
        assert isinstance(release, MouseEvent) and not release.pressed


class TestStreamFailure:
    """Input errors are fatal, never retried."""

    def test_closed_stream(self, pipe: tuple[InputReader, int]) -> None:
        reader, write_fd = pipe
        os.close(write_fd)
        with pytest.raises(InputStreamError):
            reader.read_event()

    def test_bad_descriptor(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(read_fd)
        os.close(write_fd)
        reader = InputReader(fd=read_fd)
        with pytest.raises(InputStreamError):
            reader.read(timeout=0.01)
