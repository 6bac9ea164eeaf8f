"""Tests for the picker event loop, driven without a terminal."""

import pytest

from palette_picker.cli.core.input import Key, KeyEvent, MouseEvent
from palette_picker.cli.studio.picker import PickerApp
from palette_picker.config import PickerConfig
from palette_picker.core.color import ColorAttribute

from conftest import RecordingSink, ScriptedReader


def click(x: int, y: int) -> MouseEvent:
    return MouseEvent(x=x, y=y, button=0, pressed=True)


def release(x: int, y: int) -> MouseEvent:
    return MouseEvent(x=x, y=y, button=0, pressed=False)


ENTER = KeyEvent(key=Key.ENTER, raw='\r')


class TestPickerApp:
    """Event dispatch and export."""

    def test_start_draws_first_frame(self, sink: RecordingSink) -> None:
        app = PickerApp(["hello", "world"], sink=sink)
        state = app.start()
        assert sink.flushes == 1
        assert [w.x for w in state.words] == [1, 7]

    def test_color_a_word(self, sink: RecordingSink) -> None:
        reader = ScriptedReader([
            click(1, 33),     # select "hello"
            release(1, 33),
            click(36, 0),     # foreground swatch 1
            click(8, 2),      # background swatch 18
            ENTER,
        ])
        app = PickerApp(["hello", "world"], reader=reader, sink=sink)
        app.run_loop()

        hello = app.state.words[0]
        assert hello.fg == ColorAttribute.indexed(1)
        assert hello.bg == ColorAttribute.indexed(18)
        assert reader.events == []

    @pytest.mark.parametrize("key", [Key.ESCAPE, Key.ENTER, Key.INTERRUPT])
    def test_exit_keys_stop_the_loop(self, key: Key) -> None:
        reader = ScriptedReader([KeyEvent(key=key), click(0, 0)])
        app = PickerApp(["a"], reader=reader)
        app.run_loop()
        assert reader.reads == 1
        assert app.state.selection.pending_background.is_default()

    def test_other_keys_are_ignored(self) -> None:
        reader = ScriptedReader([KeyEvent(char='q', raw='q'), KeyEvent(raw='\x1b[A'), ENTER])
        app = PickerApp(["a"], reader=reader)
        app.run_loop()
        assert reader.reads == 3

    def test_non_left_buttons_are_ignored(self) -> None:
        reader = ScriptedReader([MouseEvent(x=0, y=0, button=2, pressed=True), ENTER])
        app = PickerApp(["a"], reader=reader)
        app.run_loop()
        assert app.state.selection.pending_background.is_default()

    def test_input_failure_ends_loop_and_keeps_state(self) -> None:
        # The scripted reader raises InputStreamError once it runs dry
        reader = ScriptedReader([click(0, 0)])
        app = PickerApp(["a"], reader=reader)
        app.run_loop()
        assert app.running is False
        assert app.state.selection.pending_background == ColorAttribute.indexed(0)
        assert app.export()

    def test_export_before_start_is_empty(self) -> None:
        assert PickerApp(["a"]).export() == ""

    def test_export_layout(self) -> None:
        reader = ScriptedReader([click(1, 33), click(32 + 20, 0), ENTER])
        app = PickerApp(["hello", "world"], reader=reader)
        app.run_loop()
        output = app.export()

        # 34 rows, each closed with a reset, then a blank line before the snippet
        assert output.count('\x1b[0m\n') == 34
        assert output.endswith('\n\n\n echo "${C5}hello world ${RESET}"\n\n\x1b[0m')

    def test_export_with_definitions(self) -> None:
        reader = ScriptedReader([click(6, 33), ENTER])
        app = PickerApp(["hi", "there"], PickerConfig(definitions=True), reader=reader)
        app.run_loop()
        output = app.export()
        assert "\n\nRESET=$'\\e[0m'\n echo \"hi there ${RESET}\"\n\n" in output
