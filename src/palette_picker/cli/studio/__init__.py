"""Interactive applications."""

from palette_picker.cli.studio.picker import PickerApp, run_picker

__all__ = ["PickerApp", "run_picker"]
