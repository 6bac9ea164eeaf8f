"""Exception types raised by palette-picker."""


class PickerError(Exception):
    """Base class for palette-picker errors."""


class InitializationError(PickerError):
    """The terminal could not be prepared for interactive use."""


class InputStreamError(PickerError):
    """The input event source failed while the picker was running."""


class OutOfRangeIndex(PickerError, IndexError):
    """A palette index fell outside the 256-color span."""

    def __init__(self, index: int) -> None:
        super().__init__(f"palette index must be 0-255, got {index}")
        self.index = index
