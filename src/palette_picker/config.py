"""Runtime configuration for the palette picker."""

from dataclasses import dataclass

from palette_picker.core.constants import PALETTE_SIZE, PANEL_HEIGHT, PANEL_WIDTH

DEFAULT_SCREEN_WIDTH = 120
DEFAULT_SCREEN_HEIGHT = 50
DEFAULT_HIGHLIGHT = 4  # Blue

# Both swatch panels side by side, and the word row below them
MIN_SCREEN_WIDTH = 2 * PANEL_WIDTH
MIN_SCREEN_HEIGHT = PANEL_HEIGHT + 2


@dataclass(frozen=True)
class PickerConfig:
    """
    Settings shared by the renderer, router and session.

    Attributes:
        screen_width: Columns in the screen buffer
        screen_height: Rows in the screen buffer
        highlight_background: Palette index painted behind a selected word
            that has no background of its own
        definitions: Print shell variable definitions before the snippet
    """
    screen_width: int = DEFAULT_SCREEN_WIDTH
    screen_height: int = DEFAULT_SCREEN_HEIGHT
    highlight_background: int = DEFAULT_HIGHLIGHT
    definitions: bool = False

    def __post_init__(self) -> None:
        if self.screen_width < MIN_SCREEN_WIDTH or self.screen_height < MIN_SCREEN_HEIGHT:
            raise ValueError(
                f"screen must be at least {MIN_SCREEN_WIDTH}x{MIN_SCREEN_HEIGHT}, "
                f"got {self.screen_width}x{self.screen_height}"
            )
        if not 0 <= self.highlight_background < PALETTE_SIZE:
            raise ValueError(
                f"highlight background must be 0-255, got {self.highlight_background}"
            )

    @property
    def panel_width(self) -> int:
        return PANEL_WIDTH

    @property
    def panel_height(self) -> int:
        return PANEL_HEIGHT

    @property
    def word_row(self) -> int:
        """Row the words are drawn on, one below the swatch panels."""
        return PANEL_HEIGHT + 1
