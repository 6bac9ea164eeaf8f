"""Cell - atomic unit of the screen buffer."""

from dataclasses import dataclass, field

from palette_picker.core.color import ColorAttribute


@dataclass(slots=True)
class Cell:
    """
    A single character cell with its foreground and background colors.

    Cells live inside a ScreenBuffer and are overwritten in place on
    every redraw of their coordinate.
    """
    char: str = ' '
    fg: ColorAttribute = field(default_factory=ColorAttribute.default)
    bg: ColorAttribute = field(default_factory=ColorAttribute.default)

    def reset(self) -> None:
        """Blank the cell with default colors."""
        self.char = ' '
        self.fg = ColorAttribute.DEFAULT
        self.bg = ColorAttribute.DEFAULT

    def is_default(self) -> bool:
        """Check if this cell is blank with default colors."""
        return (
            self.char == ' '
            and self.fg.is_default()
            and self.bg.is_default()
            and not self.fg.bold
            and not self.bg.bold
        )
