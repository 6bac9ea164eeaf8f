"""Color attribute representation for the palette picker."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Optional

from palette_picker.core.constants import PALETTE_SIZE
from palette_picker.errors import OutOfRangeIndex


@dataclass(frozen=True)
class ColorAttribute:
    """
    A terminal color: either the terminal default or one of 256 indexed colors.

    ``index is None`` means Default, which can never collide with a real
    palette index. The bold flag rides along with the color so a highlighted
    background keeps its hue.
    """
    index: Optional[int] = None
    bold: bool = False

    DEFAULT: ClassVar["ColorAttribute"]

    def __post_init__(self) -> None:
        if self.index is not None and not 0 <= self.index < PALETTE_SIZE:
            raise OutOfRangeIndex(self.index)

    @classmethod
    def default(cls) -> "ColorAttribute":
        """The terminal's own default color."""
        return cls.DEFAULT

    @classmethod
    def indexed(cls, index: int) -> "ColorAttribute":
        """Create a color from a 256-color palette index."""
        return cls(index=index)

    def is_default(self) -> bool:
        return self.index is None

    def to_index(self) -> int:
        """Return the 0-based palette index, failing for Default."""
        if self.index is None:
            raise OutOfRangeIndex(-1)
        return self.index

    def with_bold(self) -> "ColorAttribute":
        return replace(self, bold=True)

    def same_color(self, other: "ColorAttribute") -> bool:
        """Compare colors while ignoring the bold flag."""
        return self.index == other.index

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for use as a foreground color."""
        if self.index is None:
            return "39"
        return f"38;5;{self.index}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for use as a background color."""
        if self.index is None:
            return "49"
        return f"48;5;{self.index}"


ColorAttribute.DEFAULT = ColorAttribute()
