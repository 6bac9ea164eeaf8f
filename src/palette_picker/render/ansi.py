"""Render the screen buffer to ANSI escape sequences."""

from palette_picker.core.buffer import ScreenBuffer
from palette_picker.core.color import ColorAttribute
from palette_picker.core.constants import CSI, RESET


class AnsiExporter:
    """
    Render a ScreenBuffer to ANSI text, one line per buffer row.

    Optimizes output by only emitting SGR codes when attributes change.
    Each row starts from default colors and ends with a full reset, so
    rows can be printed or copied independently.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render(self, buffer: ScreenBuffer) -> str:
        """Render the used part of the buffer to an ANSI string."""
        lines: list[str] = []

        for row in buffer.rows():
            line_parts: list[str] = []

            last_fg = ColorAttribute.DEFAULT
            last_bg = ColorAttribute.DEFAULT
            last_bold = False

            for cell in row:
                bold = cell.fg.bold or cell.bg.bold
                if bold != last_bold:
                    line_parts.append(f"{CSI}{'1' if bold else '22'}m")
                    last_bold = bold

                if not cell.fg.same_color(last_fg):
                    line_parts.append(f"{CSI}{cell.fg.to_sgr_fg()}m")
                    last_fg = cell.fg

                if not cell.bg.same_color(last_bg):
                    line_parts.append(f"{CSI}{cell.bg.to_sgr_bg()}m")
                    last_bg = cell.bg

                line_parts.append(cell.char)

            line_parts.append(RESET)
            lines.append(''.join(line_parts))

        result = ''.join(line + '\n' for line in lines)

        if self.reset_at_end:
            result += RESET

        return result
