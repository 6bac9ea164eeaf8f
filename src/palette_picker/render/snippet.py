"""Render word colors as a shell ``echo`` template."""

from typing import Iterable

from palette_picker.core.color import ColorAttribute
from palette_picker.core.state import Word


def fg_token(color: ColorAttribute) -> str:
    return f"C{color.to_index()}"


def bg_token(color: ColorAttribute) -> str:
    return f"B{color.to_index()}"


class SnippetExporter:
    """
    Build a shell snippet that reproduces each word's coloring.

    Colors become ``${C<n>}`` (foreground) and ``${B<n>}`` (background)
    placeholders; Default colors emit nothing. The line ends with
    ``${RESET}``.
    """

    def render(self, words: Iterable[Word]) -> str:
        parts = [' echo "']
        for word in words:
            if not word.fg.is_default():
                parts.append(f"${{{fg_token(word.fg)}}}")
            if not word.bg.is_default():
                parts.append(f"${{{bg_token(word.bg)}}}")
            parts.append(word.text + ' ')
        parts.append('${RESET}"')
        return ''.join(parts)

    def definitions(self, words: Iterable[Word]) -> list[str]:
        """
        Shell assignments for every placeholder the snippet uses.

        Uses ``$'...'`` quoting so the escape byte is expanded by bash/zsh.
        """
        fg_indices: set[int] = set()
        bg_indices: set[int] = set()
        for word in words:
            if not word.fg.is_default():
                fg_indices.add(word.fg.to_index())
            if not word.bg.is_default():
                bg_indices.add(word.bg.to_index())

        lines = [f"C{n}=$'\\e[38;5;{n}m'" for n in sorted(fg_indices)]
        lines += [f"B{n}=$'\\e[48;5;{n}m'" for n in sorted(bg_indices)]
        lines.append("RESET=$'\\e[0m'")
        return lines
