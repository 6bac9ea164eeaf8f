"""Rendering: paint state into the buffer, export the buffer as text."""

from palette_picker.render.screen import Renderer
from palette_picker.render.ansi import AnsiExporter
from palette_picker.render.snippet import SnippetExporter

__all__ = ["Renderer", "AnsiExporter", "SnippetExporter"]
