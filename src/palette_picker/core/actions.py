"""Actions produced by routing a click."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SetBackground:
    """Assign a background color to the selected word or the pending color."""
    index: int


@dataclass(frozen=True)
class SetForeground:
    """Assign a foreground color to the selected word or the pending color."""
    index: int


@dataclass(frozen=True)
class SelectWord:
    """Select a word; always allowed regardless of the current mode."""
    index: int


@dataclass(frozen=True)
class Deselect:
    """Clear the word selection."""


Action = Union[SetBackground, SetForeground, SelectWord, Deselect]
