"""Shared constants for palette layout and ANSI output."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Palette layout
PALETTE_SIZE = 256
COLORS_PER_ROW = 8
BLOCK_WIDTH = 4          # Display columns per swatch (3-digit label + gap)
LABEL_WIDTH = 3

PANEL_WIDTH = COLORS_PER_ROW * BLOCK_WIDTH      # 32
PANEL_HEIGHT = PALETTE_SIZE // COLORS_PER_ROW   # 32

# Words start one column in from the left edge
WORD_ROW_MARGIN = 1
WORD_GAP = 1
