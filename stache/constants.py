"""Constants and configuration for Stache."""

# Default directory, relative to home, that managed files are linked into.
STACHE_DIR_NAME = ".stache"

# Curses color pair ids.
C_BODY = 1
C_BORDER_ACTIVE = 2
C_BORDER_INACTIVE = 3
C_HEADER_AVAILABLE = 4
C_HEADER_MANAGED = 5
C_SELECTED = 6
C_HELP = 7
C_STATUS = 8
C_ERROR = 9

# Single-line box characters.
SB_TL = "┌"
SB_TR = "┐"
SB_BL = "└"
SB_BR = "┘"
SB_H = "─"
SB_V = "│"

# ASCII fallbacks for terminals without Unicode support.
ASCII_TL = "+"
ASCII_TR = "+"
ASCII_BL = "+"
ASCII_BR = "+"
ASCII_H = "-"
ASCII_V = "|"

COLUMN_TITLES = ("Available Files", "Managed by Stache")

HELP_TEXT = "Tab switch  Space/Enter move  x plan  y copy plan  q quit"

# Rows used around the column lists (borders, headers, help and status).
CHROME_ROWS = 8
MIN_TERM_WIDTH = 40
MIN_TERM_HEIGHT = 12
