"""VT100 control sequences used when painting the screen."""

ESC = "\x1b"

HIDE_CURSOR = f"{ESC}[?25l"
SHOW_CURSOR = f"{ESC}[?25h"
CURSOR_HOME = f"{ESC}[H"
CLEAR_LINE = f"{ESC}[K"
CLEAR_SCREEN = f"{ESC}[2J"
REVERSE_VIDEO = f"{ESC}[7m"
RESET_ATTRS = f"{ESC}[m"
CURSOR_FAR_CORNER = f"{ESC}[999C{ESC}[999B"
REQUEST_CURSOR_POSITION = f"{ESC}[6n"


def move_cursor(row: int, col: int) -> str:
    """Absolute move to a 0-based ``(row, col)`` screen cell."""

    return f"{ESC}[{row + 1};{col + 1}H"
