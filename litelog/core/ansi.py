"""
ANSI escape sequences

Symbolic color and style names accepted by tag configuration,
and their terminal escape codes.
"""

from typing import Dict

RESET = "\033[0m"
BOLD = "\033[1m"
UNDERLINE = "\033[4m"

# Foreground colors
BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"

# Background colors
BG_RED = "\033[41m"
BG_GREEN = "\033[42m"
BG_YELLOW = "\033[43m"
BG_BLUE = "\033[44m"
BG_MAGENTA = "\033[45m"
BG_CYAN = "\033[46m"
BG_WHITE = "\033[47m"

COLORS: Dict[str, str] = {
    "black": BLACK,
    "red": RED,
    "green": GREEN,
    "yellow": YELLOW,
    "blue": BLUE,
    "magenta": MAGENTA,
    "cyan": CYAN,
    "white": WHITE,
    "bg_red": BG_RED,
    "bg_green": BG_GREEN,
    "bg_yellow": BG_YELLOW,
    "bg_blue": BG_BLUE,
    "bg_magenta": BG_MAGENTA,
    "bg_cyan": BG_CYAN,
    "bg_white": BG_WHITE,
}

STYLES: Dict[str, str] = {
    "": "",
    "none": "",
    "bold": BOLD,
    "underline": UNDERLINE,
}


def _resolve(value: str, table: Dict[str, str], kind: str) -> str:
    if value.startswith("\033["):
        return value
    try:
        return table[value.lower()]
    except KeyError:
        raise ValueError(f"Unknown {kind}: {value!r}") from None


def color_code(color: str) -> str:
    """
    Resolve a color name (or raw escape sequence) to its escape code.

    Raises:
        ValueError: If the name is not a known color
    """
    return _resolve(color, COLORS, "color")


def style_code(style: str) -> str:
    """
    Resolve a style name (or raw escape sequence) to its escape code.

    Raises:
        ValueError: If the name is not a known style
    """
    return _resolve(style, STYLES, "style")
