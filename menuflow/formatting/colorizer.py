"""
ANSI SGR text styling.

colorize() combines any number of effect / foreground / background codes
into one escape sequence. The terminal is reset at the end of the returned
string and around every line break, so a background color never bleeds
into the rest of the line or the next one. Support for the rarer effects
depends on the terminal and font.
"""

from enum import Enum
from typing import Union

ESC = "\033["
RESET = "\033[0m"

Attribute = Union[str, Enum]


class Effect(str, Enum):
    NONE = ""  # Produces no code; handy in conditional expressions
    CLEAR = "0"

    # Widely supported
    BOLD = "1"
    UNDERLINE = "4"
    REVERSE = "7"  # Swaps foreground and background

    # Terminal / font dependent
    DIM = "2"
    ITALIC = "3"
    STRIKETHROUGH = "9"

    # Rarely supported
    SLOW_BLINK = "5"
    RAPID_BLINK = "6"
    HIDDEN = "8"
    FRAMED = "51"
    ENCIRCLED = "52"
    OVERLINED = "53"


class Fg(str, Enum):
    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    WHITE = "37"
    BLACK_BRIGHT = "90"
    RED_BRIGHT = "91"
    GREEN_BRIGHT = "92"
    YELLOW_BRIGHT = "93"
    BLUE_BRIGHT = "94"
    MAGENTA_BRIGHT = "95"
    CYAN_BRIGHT = "96"
    WHITE_BRIGHT = "97"


class Bg(str, Enum):
    BLACK = "40"
    RED = "41"
    GREEN = "42"
    YELLOW = "43"
    BLUE = "44"
    MAGENTA = "45"
    CYAN = "46"
    WHITE = "47"
    BLACK_BRIGHT = "100"
    RED_BRIGHT = "101"
    GREEN_BRIGHT = "102"
    YELLOW_BRIGHT = "103"
    BLUE_BRIGHT = "104"
    MAGENTA_BRIGHT = "105"
    CYAN_BRIGHT = "106"
    WHITE_BRIGHT = "107"


def _clamped(component: int) -> int:
    return min(max(int(component), 0), 255)


def fg_rgb(r: int, g: int, b: int) -> str:
    """24-bit foreground color; components are clamped to [0, 255]."""
    return f"38;2;{_clamped(r)};{_clamped(g)};{_clamped(b)}"


def bg_rgb(r: int, g: int, b: int) -> str:
    """24-bit background color; components are clamped to [0, 255]."""
    return f"48;2;{_clamped(r)};{_clamped(g)};{_clamped(b)}"


def fg_indexed(index: int) -> str:
    """256-color palette foreground."""
    return f"38;5;{_clamped(index)}"


def bg_indexed(index: int) -> str:
    """256-color palette background."""
    return f"48;5;{_clamped(index)}"


def _code(attribute: Attribute) -> str:
    if isinstance(attribute, Enum):
        return str(attribute.value)
    return str(attribute)


def colorize(text: str, *attributes: Attribute) -> str:
    """
    Wraps `text` in the given SGR attributes.

    >>> colorize("hi", Effect.BOLD, Fg.RED)
    '\\x1b[1;31mhi\\x1b[0m'

    Empty codes (Effect.NONE) are skipped; with no codes left the text is
    returned unchanged.
    """
    codes = [code for code in (_code(a) for a in attributes) if code]
    if not codes:
        return text

    sequence = f"{ESC}{';'.join(codes)}m"
    body = text.replace("\n", f"{RESET}\n{sequence}")
    return f"{sequence}{body}{RESET}"
