"""ANSI/VT100 color table and resolved style value object.

Tables are module-level and read-only (MappingProxyType).
Only the classic 8-color/format subset is supported.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

ESCAPE = "\x1b["
RESET = "\x1b[0m"

# Name used for any channel the caller leaves unspecified.
DEFAULT = "default"

COLOR_CODES = MappingProxyType(
    {
        "black": 30,
        "red": 31,
        "green": 32,
        "yellow": 33,
        "blue": 34,
        "magenta": 35,
        "cyan": 36,
        "white": 37,
        "default": 39,
    }
)

FORMAT_CODES = MappingProxyType(
    {
        "n": 0,  # normal
        "b": 1,  # bold
        "d": 2,  # dim
        "u": 4,  # underline
        "r": 7,  # reverse
        "h": 7,  # hidden
        "s": 9,  # strike
    }
)

# Light variants are offset from the base color code.
LIGHT_OFFSET = 100

# Background codes are offset from the foreground code.
BACKGROUND_OFFSET = 10

DEFAULT_STYLE_CODE = 0
DEFAULT_COLOR_CODE = COLOR_CODES[DEFAULT]
DEFAULT_BACKGROUND_CODE = DEFAULT_COLOR_CODE + BACKGROUND_OFFSET


@dataclass(frozen=True, slots=True)
class StyleSpec:
    """Resolved style triple: one ANSI number per channel.

    Built per write from a style string or mapping (see application.style_resolver).
    Never cached, never shared between writes.

    Attributes:
        style: Format code (bold, dim, underline, ...)
        color: Foreground color code
        background: Background color code
    """

    style: int = DEFAULT_STYLE_CODE
    color: int = DEFAULT_COLOR_CODE
    background: int = DEFAULT_BACKGROUND_CODE

    def escape(self) -> str:
        """Return the escape sequence selecting this style.

        All three channels are always emitted.
        """
        return f"{ESCAPE}{self.style};{self.color};{self.background}m"
