"""Style resolver: symbolic style names → ANSI/VT100 numbers.

Total functions: unknown names fall back to the default code, never raise.
Formatting is cosmetic, a lookup miss must not abort a test run.

Accepted style shapes (resolved at the write boundary):
    "style;color;background"  e.g. "b;red;blue"
    "style;color"             e.g. "b;red"
    "color"                   e.g. "light green"
    {"style": ..., "color": ..., "background": ...}  any subset
    StyleSpec                 already resolved
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from termreport.domain.style import (
    BACKGROUND_OFFSET,
    COLOR_CODES,
    DEFAULT,
    DEFAULT_COLOR_CODE,
    DEFAULT_STYLE_CODE,
    FORMAT_CODES,
    LIGHT_OFFSET,
    RESET,
    StyleSpec,
)

logger = logging.getLogger(__name__)

StyleName = str | int | None
StyleInput = str | Mapping[str, str | int] | StyleSpec

_CHANNELS = ("style", "color", "background")


def _is_numeric(value: object) -> bool:
    """Raw ANSI code: int or string of digits."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and value.isdecimal()


def resolve_format(name: StyleName) -> int:
    """Return the ANSI number for a format letter.

    Unknown or absent names resolve to 0 (normal).
    """
    code = FORMAT_CODES.get(name) if isinstance(name, str) else None
    if code is None:
        if name not in (None, DEFAULT):
            logger.debug("Unknown format %r, using normal", name)
        return DEFAULT_STYLE_CODE
    return code


def resolve_color(name: StyleName) -> int:
    """Return the ANSI number for a color name or raw code.

    Numeric names pass through unchanged. A leading "light" word adds 100.
    An unknown color resolves to 39 (default), dropping any "light" offset.
    """
    if _is_numeric(name):
        return int(name)  # type: ignore[arg-type]

    words = iter(str(name).split(" "))
    value = 0
    word = next(words, "")
    if word == "light":
        value += LIGHT_OFFSET
        word = next(words, "")

    code = COLOR_CODES.get(word)
    if code is None:
        logger.debug("Unknown color %r, using default", name)
        return DEFAULT_COLOR_CODE
    return value + code


def resolve_background(name: StyleName) -> int:
    """Return the ANSI number for a background color name or raw code."""
    if _is_numeric(name):
        return int(name) + BACKGROUND_OFFSET  # type: ignore[arg-type]
    return resolve_color(name) + BACKGROUND_OFFSET


def build_escape(style: int, color: int, background: int) -> str:
    """Return the escape sequence for three resolved channels."""
    return StyleSpec(style=style, color=color, background=background).escape()


def _split_style_string(text: str) -> dict[str, str]:
    """Split a delimited style string into channel names.

    A one-character first token is a format letter ("b;red"),
    anything else is a lone color ("red").
    """
    tokens = text.split(";")
    if len(tokens[0]) == 1:
        tokens += [DEFAULT] * (len(_CHANNELS) - len(tokens))
        return dict(zip(_CHANNELS, tokens, strict=False))
    return {"color": tokens[0]}


def parse_style(spec: StyleInput) -> StyleSpec:
    """Resolve a style string or mapping into a StyleSpec.

    Missing channels default to "default".

    Raises:
        TypeError: spec is neither a string, a mapping nor a StyleSpec
    """
    match spec:
        case StyleSpec():
            return spec
        case str():
            names: Mapping[str, str | int] = _split_style_string(spec)
        case Mapping():
            names = spec
        case _:
            raise TypeError(f"style must be str, Mapping or StyleSpec, got {type(spec).__name__}")

    return StyleSpec(
        style=resolve_format(names.get("style", DEFAULT)),
        color=resolve_color(names.get("color", DEFAULT)),
        background=resolve_background(names.get("background", DEFAULT)),
    )


def styled(text: str, style: StyleInput | None = None) -> str:
    """Wrap text in the escape sequence for style, followed by a reset.

    Without a style the text is returned unchanged.
    """
    if style is None:
        return text
    return f"{parse_style(style).escape()}{text}{RESET}"
