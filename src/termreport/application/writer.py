"""Styled writer: the write(text, style) primitive bound to a stream."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from termreport.application.style_resolver import styled

if TYPE_CHECKING:
    from termreport.application.style_resolver import StyleInput


class StyledWriter:
    """Writes text, optionally wrapped in an ANSI style, to an output stream.

    Every styled write is followed by a reset: styles never stack across writes.
    Direct writes, no buffering. Stream errors propagate to the caller.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize writer.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def write(self, text: str, style: StyleInput | None = None) -> None:
        """Write text, styled when style is given.

        Args:
            text: Literal text to write
            style: Style string, mapping or StyleSpec. None writes text as is.
        """
        self._output.write(styled(text, style))
