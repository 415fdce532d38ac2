"""Application layer for rendering test results.

Components:
- style_resolver: style/color names → ANSI escape sequences
- writer: styled write primitive bound to a stream
- reporters: lifecycle contract and the terminal reporter
"""

from termreport.application.reporters import (
    BaseReporter,
    ReporterProtocol,
    TerminalConfig,
    TerminalReporter,
)
from termreport.application.style_resolver import (
    build_escape,
    parse_style,
    resolve_background,
    resolve_color,
    resolve_format,
    styled,
)
from termreport.application.writer import StyledWriter

__all__ = [
    # Style resolver
    "build_escape",
    "parse_style",
    "resolve_background",
    "resolve_color",
    "resolve_format",
    "styled",
    "StyledWriter",
    # Reporters
    "BaseReporter",
    "ReporterProtocol",
    "TerminalConfig",
    "TerminalReporter",
]
