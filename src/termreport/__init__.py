"""termreport - colorized terminal reporting of test results."""

__version__ = "0.1.0"

from termreport.application import StyledWriter, TerminalConfig, TerminalReporter
from termreport.domain import (
    ExceptionRecord,
    FailRecord,
    IncompleteRecord,
    SummaryRecord,
)

__all__ = [
    "ExceptionRecord",
    "FailRecord",
    "IncompleteRecord",
    "StyledWriter",
    "SummaryRecord",
    "TerminalConfig",
    "TerminalReporter",
    "__version__",
]
