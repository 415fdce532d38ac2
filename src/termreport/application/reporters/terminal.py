"""Terminal reporter: result records → colorized ANSI text.

Each category gets its own leading label and color so a scrolling
terminal can be scanned by failure class:
    [Failure]             bold red      trace: 1 frame (assertion site)
    [Incomplete test]     bold yellow   trace: 1 frame, one frame up
    [Uncatched Exception] bold magenta  trace: full stack
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from termreport.application.reporters._base import BaseReporter
from termreport.domain.records import ExceptionRecord, FailRecord, IncompleteRecord
from termreport.infrastructure.dumper import dump as default_dump
from termreport.infrastructure.trace import format_trace as default_format_trace

if TYPE_CHECKING:
    from termreport.domain.records import ResultRecord, SummaryRecord

DEFAULT_BANNER = "Kahlan : PHP Testing Framework\n\n"
DEFAULT_INDENT = "    "

# "it"/"when" keyword, then optionally everything up to a standalone "not".
# Messages without a keyword are not highlighted.
_MESSAGE_PATTERN = re.compile(r"^((?:(?:it|when)\b\s*(?:.*?\bnot\b\s*)?)?)(.*)$", re.DOTALL)

_LABEL_STYLE = "b;magenta"
_PARAM_STYLE = "b;yellow"
_TRACE_STYLE = "b;yellow"


def split_message(message: str) -> tuple[str, str]:
    """Split a description into highlighted keyword prefix and remainder.

    Example:
        split_message("when Y not Z") == ("when Y not ", "Z")
    """
    match = _MESSAGE_PATTERN.match(message)
    if match is None:
        return "", message
    return match.group(1), match.group(2)


@dataclass(frozen=True, slots=True)
class TerminalConfig:
    """Configuration for terminal reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        banner: Text printed unstyled by begin().
        indent: Indent unit per message path level. Whitespace only.
        dump: Renders a captured matcher parameter.
        format_trace: Renders a trace handle: (handle, start=0, depth=None) -> str.
        incomplete_trace_start: Index of the single trace frame shown for an
            incomplete test, 0 = innermost. Default skips the frame that
            failed to load the missing symbol.
    """

    banner: str = DEFAULT_BANNER
    indent: str = DEFAULT_INDENT
    dump: Callable[[object], str] = default_dump
    format_trace: Callable[..., str] = default_format_trace
    incomplete_trace_start: int = 1

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.banner, str):
            raise TypeError(f"banner must be str, got {type(self.banner).__name__}")
        if not self.indent or not self.indent.isspace():
            raise ValueError(f"indent must be non-empty whitespace, got {self.indent!r}")
        if not callable(self.dump):
            raise TypeError("dump must be callable")
        if not callable(self.format_trace):
            raise TypeError("format_trace must be callable")
        if self.incomplete_trace_start < 0:
            raise ValueError(
                f"incomplete_trace_start must be >= 0, got {self.incomplete_trace_start}"
            )


class TerminalReporter(BaseReporter):
    """Terminal reporter: writes ANSI-styled reports to a stream.

    No state between calls except the output stream: rendering the same
    record twice produces identical output.
    """

    def __init__(self, output: TextIO | None = None, config: TerminalConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            config: Reporter configuration. Uses defaults if None.
        """
        super().__init__(output)
        self._config = config or TerminalConfig()

    def begin(self) -> None:
        """Print the banner."""
        self.write(self._config.banner)

    def report(self, record: ResultRecord) -> None:
        """Print one test result.

        Args:
            record: Fail, incomplete or exception record
        """
        match record:
            case FailRecord():
                self._report_failure(record)
            case IncompleteRecord():
                self._report_incomplete(record)
            case ExceptionRecord():
                self._report_exception(record)

    def _report_failure(self, record: FailRecord) -> None:
        """Print a failed expectation."""
        self.write("[Failure] ", "b;red")
        self._messages(record.messages)
        for key, value in record.params.items():
            self.write(f"{key}: ", _PARAM_STYLE)
            self.write(self._config.dump(value) + "\n")
        self.write("Description:", _LABEL_STYLE)
        self.write(f" {record.matcher} expected actual to ")
        if record.negated:
            self.write("NOT ", _LABEL_STYLE)
        self.write(f"{record.description}\n")
        self.write("Trace: ", _TRACE_STYLE)
        self.write(self._config.format_trace(record.trace, start=0, depth=1))
        self.write("\n\n")

    def _report_incomplete(self, record: IncompleteRecord) -> None:
        """Print a test using a missing class."""
        self.write("[Incomplete test] ", "b;yellow")
        self._messages(record.messages)
        self.write("Description:", _LABEL_STYLE)
        self.write(" You are using an unexisting class.\n")
        self.write("Trace: ", _TRACE_STYLE)
        start = self._config.incomplete_trace_start
        self.write(self._config.format_trace(record.trace, start=start, depth=1))
        self.write("\n\n")

    def _report_exception(self, record: ExceptionRecord) -> None:
        """Print an uncaught exception with its full trace."""
        self.write("[Uncatched Exception] ", "b;magenta")
        self._messages(record.messages)
        self.write("Trace:\n", _TRACE_STYLE)
        self.write(self._config.format_trace(record.trace))
        self.write("\n\n")

    def _messages(self, messages: tuple[str, ...]) -> None:
        """Print the description path as an indented tree."""
        for level, message in enumerate(messages):
            self.write(self._config.indent * level)
            prefix, rest = split_message(message)
            self.write(prefix, _LABEL_STYLE)
            self.write(rest)
            self.write("\n")
        self.write("\n")

    def summary(self, record: SummaryRecord) -> None:
        """Print the run summary line.

        Args:
            record: Outcome counts of the whole run
        """
        passed = record.passed + record.skipped
        failed = record.exceptions + record.incomplete + record.failed
        total = passed + failed

        self.write(f"Executed {passed} of {total} ")

        if not failed:
            self.write("PASS\n", "green")
            self.write("\n")
            return

        self.write("FAIL ", "red")
        self.write("(")
        parts = (
            ("FAILURE", record.failed, "red"),
            ("INCOMPLETE", record.incomplete, "yellow"),
            ("EXCEPTION", record.exceptions, "magenta"),
        )
        comma = False
        for label, count, color in parts:
            if not count:
                continue
            if comma:
                self.write(", ")
            self.write(f"{label}: {count}", color)
            comma = True
        self.write(")")
        self.write("\n")
