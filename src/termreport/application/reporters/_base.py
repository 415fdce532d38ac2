"""Base reporter class for styled output.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

from termreport.application.writer import StyledWriter

if TYPE_CHECKING:
    from termreport.application.style_resolver import StyleInput
    from termreport.domain.records import ResultRecord, SummaryRecord


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Owns the output stream. Concrete reporters implement report() and
    summary(), and reuse write() for styled output.

    Example:
        class CountReporter(BaseReporter):
            def report(self, record: ResultRecord) -> None:
                self.write("x", "red")

            def summary(self, record: SummaryRecord) -> None:
                self.write(f" {record.failed} failed\\n")
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._writer = StyledWriter(output)

    def write(self, text: str, style: StyleInput | None = None) -> None:
        """Write text to the output stream, styled when style is given."""
        self._writer.write(text, style)

    def begin(self) -> None:
        """Called before any test result. Nothing to do by default."""

    @abstractmethod
    def report(self, record: ResultRecord) -> None:
        """Output one test result.

        Args:
            record: Fail, incomplete or exception record
        """

    @abstractmethod
    def summary(self, record: SummaryRecord) -> None:
        """Output the aggregate of the run.

        Args:
            record: Outcome counts of the whole run
        """
