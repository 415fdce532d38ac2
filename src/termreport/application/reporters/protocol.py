"""Reporter protocol: contract between a test engine and a reporter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from termreport.domain.records import ResultRecord, SummaryRecord


class ReporterProtocol(Protocol):
    """Lifecycle callbacks a test engine invokes, in this order.

    begin() once before any result, report() once per failing,
    incomplete or erroring test, summary() once at run end.
    Invocations never overlap.
    """

    def begin(self) -> None:
        """Called before any test result."""
        ...

    def report(self, record: ResultRecord) -> None:
        """Output one test result.

        Args:
            record: Fail, incomplete or exception record.
        """
        ...

    def summary(self, record: SummaryRecord) -> None:
        """Output the aggregate of the run.

        Args:
            record: Outcome counts of the whole run.
        """
        ...
