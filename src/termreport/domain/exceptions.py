"""Domain exceptions.

Rendering itself never raises on cosmetic lookups; these cover the
adapters that feed records into a reporter.
"""

from __future__ import annotations


class TermReportError(Exception):
    """Root exception for all termreport errors.

    All domain exceptions inherit from this.
    Allows catching all termreport-specific errors.
    """


class RecordConversionError(TermReportError):
    """Engine outcome could not be turned into a result record.

    Attributes:
        nodeid: Identifier of the test that failed conversion
        reason: Why conversion failed
    """

    def __init__(self, nodeid: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not nodeid:
            raise ValueError("nodeid must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.nodeid = nodeid
        self.reason = reason
        super().__init__(f"Cannot convert result of '{nodeid}': {reason}")
