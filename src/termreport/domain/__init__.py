"""Domain layer: color tables, style triple, result records."""

from termreport.domain.exceptions import RecordConversionError, TermReportError
from termreport.domain.records import (
    ExceptionRecord,
    FailRecord,
    IncompleteRecord,
    ResultRecord,
    ResultType,
    SummaryRecord,
    get_result_type,
)
from termreport.domain.style import COLOR_CODES, FORMAT_CODES, StyleSpec

__all__ = [
    "COLOR_CODES",
    "FORMAT_CODES",
    "ExceptionRecord",
    "FailRecord",
    "IncompleteRecord",
    "RecordConversionError",
    "ResultRecord",
    "ResultType",
    "StyleSpec",
    "SummaryRecord",
    "TermReportError",
    "get_result_type",
]
