"""pytest run → result records.

Collects outcomes while pytest runs and renders them with
TerminalReporter once the run is over.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from traceback import FrameSummary
from typing import TYPE_CHECKING

import pytest

from termreport.application.reporters.terminal import TerminalConfig, TerminalReporter
from termreport.domain.exceptions import RecordConversionError
from termreport.domain.records import (
    ExceptionRecord,
    FailRecord,
    IncompleteRecord,
    ResultType,
    SummaryRecord,
    get_result_type,
)

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

    from pluggy import Result

    from termreport.domain.records import ResultRecord
    from termreport.infrastructure.trace import TraceHandle

logger = logging.getLogger(__name__)

# Exceptions reported as a failed expectation, with the matcher name shown.
_FAILURE_MATCHERS: dict[type[BaseException], str] = {
    AssertionError: "assert",
    pytest.fail.Exception: "fail",
}

# Exceptions meaning the test refers to something that does not exist.
_INCOMPLETE_TYPES: tuple[type[BaseException], ...] = (ImportError, NameError)


def messages_from_nodeid(nodeid: str) -> tuple[str, ...]:
    """Description path from a node id, outermost first.

    Example:
        "tests/test_a.py::TestA::test_b" → ("tests/test_a.py", "TestA", "test_b")
    """
    return tuple(part for part in nodeid.split("::") if part)


def _failure_matcher(exc: BaseException) -> str | None:
    """Matcher name when exc is a failed expectation."""
    for exc_type, matcher in _FAILURE_MATCHERS.items():
        if isinstance(exc, exc_type):
            return matcher
    return None


def frames_from_excinfo(
    excinfo: pytest.ExceptionInfo[BaseException],
    path: Path,
) -> list[FrameSummary]:
    """Frames of a captured exception, outermost first.

    Starts at the first frame in the test module (whole traceback when
    none is) and drops frames marked with __tracebackhide__.
    """
    entries = excinfo.traceback.cut(path=path).filter(excinfo)
    return [
        FrameSummary(str(entry.path), entry.lineno + 1, entry.frame.code.name, lookup_line=False)
        for entry in entries
    ]


def frames_up_to(frames: list[FrameSummary], path: Path) -> list[FrameSummary]:
    """Drop the frames deeper than the last one in the test module."""
    filename = str(path)
    for index in range(len(frames) - 1, -1, -1):
        if frames[index].filename == filename:
            return frames[: index + 1]
    return frames


def record_from_exception(
    nodeid: str,
    when: str,
    exc: BaseException | None,
    trace: TraceHandle = None,
) -> ResultRecord:
    """Convert the exception that failed a test phase into a result record.

    Only the call phase produces failures and incomplete tests;
    setup/teardown errors are always uncaught exceptions.

    Args:
        nodeid: pytest node id of the test
        when: Phase name: "setup", "call" or "teardown"
        exc: Exception that failed the phase
        trace: Trace handle stored in the record. None = exc itself.

    Raises:
        RecordConversionError: no exception was captured
    """
    if exc is None:
        raise RecordConversionError(nodeid, f"no exception captured in {when} phase")

    messages = messages_from_nodeid(nodeid)
    handle = exc if trace is None else trace
    if when != "call":
        return ExceptionRecord(messages=messages, trace=handle)

    matcher = _failure_matcher(exc)
    if matcher is not None:
        text = str(exc).strip()
        return FailRecord(
            messages=messages,
            trace=handle,
            matcher=matcher,
            description="be truthy" if matcher == "assert" else "pass",
            params={"message": text.splitlines()[0]} if text else {},
        )
    if isinstance(exc, _INCOMPLETE_TYPES):
        return IncompleteRecord(messages=messages, trace=handle)
    return ExceptionRecord(messages=messages, trace=handle)


class _TerminalStream:
    """File-like adapter writing through pytest's terminal reporter."""

    def __init__(self, terminalreporter: pytest.TerminalReporter) -> None:
        self._terminalreporter = terminalreporter

    def write(self, text: str) -> int:
        self._terminalreporter.write(text)
        return len(text)


class TermReportPlugin:
    """Collects pytest outcomes, renders them at terminal summary time."""

    def __init__(self, config: TerminalConfig | None = None) -> None:
        """Initialize plugin.

        Args:
            config: Terminal reporter configuration. Uses defaults if None.
        """
        self._config = config or TerminalConfig()
        self._records: list[ResultRecord] = []
        # One outcome per test node id, in run order.
        self._outcomes: dict[str, ResultType] = {}

    @property
    def records(self) -> tuple[ResultRecord, ...]:
        """Records collected so far, in run order."""
        return tuple(self._records)

    def summary_record(self) -> SummaryRecord:
        """Aggregate of the outcomes collected so far."""
        return SummaryRecord.from_types(self._outcomes.values())

    def _count(self, nodeid: str, result_type: ResultType) -> None:
        """Record the outcome of a test phase.

        A failed phase replaces PASS; the first non-pass outcome of a test wins.
        """
        current = self._outcomes.get(nodeid)
        if current is None or current is ResultType.PASS:
            self._outcomes[nodeid] = result_type

    def _record(
        self,
        item: pytest.Item,
        report: pytest.TestReport,
        call: pytest.CallInfo[None],
    ) -> ResultRecord:
        """Convert a failed phase, with a trace starting at the test module."""
        excinfo = call.excinfo
        if excinfo is None:
            exc, frames = None, None
        else:
            exc, frames = excinfo.value, frames_from_excinfo(excinfo, item.path)
        try:
            record = record_from_exception(report.nodeid, report.when, exc, frames)
        except RecordConversionError as err:
            logger.warning("%s", err)
            return ExceptionRecord(messages=messages_from_nodeid(report.nodeid), trace=None)
        if isinstance(record, IncompleteRecord) and frames:
            record = replace(record, trace=frames_up_to(frames, item.path))
        return record

    @pytest.hookimpl(hookwrapper=True)
    def pytest_runtest_makereport(
        self,
        item: pytest.Item,
        call: pytest.CallInfo[None],
    ) -> Generator[None, Result[pytest.TestReport], None]:
        """Turn each failed phase into a result record."""
        outcome = yield
        report = outcome.get_result()

        if report.failed:
            record = self._record(item, report, call)
            self._records.append(record)
            self._count(report.nodeid, get_result_type(record))
        elif report.skipped:
            self._count(report.nodeid, ResultType.SKIP)
        elif report.when == "call":
            self._count(report.nodeid, ResultType.PASS)

    def pytest_terminal_summary(self, terminalreporter: pytest.TerminalReporter) -> None:
        """Render collected records and the run summary."""
        logger.debug("Rendering %d records", len(self._records))
        reporter = TerminalReporter(_TerminalStream(terminalreporter), self._config)  # type: ignore[arg-type]
        terminalreporter.write("\n")
        reporter.begin()
        for record in self._records:
            reporter.report(record)
        reporter.summary(self.summary_record())
