"""Tests for pytest_plugin/collector.py conversion helpers."""

from pathlib import Path

import pytest

from termreport.domain.exceptions import RecordConversionError
from termreport.domain.records import (
    ExceptionRecord,
    FailRecord,
    IncompleteRecord,
    ResultType,
    SummaryRecord,
)
from termreport.presentation.pytest_plugin.collector import (
    TermReportPlugin,
    frames_from_excinfo,
    frames_up_to,
    messages_from_nodeid,
    record_from_exception,
)
from tests.factories import make_frames

NODEID = "tests/test_user.py::TestUser::test_save"


def _hidden() -> None:
    __tracebackhide__ = True
    raise ValueError("hidden")


def _visible() -> None:
    _hidden()


class TestMessagesFromNodeid:
    """Tests for messages_from_nodeid()."""

    def test_split_parts(self) -> None:
        assert messages_from_nodeid(NODEID) == ("tests/test_user.py", "TestUser", "test_save")

    def test_function_only(self) -> None:
        assert messages_from_nodeid("test_a.py::test_b[1-2]") == ("test_a.py", "test_b[1-2]")

    def test_empty(self) -> None:
        assert messages_from_nodeid("") == ()


class TestRecordFromException:
    """Tests for record_from_exception()."""

    def test_assertion_is_failure(self) -> None:
        record = record_from_exception(NODEID, "call", AssertionError("assert 1 == 2\n+1\n-2"))
        assert isinstance(record, FailRecord)
        assert record.matcher == "assert"
        assert record.description == "be truthy"
        assert dict(record.params) == {"message": "assert 1 == 2"}
        assert record.negated is False

    def test_bare_assertion_has_no_params(self) -> None:
        record = record_from_exception(NODEID, "call", AssertionError())
        assert isinstance(record, FailRecord)
        assert dict(record.params) == {}

    def test_pytest_fail_is_failure(self) -> None:
        record = record_from_exception(NODEID, "call", pytest.fail.Exception("DID NOT RAISE"))
        assert isinstance(record, FailRecord)
        assert record.matcher == "fail"
        assert record.description == "pass"

    @pytest.mark.parametrize("exc", [NameError("x"), ImportError("mod"), ModuleNotFoundError("m")])
    def test_missing_symbol_is_incomplete(self, exc: BaseException) -> None:
        assert isinstance(record_from_exception(NODEID, "call", exc), IncompleteRecord)

    def test_other_exception(self) -> None:
        exc = ValueError("boom")
        record = record_from_exception(NODEID, "call", exc)
        assert isinstance(record, ExceptionRecord)
        assert record.trace is exc

    @pytest.mark.parametrize("when", ["setup", "teardown"])
    def test_fixture_phase_is_exception(self, when: str) -> None:
        record = record_from_exception(NODEID, when, AssertionError("in fixture"))
        assert isinstance(record, ExceptionRecord)

    def test_messages_from_nodeid(self) -> None:
        record = record_from_exception(NODEID, "call", ValueError())
        assert record.messages == ("tests/test_user.py", "TestUser", "test_save")

    def test_missing_exception_raises(self) -> None:
        with pytest.raises(RecordConversionError, match="no exception captured in call phase"):
            record_from_exception(NODEID, "call", None)

    @pytest.mark.parametrize(
        ("when", "exc"),
        [
            ("call", AssertionError()),
            ("call", NameError("x")),
            ("call", ValueError()),
            ("teardown", ValueError()),
        ],
    )
    def test_explicit_trace_stored(self, when: str, exc: BaseException) -> None:
        frames = make_frames("test_save")
        assert record_from_exception(NODEID, when, exc, frames).trace is frames


class TestFramesFromExcinfo:
    """Tests for frames_from_excinfo()."""

    def test_hidden_frames_dropped(self) -> None:
        with pytest.raises(ValueError) as excinfo:
            _visible()
        frames = frames_from_excinfo(excinfo, Path(__file__))
        assert [f.name for f in frames] == ["test_hidden_frames_dropped", "_visible"]

    def test_frame_location(self) -> None:
        with pytest.raises(ValueError) as excinfo:
            _visible()
        frame = frames_from_excinfo(excinfo, Path(__file__))[-1]
        assert frame.filename == str(Path(__file__))
        assert frame.lineno == _visible.__code__.co_firstlineno + 1


class TestFramesUpTo:
    """Tests for frames_up_to()."""

    def test_drops_frames_below_test_module(self) -> None:
        frames = make_frames("test_load", file="/app/tests/test_a.py")
        frames += make_frames("load", "import_module", file="/app/lib/loader.py")
        trimmed = frames_up_to(frames, Path("/app/tests/test_a.py"))
        assert [f.name for f in trimmed] == ["test_load"]

    def test_innermost_in_test_module_kept(self) -> None:
        frames = make_frames("test_a", "helper", file="/app/tests/test_a.py")
        assert frames_up_to(frames, Path("/app/tests/test_a.py")) == frames

    def test_no_frame_in_test_module(self) -> None:
        frames = make_frames("load", file="/app/lib/loader.py")
        assert frames_up_to(frames, Path("/app/tests/test_a.py")) == frames


class TestTermReportPluginState:
    """Tests for TermReportPlugin before any test ran."""

    def test_starts_empty(self) -> None:
        plugin = TermReportPlugin()
        assert plugin.records == ()
        assert plugin.summary_record() == SummaryRecord.empty()

    def test_summary_counts_no_types(self) -> None:
        assert all(TermReportPlugin().summary_record().count(t) == 0 for t in ResultType)
