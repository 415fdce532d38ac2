"""Domain layer: immutable result records produced by a test engine.

One ResultRecord per failing, incomplete or erroring test.
One SummaryRecord per run.
All objects frozen, invariants validated in __post_init__.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class ResultType(Enum):
    """Outcome categories of an executed test."""

    PASS = "pass"
    SKIP = "skip"
    FAIL = "fail"
    INCOMPLETE = "incomplete"
    EXCEPTION = "exception"


def _validate_messages(messages: tuple[str, ...]) -> None:
    """FAIL-FIRST: message path must be a tuple of strings."""
    if not isinstance(messages, tuple):
        raise TypeError(f"messages must be a tuple, got {type(messages).__name__}")
    for message in messages:
        if not isinstance(message, str):
            raise TypeError(f"messages must contain str, got {type(message).__name__}")


@dataclass(frozen=True, slots=True)
class FailRecord:
    """Failed expectation.

    Attributes:
        messages: Description path, outermost group first.
        trace: Opaque trace handle passed to the trace formatter.
        matcher: Matcher identifier (e.g. "toBe", "assert").
        negated: True when the expectation was negated.
        params: Named values captured by the matcher.
        description: Human-readable matcher description.
    """

    messages: tuple[str, ...]
    trace: object
    matcher: str
    description: str
    negated: bool = False
    params: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _validate_messages(self.messages)
        if not self.matcher:
            raise ValueError("matcher must not be empty")
        # Read-only copy, the caller keeps its own mapping.
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


@dataclass(frozen=True, slots=True)
class IncompleteRecord:
    """Test that could not run to completion (missing class or symbol)."""

    messages: tuple[str, ...]
    trace: object

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _validate_messages(self.messages)


@dataclass(frozen=True, slots=True)
class ExceptionRecord:
    """Test aborted by an uncaught exception."""

    messages: tuple[str, ...]
    trace: object

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _validate_messages(self.messages)


ResultRecord = FailRecord | IncompleteRecord | ExceptionRecord


def get_result_type(record: ResultRecord) -> ResultType:
    """Get ResultType for record.

    Exhaustive match on ResultRecord union.
    """
    match record:
        case FailRecord():
            return ResultType.FAIL
        case IncompleteRecord():
            return ResultType.INCOMPLETE
        case ExceptionRecord():
            return ResultType.EXCEPTION
    raise TypeError(f"not a result record: {type(record).__name__}")


@dataclass(frozen=True, slots=True)
class SummaryRecord:
    """Aggregate outcome counts for a whole run.

    Attributes:
        passed: Tests that passed.
        skipped: Tests that were skipped.
        failed: Tests with a failed expectation.
        incomplete: Tests that could not complete.
        exceptions: Tests aborted by an uncaught exception.
    """

    passed: int = 0
    skipped: int = 0
    failed: int = 0
    incomplete: int = 0
    exceptions: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("passed", "skipped", "failed", "incomplete", "exceptions"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    @classmethod
    def empty(cls) -> SummaryRecord:
        """Summary of a run without any test."""
        return cls()

    @classmethod
    def from_types(cls, results: Iterable[ResultType]) -> SummaryRecord:
        """Count outcomes of a run."""
        counts = Counter(results)
        return cls(
            passed=counts[ResultType.PASS],
            skipped=counts[ResultType.SKIP],
            failed=counts[ResultType.FAIL],
            incomplete=counts[ResultType.INCOMPLETE],
            exceptions=counts[ResultType.EXCEPTION],
        )

    def count(self, result_type: ResultType) -> int:
        """Get count for one outcome category."""
        match result_type:
            case ResultType.PASS:
                return self.passed
            case ResultType.SKIP:
                return self.skipped
            case ResultType.FAIL:
                return self.failed
            case ResultType.INCOMPLETE:
                return self.incomplete
            case ResultType.EXCEPTION:
                return self.exceptions
