"""Core data models for a completed test run."""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Optional, Tuple, Union


@dataclass(frozen=True)
class FlatTest:
    """A single test, identified by its fully-qualified display name."""
    name: str


@dataclass(frozen=True)
class Passed:
    pass


@dataclass(frozen=True)
class Error:
    """The test raised an unexpected exception."""
    exception: BaseException
    trace: Optional[str] = None

    @property
    def message(self) -> str:
        return str(self.exception)

    @property
    def details(self) -> str:
        """Full string form of the exception, including the traceback."""
        if self.trace is not None:
            return self.trace
        exc = self.exception
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Ignored:
    message: str


TestResult = Union[Passed, Error, Failed, Ignored]

# Display priority only; reports list the highest rank first.
RESULT_ORDER = {
    Ignored: 0,
    Passed: 1,
    Failed: 2,
    Error: 3,
}


def result_order(result: TestResult) -> int:
    """Return the display rank of a result variant."""
    try:
        return RESULT_ORDER[type(result)]
    except KeyError:
        raise TypeError(f"Unknown test result: {result!r}") from None


@dataclass(frozen=True)
class TestSummary:
    """Outcome and elapsed time of a single test."""
    __test__ = False

    result: TestResult
    duration: timedelta = timedelta(0)

    def __post_init__(self) -> None:
        result_order(self.result)
        if self.duration < timedelta(0):
            raise ValueError(f"Test duration must not be negative, got {self.duration}")


TestEntry = Tuple[FlatTest, TestSummary]


@dataclass(frozen=True)
class TestRunSummary:
    """The complete outcome of one run, partitioned by result kind."""
    __test__ = False

    errored: Tuple[TestEntry, ...]
    failed: Tuple[TestEntry, ...]
    ignored: Tuple[TestEntry, ...]
    passed: Tuple[TestEntry, ...]
    successful: bool
    duration: timedelta

    def __post_init__(self) -> None:
        if self.duration < timedelta(0):
            raise ValueError(f"Run duration must not be negative, got {self.duration}")
        expected = not self.errored and not self.failed
        if self.successful != expected:
            raise ValueError(
                f"successful={self.successful} contradicts {len(self.errored)} errored "
                f"and {len(self.failed)} failed tests"
            )

    @classmethod
    def from_results(cls, results: Iterable[TestEntry], duration: timedelta) -> "TestRunSummary":
        """Partition results by kind, keeping their relative order."""
        buckets = {Error: [], Failed: [], Ignored: [], Passed: []}
        for flat_test, summary in results:
            buckets[type(summary.result)].append((flat_test, summary))
        return cls(
            errored=tuple(buckets[Error]),
            failed=tuple(buckets[Failed]),
            ignored=tuple(buckets[Ignored]),
            passed=tuple(buckets[Passed]),
            successful=not buckets[Error] and not buckets[Failed],
            duration=duration,
        )

    def all_tests(self) -> Tuple[TestEntry, ...]:
        return self.errored + self.failed + self.ignored + self.passed

    @property
    def total(self) -> int:
        return len(self.errored) + len(self.failed) + len(self.ignored) + len(self.passed)
