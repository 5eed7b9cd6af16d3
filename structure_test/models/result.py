"""Models for test execution results and their aggregate summary."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Self

from structure_test.duration import format_duration


@dataclass(kw_only=True)
class TestResult:
    """Outcome of a single test.

    A result is owned by the code running its test and is not safe to mutate
    from several threads. The runner marks a passing test with ``passed=True``;
    recording any error makes the result fail regardless of that flag.
    """

    __test__ = False

    name: str
    passed: bool = False
    stdout: str = ""
    stderr: str = ""
    errors: list[str] = field(default_factory=list)
    duration: timedelta = field(default_factory=timedelta)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("test result name must not be empty")

    def __str__(self) -> str:
        """Human-readable block for the text report.

        The duration line follows the errors line directly; earlier releases
        left a blank line between the two.
        """
        status = "Pass" if self.is_pass() else "Fail"
        lines = [f"Test Name:{self.name}", f"Test Status:{status}"]
        if self.stdout:
            lines.append(f"Stdout:{self.stdout}")
        if self.stderr:
            lines.append(f"Stderr:{self.stderr}")
        lines.append(f"Errors:{','.join(self.errors)}")
        lines.append(f"Duration:{format_duration(self.duration)}")
        return "".join(f"\n{line}" for line in lines) + "\n"

    def error(self, message: str) -> None:
        """Record a failure message."""
        self.errors.append(message)

    def errorf(self, message: str, *args: Any) -> None:
        """Record a printf-style failure message formatted with args.

        A message whose placeholders do not match args is still recorded, with
        the args appended after it.
        """
        if not args:
            self.errors.append(message)
            return
        try:
            self.errors.append(message % args)
        except (TypeError, ValueError):
            self.errors.append(" ".join([message, *map(str, args)]))

    def fail(self) -> None:
        self.passed = False

    def is_pass(self) -> bool:
        return self.passed and not self.errors


@dataclass(kw_only=True)
class SummaryObject:
    """Roll-up of every result in a test run.

    The counts are carried as given: whoever fills the summary keeps
    ``total == passed + failed == len(results)``. Use :meth:`from_results`
    to have them computed.
    """

    passed: int = 0
    failed: int = 0
    total: int = 0
    duration: timedelta = field(default_factory=timedelta)
    results: list[TestResult] = field(default_factory=list)

    @classmethod
    def from_results(
        cls, results: Iterable[TestResult], duration: timedelta | None = None
    ) -> Self:
        """Build a summary whose counts match the given results.

        Args:
            results: Results in execution order
            duration: Wall-clock time of the run; defaults to the sum of
                the result durations

        """
        collected = list(results)
        passed = sum(1 for result in collected if result.is_pass())
        if duration is None:
            duration = sum((result.duration for result in collected), timedelta())
        return cls(
            passed=passed,
            failed=len(collected) - passed,
            total=len(collected),
            duration=duration,
            results=collected,
        )

    def reconciles(self) -> bool:
        """Check that the counts agree with each other and with the results."""
        return self.total == self.passed + self.failed == len(self.results)


@dataclass(kw_only=True)
class JUnitTestCase:
    """Test case in the layout expected by JUnit report consumers."""

    __test__ = False

    name: str
    errors: list[str] = field(default_factory=list)
    duration: float = 0.0
    stdout: str = ""
    stderr: str = ""

    @classmethod
    def from_result(cls, result: TestResult) -> Self:
        """Convert a result, expressing its duration in seconds."""
        return cls(
            name=result.name,
            errors=list(result.errors),
            duration=result.duration.total_seconds(),
            stdout=result.stdout,
            stderr=result.stderr,
        )


@dataclass(kw_only=True)
class JUnitTestSuite:
    """Named group of JUnit test cases."""

    __test__ = False

    name: str
    results: list[JUnitTestCase] = field(default_factory=list)

    @classmethod
    def from_results(cls, name: str, results: Iterable[TestResult]) -> Self:
        return cls(
            name=name, results=[JUnitTestCase.from_result(r) for r in results]
        )
