"""JSON wire format for test summaries.

Keys keep their capitalised names (``Pass``, ``Fail``, ``Results``...) and
durations are integer nanoseconds. Empty ``Results``, ``Stdout``, ``Stderr``
and ``Errors`` are left out of the document.
"""

from collections.abc import Sequence
from typing import Self

from pydantic import Field

from structure_test.duration import from_nanoseconds, to_nanoseconds
from structure_test.models.base import Model
from structure_test.models.result import SummaryObject, TestResult


class JsonTestResult(Model):
    """Serialized form of a single test result."""

    __test__ = False

    name: str = Field(..., min_length=1, alias="Name")
    passed: bool = Field(..., alias="Pass")
    stdout: str | None = Field(default=None, alias="Stdout")
    stderr: str | None = Field(default=None, alias="Stderr")
    errors: Sequence[str] | None = Field(default=None, alias="Errors")
    duration: int = Field(default=0, alias="Duration", description="Nanoseconds")

    @classmethod
    def from_result(cls, result: TestResult) -> Self:
        return cls(
            name=result.name,
            passed=result.is_pass(),
            stdout=result.stdout or None,
            stderr=result.stderr or None,
            errors=list(result.errors) or None,
            duration=to_nanoseconds(result.duration),
        )

    def to_result(self) -> TestResult:
        return TestResult(
            name=self.name,
            passed=self.passed,
            stdout=self.stdout or "",
            stderr=self.stderr or "",
            errors=list(self.errors or ()),
            duration=from_nanoseconds(self.duration),
        )


class JsonSummary(Model):
    """Serialized form of a summary."""

    passed: int = Field(default=0, alias="Pass")
    failed: int = Field(default=0, alias="Fail")
    total: int = Field(default=0, alias="Total")
    duration: int = Field(default=0, alias="Duration", description="Nanoseconds")
    results: Sequence[JsonTestResult] | None = Field(default=None, alias="Results")

    @classmethod
    def from_summary(cls, summary: SummaryObject) -> Self:
        return cls(
            passed=summary.passed,
            failed=summary.failed,
            total=summary.total,
            duration=to_nanoseconds(summary.duration),
            results=[JsonTestResult.from_result(r) for r in summary.results] or None,
        )

    def to_summary(self) -> SummaryObject:
        return SummaryObject(
            passed=self.passed,
            failed=self.failed,
            total=self.total,
            duration=from_nanoseconds(self.duration),
            results=[r.to_result() for r in self.results or ()],
        )


def to_json(summary: SummaryObject, indent: int | None = 2) -> str:
    """Serialize a summary to a JSON document."""
    return JsonSummary.from_summary(summary).model_dump_json(
        by_alias=True, exclude_none=True, indent=indent
    )


def load_json(document: str | bytes) -> SummaryObject:
    """Parse a JSON document produced by :func:`to_json`.

    Raises:
        pydantic.ValidationError: If the document is malformed

    """
    return JsonSummary.model_validate_json(document).to_summary()
