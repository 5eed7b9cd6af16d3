"""Plain text rendering of test results."""

from structure_test.models.result import SummaryObject


def to_text(summary: SummaryObject) -> str:
    """Concatenate the text block of every result in order."""
    return "".join(str(result) for result in summary.results)
