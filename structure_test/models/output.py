"""Output format selection for test reports."""

from collections.abc import Sequence
from enum import StrEnum
from typing import Self


class UnsupportedFormatError(ValueError):
    """Raised when an output format name is not one of the supported values."""


class OutputValue(StrEnum):
    """Rendering target for a test report."""

    TEXT = "text"
    JSON = "json"
    JUNIT = "junit"

    @classmethod
    def default(cls) -> Self:
        return cls.TEXT

    @classmethod
    def choices(cls) -> Sequence[str]:
        """Canonical names in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, value: str) -> Self:
        """Look up a format by its canonical name.

        Matching is exact and case-sensitive.

        Raises:
            UnsupportedFormatError: If value is not a canonical name

        """
        for member in cls:
            if member.value == value:
                return member
        raise UnsupportedFormatError(
            f"unsupported format {value}: please select from "
            "`text`, `json`, or `junit`"
        )

    @staticmethod
    def type_name() -> str:
        """Value type shown by command line flag help."""
        return "string"
