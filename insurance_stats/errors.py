"""
Exceptions raised by insurance_stats.
"""
from __future__ import annotations

from typing import Optional


class InsuranceStatsError(Exception):
    """Base class for all insurance_stats errors."""


class DataSourceError(InsuranceStatsError):
    """The dataset could not be read, or has no header line."""


class FieldFormatError(InsuranceStatsError, ValueError):
    """
    A structurally valid row holds a non-numeric or non-finite value in a numeric column.

    Attributes:
        column: Name of the offending column.
        value: The raw (trimmed) text that failed to convert.
        line_number: 1-based line number in the source, if known.
    """

    def __init__(self, column: str, value: str, line_number: Optional[int] = None) -> None:
        self.column = column
        self.value = value
        self.line_number = line_number
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Invalid {column} value {value!r}{where}")


class UsageError(InsuranceStatsError):
    """Invalid command-line invocation."""

    def __init__(self, message: str, exit_code: int = 2) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class CollectorError(InsuranceStatsError):
    """
    A statistics collector failed while analyzing the records.

    Attributes:
        collector_id: Id of the failing collector.
    """

    def __init__(self, collector_id: str, cause: Exception) -> None:
        self.collector_id = collector_id
        super().__init__(f"Collector {collector_id} failed: {cause}")
