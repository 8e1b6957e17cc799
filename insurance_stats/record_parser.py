"""
record_parser.py - delimited insurance dataset parsing.

Defines the RecordParser class which reads the first N valid rows of an
insurance CSV file into InsuranceRecord objects.

Structurally malformed lines (blank, or fewer than 7 fields) are skipped
silently. A non-numeric value in a numeric column of an otherwise
well-formed line is fatal and raises FieldFormatError, as is nan or inf.

Module: insurance_stats.record_parser
"""
from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import Callable, List, Optional, Union

from .errors import DataSourceError, FieldFormatError
from .record import COLUMNS, InsuranceRecord

logger = logging.getLogger(__name__)

__all__ = ['RecordParser', 'load_first_n']

_INT_PATTERN = re.compile(r'[+-]?[0-9]+\Z')
_FLOAT_PATTERN = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z')


class RecordParser:
    """
    Parses an insurance CSV file into records.

    Attributes:
        csv_file (Path): Path to the source file.
        delimiter (str): Field delimiter.
        encoding (str): Text encoding of the source.
        skipped_lines (int): Malformed lines skipped by the last load().
    """
    __slots__ = ['csv_file', 'delimiter', 'encoding', 'skipped_lines']

    FIELD_COUNT = len(COLUMNS)

    def __init__(self, csv_file: Union[str, Path], delimiter: str = ',', encoding: str = 'utf-8') -> None:
        """
        Initialize RecordParser.

        Args:
            csv_file (Union[str, Path]): Path to the CSV file.
            delimiter (str): Field delimiter, ',' by default.
            encoding (str): Text encoding, UTF-8 by default.
        """
        self.csv_file = Path(csv_file)
        self.delimiter = delimiter
        self.encoding = encoding
        self.skipped_lines = 0

    def load(self, limit: int) -> List[InsuranceRecord]:
        """
        Load up to `limit` valid records in file order, skipping the header.

        Args:
            limit (int): Maximum number of records to return, must be positive.

        Returns:
            List[InsuranceRecord]: Loaded records.

        Raises:
            ValueError: If limit is not a positive integer.
            DataSourceError: If the file cannot be read or has no header line.
            FieldFormatError: If a numeric field cannot be converted.
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        records: List[InsuranceRecord] = []
        self.skipped_lines = 0
        try:
            with open(self.csv_file, 'r', encoding=self.encoding, newline='') as f:
                header = f.readline()
                if not header:
                    raise DataSourceError(f"Empty CSV (no header): {self.csv_file}")

                line_number = 1
                for raw in f:
                    if len(records) >= limit:
                        break
                    line_number += 1
                    record = self.parse_line(raw.rstrip('\r\n'), line_number)
                    if record is None:
                        self.skipped_lines += 1
                        continue
                    records.append(record)
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceError(f"Cannot read {self.csv_file}: {e}") from e

        logger.info(f"Loaded {len(records)} records from {self.csv_file} ({self.skipped_lines} malformed lines skipped)")
        return records

    def parse_line(self, line: str, line_number: Optional[int] = None) -> Optional[InsuranceRecord]:
        """
        Parse one data line.

        Args:
            line (str): The line without its terminator.
            line_number (Optional[int]): 1-based line number for error messages.

        Returns:
            Optional[InsuranceRecord]: The record, or None if the line is blank
            or has too few fields.

        Raises:
            FieldFormatError: If a numeric field cannot be converted.
        """
        if not line:
            logger.debug(f"Skipping blank line {line_number}")
            return None
        # str.split keeps trailing empty fields
        parts = line.split(self.delimiter)
        if len(parts) < self.FIELD_COUNT:
            logger.debug(f"Skipping malformed line {line_number}: {len(parts)} fields")
            return None

        fields = [part.strip() for part in parts[:self.FIELD_COUNT]]
        age, sex, bmi, children, smoker, region, charges = fields
        return InsuranceRecord(
            age=self._convert(int, 'age', age, line_number),
            sex=sex,
            bmi=self._convert(float, 'bmi', bmi, line_number),
            children=self._convert(int, 'children', children, line_number),
            smoker=smoker,
            region=region,
            charges=self._convert(float, 'charges', charges, line_number),
        )

    @staticmethod
    def _convert(kind: Callable[[str], Union[int, float]], column: str, text: str, line_number: Optional[int]) -> Union[int, float]:
        """
        Convert a trimmed field, raising FieldFormatError on failure.

        Only plain ASCII decimal notation is accepted: no digit-group
        underscores, no non-ASCII digits, no 'nan' or 'inf'. A float whose
        magnitude overflows to infinity is rejected as well.
        """
        pattern = _INT_PATTERN if kind is int else _FLOAT_PATTERN
        if not pattern.match(text):
            raise FieldFormatError(column, text, line_number)
        value = kind(text)
        if kind is float and not math.isfinite(value):
            raise FieldFormatError(column, text, line_number)
        return value


def load_first_n(csv_file: Union[str, Path], limit: int) -> List[InsuranceRecord]:
    """Load the first `limit` valid records of `csv_file`."""
    return RecordParser(csv_file).load(limit)
