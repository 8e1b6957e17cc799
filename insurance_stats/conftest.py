"""
Pytest fixtures shared by the insurance_stats tests.
"""
from __future__ import annotations

import pytest
from pathlib import Path
from typing import List

from insurance_stats.record import InsuranceRecord

HEADER = "age,sex,bmi,children,smoker,region,charges"

MINI_ROWS = [
    "18,female,20.0,0,no,southwest,2000.00",
    "30,male,30.0,2,yes,northwest,30000.00",
    "45,female,25.0,1,no,southeast,15000.00",
]


@pytest.fixture
def write_csv(tmp_path):
    """Write a CSV file with the standard header followed by the given lines."""
    def _write(lines: List[str], name: str = "insurance.csv", header: str = HEADER) -> Path:
        path = tmp_path / name
        content = "".join(f"{line}\n" for line in [header, *lines])
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def mini_csv(write_csv) -> Path:
    """The three-row example dataset."""
    return write_csv(MINI_ROWS)


@pytest.fixture
def make_record():
    """Create an InsuranceRecord with sensible defaults."""
    def _create(age: int = 30, sex: str = "female", bmi: float = 25.0, children: int = 0,
                smoker: str = "no", region: str = "southwest", charges: float = 1000.0) -> InsuranceRecord:
        return InsuranceRecord(age=age, sex=sex, bmi=bmi, children=children,
                               smoker=smoker, region=region, charges=charges)

    return _create


@pytest.fixture
def sample_records(make_record) -> List[InsuranceRecord]:
    """Records matching the three-row example dataset."""
    return [
        make_record(18, "female", 20.0, 0, "no", "southwest", 2000.00),
        make_record(30, "male", 30.0, 2, "yes", "northwest", 30000.00),
        make_record(45, "female", 25.0, 1, "no", "southeast", 15000.00),
    ]
