"""
record.py - insured-individual record modelling.

Defines InsuranceRecord, the immutable value type produced by the record
parser for each row of the dataset (age, sex, bmi, children, smoker,
region, charges).

Module: insurance_stats.record
"""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ['InsuranceRecord', 'COLUMNS', 'NUMERIC_COLUMNS']

# Column order of the source file
COLUMNS = ('age', 'sex', 'bmi', 'children', 'smoker', 'region', 'charges')

# Columns tracked by the summary statistics, in report order
NUMERIC_COLUMNS = ('age', 'bmi', 'children', 'charges')


@dataclass(frozen=True)
class InsuranceRecord:
    """
    One row of the insurance dataset.

    Attributes:
        age (int): Age of the insured person in years.
        sex (str): Sex as written in the source ('female', 'male', ...).
        bmi (float): Body-mass index.
        children (int): Number of children covered.
        smoker (str): Smoker flag, expected 'yes' or 'no' (any case).
        region (str): Residential region.
        charges (float): Billed medical charges.
    """
    age: int
    sex: str
    bmi: float
    children: int
    smoker: str
    region: str
    charges: float

    @property
    def is_smoker(self) -> bool:
        """True when the smoker flag is 'yes', ignoring case."""
        return self.smoker.lower() == 'yes'

    def __str__(self) -> str:
        return (
            f"Age: {self.age} | Sex: {self.sex} | BMI: {self.bmi:.2f} | "
            f"Children: {self.children} | Smoker: {self.smoker} | "
            f"Region: {self.region} | Charges: {self.charges:.2f}"
        )
