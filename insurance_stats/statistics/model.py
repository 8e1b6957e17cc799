"""
Data models for statistics module.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from insurance_stats.record import NUMERIC_COLUMNS, InsuranceRecord


StatValue = Union[int, float, bool, str, List[Any], Dict[Any, Any], 'Stats']


@dataclass
class Stats:
    """
    Running count/sum/min/max over one numeric column.

    An empty accumulator has count 0, average 0.0, min +inf and max -inf.
    """
    count: int = 0
    sum: float = 0.0
    min: float = math.inf
    max: float = -math.inf

    def add(self, value: float) -> None:
        """Fold one value into the accumulator."""
        self.count += 1
        self.sum += value
        if value < self.min:
            self.min = value
        if value > self.max:
            self.max = value

    @property
    def average(self) -> float:
        return self.sum / self.count if self.count else 0.0

    @classmethod
    def of(cls, values: Iterable[float]) -> Stats:
        """Build an accumulator from an iterable of values."""
        stats = cls()
        for value in values:
            stats.add(value)
        return stats


def compute_column_stats(records: Iterable[InsuranceRecord]) -> Dict[str, Stats]:
    """
    Compute Stats for age, bmi, children and charges in a single pass.

    Args:
        records: Records to aggregate.

    Returns:
        Dict of column name -> Stats, in report order.
    """
    columns = {name: Stats() for name in NUMERIC_COLUMNS}
    for record in records:
        for name, stats in columns.items():
            stats.add(getattr(record, name))
    return columns


@dataclass
class Results:
    """
    Container for statistical results collected from a dataset.

    Results are organized into categories (e.g., 'summary', 'ages')
    with named values within each category.
    """
    categories: Dict[str, Dict[str, StatValue]] = field(default_factory=dict)

    def add_value(self, category: str, name: str, value: StatValue) -> None:
        """Add a statistical value to a category."""
        if category not in self.categories:
            self.categories[category] = {}
        self.categories[category][name] = value

    def get_value(self, category: str, name: str, default: Optional[StatValue] = None) -> Optional[StatValue]:
        """Get a statistical value from a category."""
        return self.categories.get(category, {}).get(name, default)

    def get_category(self, category: str) -> Dict[str, StatValue]:
        """Get all values in a category."""
        return self.categories.get(category, {})

    def merge(self, other: Results) -> None:
        """Merge another Results object into this one."""
        for category, values in other.categories.items():
            if category not in self.categories:
                self.categories[category] = {}
            self.categories[category].update(values)

    def to_dict(self) -> Dict[str, Dict[str, StatValue]]:
        """Convert to a plain dictionary."""
        return dict(self.categories)

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, StatValue]]) -> Results:
        """Create from a plain dictionary."""
        return cls(categories=data)
