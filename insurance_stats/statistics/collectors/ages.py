"""
Age statistics collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable

from insurance_stats.record import InsuranceRecord
from insurance_stats.statistics.base import StatisticsCollector, register_collector
from insurance_stats.statistics.grouping import binned_ranges, count_by_value
from insurance_stats.statistics.model import Results

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class AgesCollector(StatisticsCollector):
    """
    Collects age distribution statistics from the dataset.

    Statistics collected:
        - per_age: exact age -> number of records, ascending
        - bin_width: width of the age ranges
        - binned: 'lo-hi' range -> number of records, every range between
          the youngest and oldest age present, empty ones included
    """
    collector_id: str = "ages"

    def collect(self, records: Iterable[InsuranceRecord], existing_results: Results) -> Results:
        """Collect age statistics."""
        results = Results()

        ages = [record.age for record in records]
        width = self._setting('age_bin_width', 5)

        results.add_value('ages', 'per_age', count_by_value(ages))
        results.add_value('ages', 'bin_width', width)
        results.add_value('ages', 'binned', binned_ranges(ages, width))

        if ages:
            logger.info(f"Ages: {len(ages)} records, youngest {min(ages)}, oldest {max(ages)}")
        else:
            logger.info("Ages: No age data")

        return results
