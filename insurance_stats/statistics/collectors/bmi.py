"""
BMI statistics collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable

from insurance_stats.record import InsuranceRecord
from insurance_stats.statistics.base import StatisticsCollector, register_collector
from insurance_stats.statistics.grouping import linear_bins
from insurance_stats.statistics.model import Results

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class BmiCollector(StatisticsCollector):
    """
    Collects the BMI distribution in fixed-width bins.

    Statistics collected:
        - bin_width: width of each bin
        - bins: bin lower bound -> number of records, ascending
    """
    collector_id: str = "bmi"

    def collect(self, records: Iterable[InsuranceRecord], existing_results: Results) -> Results:
        """Collect BMI bins."""
        results = Results()

        width = self._setting('bmi_bin_width', 5)
        bins = linear_bins((record.bmi for record in records), width)

        results.add_value('bmi', 'bin_width', width)
        results.add_value('bmi', 'bins', bins)

        logger.info(f"BMI: {len(bins)} bins of width {width}")

        return results
