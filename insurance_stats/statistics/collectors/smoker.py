"""
Smoker statistics collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable

from insurance_stats.record import InsuranceRecord
from insurance_stats.statistics.base import StatisticsCollector, register_collector
from insurance_stats.statistics.grouping import NON_SMOKER, SMOKER, smoker_counts
from insurance_stats.statistics.model import Results

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class SmokerCollector(StatisticsCollector):
    """
    Collects smoker vs non-smoker counts.

    Any smoker flag other than 'yes' (ignoring case) counts as non-smoker.
    """
    collector_id: str = "smoker"

    def collect(self, records: Iterable[InsuranceRecord], existing_results: Results) -> Results:
        """Collect smoker counts."""
        results = Results()

        counts = smoker_counts(records)
        results.add_value('smoker', 'counts', counts)

        total = counts[SMOKER] + counts[NON_SMOKER]
        if total > 0:
            results.add_value('smoker', 'smoker_percentage', round(100 * counts[SMOKER] / total, 1))

        logger.info(f"Smoker: {counts[SMOKER]} smokers, {counts[NON_SMOKER]} non-smokers")

        return results
