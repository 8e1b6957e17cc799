"""
Summary statistics collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable

from insurance_stats.record import InsuranceRecord
from insurance_stats.statistics.base import StatisticsCollector, register_collector
from insurance_stats.statistics.model import Results, compute_column_stats

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class SummaryCollector(StatisticsCollector):
    """
    Collects count/min/max/sum/average per numeric column.

    Statistics collected:
        - columns: dict of column name -> Stats for age, bmi, children, charges
        - record_count: number of records analyzed
    """
    collector_id: str = "summary"

    def collect(self, records: Iterable[InsuranceRecord], existing_results: Results) -> Results:
        """Collect summary statistics."""
        results = Results()

        record_list = list(records)
        columns = compute_column_stats(record_list)

        results.add_value('summary', 'columns', columns)
        results.add_value('summary', 'record_count', len(record_list))

        logger.info(f"Summary: {len(record_list)} records, average charges {columns['charges'].average:.2f}")

        return results
