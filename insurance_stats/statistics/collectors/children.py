"""
Children statistics collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable

from insurance_stats.record import InsuranceRecord
from insurance_stats.statistics.base import StatisticsCollector, register_collector
from insurance_stats.statistics.grouping import count_by_value
from insurance_stats.statistics.model import Results

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class ChildrenCollector(StatisticsCollector):
    """
    Collects the number of records per children count.

    Statistics collected:
        - counts: children count -> number of records, ascending
        - most_children: largest children count seen
    """
    collector_id: str = "children"

    def collect(self, records: Iterable[InsuranceRecord], existing_results: Results) -> Results:
        """Collect children statistics."""
        results = Results()

        counts = count_by_value(record.children for record in records)
        results.add_value('children', 'counts', counts)
        if counts:
            results.add_value('children', 'most_children', max(counts))

        logger.info(f"Children: {len(counts)} distinct family sizes" if counts else "Children: No data")

        return results
