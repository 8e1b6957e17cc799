"""
Charges comparison collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable

from insurance_stats.record import InsuranceRecord
from insurance_stats.statistics.base import StatisticsCollector, register_collector
from insurance_stats.statistics.grouping import group_values
from insurance_stats.statistics.model import Results
from insurance_stats.statistics.predicates import (
    CHARGE_RATIO,
    OLD_AGE,
    YOUNG_AGE,
    charge_per_child,
    cohort_averages,
    lower_charge_per_child,
    older_vs_younger_charges,
)

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class ChargesCollector(StatisticsCollector):
    """
    Evaluates the two charge comparisons.

    Statistics collected:
        - old_average / young_average: mean charges of each age cohort (None if empty)
        - old_vs_young: old cohort mean >= charge_ratio x young cohort mean
        - charge_per_child: children count -> mean charges per child
        - lower_charge_per_child: per-child charges never increase with more children
    """
    collector_id: str = "charges"

    def collect(self, records: Iterable[InsuranceRecord], existing_results: Results) -> Results:
        """Collect charge comparisons."""
        results = Results()
        record_list = list(records)

        old_age = self._setting('old_age', OLD_AGE)
        young_age = self._setting('young_age', YOUNG_AGE)
        ratio = self._setting('charge_ratio', CHARGE_RATIO)

        old_vs_young = older_vs_younger_charges(record_list, old_age, young_age, ratio)
        old_average, young_average = cohort_averages(record_list, old_age, young_age)
        results.add_value('charges', 'old_age', old_age)
        results.add_value('charges', 'young_age', young_age)
        results.add_value('charges', 'charge_ratio', ratio)
        results.add_value('charges', 'old_average', old_average)
        results.add_value('charges', 'young_average', young_average)
        results.add_value('charges', 'old_vs_young', old_vs_young)

        per_child = charge_per_child(group_values(record_list, 'children', 'charges'))
        results.add_value('charges', 'charge_per_child', per_child)
        results.add_value('charges', 'lower_charge_per_child', lower_charge_per_child(record_list))

        logger.info(f"Charges: old_vs_young={old_vs_young}, {len(per_child)} children groups")

        return results
