"""
Comparative analyses over charges.

Both predicates return a plain bool and never raise for well-formed records.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from insurance_stats.record import InsuranceRecord
from insurance_stats.statistics.grouping import group_values
from insurance_stats.statistics.model import Stats

OLD_AGE = 50
YOUNG_AGE = 20
CHARGE_RATIO = 2.0


def cohort_averages(records: Iterable[InsuranceRecord], old_age: int = OLD_AGE,
                    young_age: int = YOUNG_AGE) -> Tuple[Optional[float], Optional[float]]:
    """
    Mean charges of the old (age >= old_age) and young (age <= young_age) cohorts.

    Ages strictly between the two thresholds belong to neither cohort.

    Returns:
        (old_average, young_average); None for an empty cohort.
    """
    old = Stats()
    young = Stats()
    for record in records:
        if record.age >= old_age:
            old.add(record.charges)
        if record.age <= young_age:
            young.add(record.charges)
    return (old.average if old.count else None,
            young.average if young.count else None)


def older_vs_younger_charges(records: Iterable[InsuranceRecord], old_age: int = OLD_AGE,
                             young_age: int = YOUNG_AGE, ratio: float = CHARGE_RATIO) -> bool:
    """
    True if the old cohort's mean charges are at least `ratio` times the young cohort's.

    False when either cohort is empty.
    """
    old_average, young_average = cohort_averages(records, old_age, young_age)
    if old_average is None or young_average is None:
        return False
    return old_average >= ratio * young_average


def charge_per_child(groups: Dict[int, List[float]]) -> Dict[int, float]:
    """
    Mean charges per child for each children-count group.

    Args:
        groups: children count -> charges, ascending by children count.

    Returns:
        children count -> mean charges divided by the children count
        (the mean itself for childless records).
    """
    per_child = {}
    for children, charges in groups.items():
        average = Stats.of(charges).average
        per_child[children] = average if children == 0 else average / children
    return per_child


def is_non_increasing(values: Iterable[float]) -> bool:
    """True if every value is <= the one before it (ties allowed)."""
    previous = None
    for value in values:
        if previous is not None and value > previous:
            return False
        previous = value
    return True


def lower_charge_per_child(records: Iterable[InsuranceRecord]) -> bool:
    """True if per-child charges never increase as the number of children grows."""
    groups = group_values(records, 'children', 'charges')
    return is_non_increasing(charge_per_child(groups).values())
