"""
Grouping and binning helpers shared by the collectors.

All functions return plain dicts whose insertion order is the display order:
ascending keys for numeric groupings, ascending ranges for binned labels and
the fixed ('smoker', 'non-smoker') order for the smoker grouping.
"""
from __future__ import annotations

import math
from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Tuple

from insurance_stats.record import InsuranceRecord

SMOKER = 'smoker'
NON_SMOKER = 'non-smoker'


def _check_width(width: int) -> None:
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise ValueError(f"bin width must be a positive integer, got {width!r}")


def count_by_value(values: Iterable[int]) -> Dict[int, int]:
    """Count occurrences of each exact value, ascending by value."""
    return dict(sorted(Counter(values).items()))


def bin_key(value: float, width: int) -> int:
    """Lower bound of the width-sized bin holding value (floors toward -inf)."""
    _check_width(width)
    return int(math.floor(value / width)) * width


def linear_bins(values: Iterable[float], width: int) -> Dict[int, int]:
    """
    Count values per fixed-width bin.

    Args:
        values: Values to bin.
        width: Bin width.

    Returns:
        Dict of bin lower bound -> count, ascending; only non-empty bins.
    """
    _check_width(width)
    return count_by_value(bin_key(value, width) for value in values)


def bin_span(values: List[float], width: int) -> Tuple[int, int]:
    """
    First bin lower bound and last bin upper bound covering all values.

    The lower bound is floor(min / width) * width and the upper bound
    ceil((max + 1) / width) * width - 1.
    """
    _check_width(width)
    start = int(math.floor(min(values) / width)) * width
    end = int(math.ceil((max(values) + 1) / width)) * width - 1
    return start, end


def _clamp_bin(lo: int, start: int, end: int, width: int) -> int:
    """Move an out-of-span bin onto the first or last bin."""
    return start if lo < start else end - width + 1


def binned_ranges(values: Iterable[float], width: int) -> Dict[str, int]:
    """
    Count values per 'lo-hi' range label, materialising every bin in the span.

    Args:
        values: Values to bin (ages in practice).
        width: Bin width.

    Returns:
        Dict of 'lo-hi' label -> count in ascending range order, including
        empty bins between the smallest and largest value. Empty for no values.
    """
    _check_width(width)
    values = list(values)
    if not values:
        return {}

    start, end = bin_span(values, width)
    bins = {lo: 0 for lo in range(start, end + 1, width)}
    for value in values:
        lo = bin_key(value, width)
        if lo not in bins:
            lo = _clamp_bin(lo, start, end, width)
        bins[lo] += 1

    return {f"{lo}-{lo + width - 1}": count for lo, count in bins.items()}


def smoker_counts(records: Iterable[InsuranceRecord]) -> Dict[str, int]:
    """Count smokers and non-smokers; both keys are always present."""
    counts = {SMOKER: 0, NON_SMOKER: 0}
    for record in records:
        counts[SMOKER if record.is_smoker else NON_SMOKER] += 1
    return counts


def group_values(records: Iterable[InsuranceRecord], key: str, value: str) -> Dict[int, List[float]]:
    """
    Group one record attribute by another.

    Args:
        records: Records to group.
        key: Attribute name used as group key (e.g. 'children').
        value: Attribute name collected per group (e.g. 'charges').

    Returns:
        Dict of key -> list of values in record order, ascending by key.
    """
    groups: Dict[int, List[float]] = defaultdict(list)
    for record in records:
        groups[getattr(record, key)].append(getattr(record, value))
    return dict(sorted(groups.items()))
