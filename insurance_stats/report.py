"""
report.py - console report for an analyzed insurance dataset.

Assembles the loaded records and the collected Results into the text
report printed by the command line tool. Sections, in order: loaded
records, summary statistics table, BMI histogram, smoker histogram, the
two charge comparisons, per-age histogram, binned age histogram and the
children breakdown.

Module: insurance_stats.report
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from .histogram import render_horizontal, render_vertical
from .record import InsuranceRecord
from .statistics.grouping import NON_SMOKER, SMOKER
from .statistics.model import Results, Stats

__all__ = ['build_report', 'format_records', 'format_stats_table', 'format_children_counts', 'yes_no']

SMOKER_LABELS = {SMOKER: 'S', NON_SMOKER: 'NS'}
TABLE_RULE = '-' * 62


def yes_no(value: bool) -> str:
    return "TRUE" if value else "FALSE"


def format_records(records: Sequence[InsuranceRecord]) -> List[str]:
    lines = [f"Stored {len(records)} records:"]
    lines.extend(f"#{i} {record}" for i, record in enumerate(records, start=1))
    return lines


def format_stats_table(columns: Dict[str, Stats]) -> List[str]:
    """Table of count, min, max and average per column, two decimals."""
    lines = [
        f"{'column':<10} {'count':>8} {'min':>12} {'max':>12} {'avg':>12}",
        TABLE_RULE,
    ]
    for name, stats in columns.items():
        lines.append(f"{name:<10} {stats.count:>8d} {stats.min:>12.2f} {stats.max:>12.2f} {stats.average:>12.2f}")
    return lines


def format_children_counts(counts: Dict[int, int]) -> List[str]:
    lines = ["Total records by number of children:"]
    lines.extend(f"children={children} -> {count} record(s)" for children, count in counts.items())
    return lines


def _section(title: str, body: Iterable[str]) -> List[str]:
    return ['', title, *body]


def build_report(records: Sequence[InsuranceRecord], results: Results, histogram_width: int = 50) -> List[str]:
    """
    Build the full report.

    Args:
        records: Loaded records, in file order.
        results: Results from the statistics pipeline.
        histogram_width: Longest bar of the horizontal histograms.

    Returns:
        Report lines, without trailing newlines. Sections whose collector
        was disabled are left out.
    """
    lines = format_records(records)

    columns = results.get_value('summary', 'columns')
    if columns is not None:
        lines += _section("=== Stats for age, bmi, children and charges ===", format_stats_table(columns))

    bmi_bins = results.get_value('bmi', 'bins')
    if bmi_bins is not None:
        width = results.get_value('bmi', 'bin_width')
        lines += _section(f"=== BMI Vertical Histogram (bin={width}) ===", render_vertical(bmi_bins))

    smoker = results.get_value('smoker', 'counts')
    if smoker is not None:
        lines += _section("=== Smokers vs Non-Smokers (Vertical) ===", render_vertical(smoker, labels=SMOKER_LABELS))

    charges = results.get_category('charges')
    if charges:
        title = (f"=== Avg charges age>={charges['old_age']} at least {charges['charge_ratio']:g}x "
                 f"age<={charges['young_age']} ? ===")
        lines += _section(title, [yes_no(charges['old_vs_young'])])
        lines += _section("=== More children => lower charge per child (monotone) ? ===",
                          [yes_no(charges['lower_charge_per_child'])])

    per_age = results.get_value('ages', 'per_age')
    if per_age is not None:
        lines += _section("Horizontal Histogram (per age):",
                          render_horizontal(per_age, histogram_width, empty_message="No ages to plot."))
        width = results.get_value('ages', 'bin_width')
        lines += _section(f"Horizontal Histogram (bins, size={width}):",
                          render_horizontal(results.get_value('ages', 'binned'), histogram_width,
                                            empty_message="No ages to plot."))

    children = results.get_value('children', 'counts')
    if children is not None:
        lines += ['', *format_children_counts(children)]

    return lines
