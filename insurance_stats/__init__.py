"""insurance_stats package: Exposes core classes and utilities for insurance dataset statistics."""

from insurance_stats.errors import CollectorError, DataSourceError, FieldFormatError, InsuranceStatsError, UsageError
from insurance_stats.histogram import render_horizontal, render_vertical
from insurance_stats.record import InsuranceRecord
from insurance_stats.record_parser import RecordParser, load_first_n
from insurance_stats.statistics import Results, Statistics, Stats, compute_column_stats

__all__ = [
    "CollectorError",
    "DataSourceError",
    "FieldFormatError",
    "InsuranceRecord",
    "InsuranceStatsError",
    "RecordParser",
    "Results",
    "Statistics",
    "Stats",
    "UsageError",
    "compute_column_stats",
    "load_first_n",
    "render_horizontal",
    "render_vertical",
]
