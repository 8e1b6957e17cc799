"""
Statistics module for insurance data analysis.

This module provides aggregate statistical analysis of the loaded records:
summary statistics per numeric column, grouped counts, binned distributions
and comparisons of charges between groups.

Main components:
    - StatisticsCollector: Base class for creating custom statistics collectors
    - StatisticsPipeline: Orchestrates running multiple collectors
    - Built-in collectors: summary, bmi, smoker, charges, ages, children
"""

from insurance_stats.statistics.base import StatisticsCollector, register_collector, get_collector_registry
from insurance_stats.statistics.pipeline import StatisticsPipeline, StatisticsConfig
from insurance_stats.statistics.model import Results, Stats, StatValue, compute_column_stats
from insurance_stats.statistics.statistics import Statistics

# Import collectors to ensure they're registered
from insurance_stats.statistics import collectors

__all__ = [
    'StatisticsCollector',
    'register_collector',
    'get_collector_registry',
    'StatisticsPipeline',
    'StatisticsConfig',
    'Statistics',
    'Results',
    'Stats',
    'StatValue',
    'compute_column_stats',
    'collectors',
]
