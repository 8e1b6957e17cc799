"""
Built-in statistics collectors.

Import collectors here to automatically register them.
"""

from insurance_stats.statistics.collectors.summary import SummaryCollector
from insurance_stats.statistics.collectors.bmi import BmiCollector
from insurance_stats.statistics.collectors.smoker import SmokerCollector
from insurance_stats.statistics.collectors.charges import ChargesCollector
from insurance_stats.statistics.collectors.ages import AgesCollector
from insurance_stats.statistics.collectors.children import ChildrenCollector

__all__ = [
    'SummaryCollector',
    'BmiCollector',
    'SmokerCollector',
    'ChargesCollector',
    'AgesCollector',
    'ChildrenCollector',
]
