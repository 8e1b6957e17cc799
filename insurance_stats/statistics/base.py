"""
Base classes for statistics collectors.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Any, Dict, Iterable, Type

from insurance_stats.record import InsuranceRecord
from insurance_stats.statistics.model import Results

logger = logging.getLogger(__name__)

# Collector Registry
_COLLECTOR_REGISTRY: Dict[str, Type['StatisticsCollector']] = {}


def register_collector(cls: Type['StatisticsCollector']) -> Type['StatisticsCollector']:
    """
    Decorator to register a collector class in the global registry.

    Usage:
        @register_collector
        @dataclass
        class MyCollector(StatisticsCollector):
            collector_id: str = "my_collector"
            ...
    """
    if hasattr(cls, 'collector_id'):
        _COLLECTOR_REGISTRY[cls.collector_id] = cls
        logger.debug(f"Registered statistics collector: {cls.collector_id}")
    else:
        logger.warning(f"Collector {cls.__name__} missing 'collector_id' attribute, not registered")
    return cls


def get_collector_registry() -> Dict[str, Type['StatisticsCollector']]:
    """Get the global collector registry."""
    return _COLLECTOR_REGISTRY.copy()


@dataclass
class StatisticsCollector(ABC):
    """
    Base class for statistics collectors.

    Collectors analyze the loaded records and produce aggregate results.
    They never modify the records, only analyze them.

    Attributes:
        collector_id: Unique identifier for this collector
        enabled: Whether this collector is enabled (can be set via config)
        config: Optional StatisticsConfig supplying bin widths and thresholds
    """
    collector_id: str = ""
    enabled: bool = True
    config: Any = None

    @abstractmethod
    def collect(self, records: Iterable[InsuranceRecord], existing_results: Results) -> Results:
        """
        Collect statistics from the dataset.

        Args:
            records: Iterable of InsuranceRecord objects
            existing_results: Results collected so far by earlier collectors

        Returns:
            Results object with collected values
        """
        pass

    def __post_init__(self):
        """Validate collector configuration."""
        if not self.collector_id:
            raise ValueError(f"{self.__class__.__name__} must define collector_id")

    def _setting(self, name: str, default: Any) -> Any:
        """Read a setting from the attached config, falling back to default."""
        if self.config is None:
            return default
        return getattr(self.config, name, default)
