from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import logging

from insurance_stats.record import InsuranceRecord
from .pipeline import StatisticsConfig, StatisticsPipeline
from .model import Results

logger = logging.getLogger(__name__)


class Statistics:
    """
    High-level interface for collecting statistics from insurance records.

    This is a convenience wrapper around StatisticsPipeline that provides
    a simpler API for common use cases.

    Example:
        records = load_first_n('insurance.csv', 100)
        stats = Statistics(records=records)
        results = stats.results  # Get Results object
        stats.get_value('smoker', 'counts')
    """

    def __init__(
        self,
        records: Optional[Iterable[InsuranceRecord]] = None,
        config_dict: Optional[Dict[str, Any]] = None,
        config_file: Optional[Path] = None
    ) -> None:
        """
        Initialize statistics collection.

        Args:
            records: Optional iterable of InsuranceRecord objects
            config_dict: Dictionary to configure collectors (e.g., {'collectors': {'ages': False}})
            config_file: Path to YAML config file

        Raises:
            CollectorError: If a collector fails during the automatic analysis.
        """
        self.records: List[InsuranceRecord] = list(records) if records else []
        if not self.records:
            logger.warning("No records provided to Statistics")

        # Create configuration
        if config_dict:
            self.config = StatisticsConfig.from_dict(config_dict)
        elif config_file:
            self.config = StatisticsConfig(config_file=config_file)
        else:
            # Use defaults - all collectors enabled
            self.config = StatisticsConfig()

        # Create pipeline
        self.pipeline = StatisticsPipeline(config=self.config)

        # Run analysis automatically
        self._results = None
        if self.records:
            self._results = self._analyze()

    def _analyze(self) -> Results:
        """
        Run statistics collection on the records.

        Returns:
            Results object with collected statistics
        """
        logger.info(f"Collecting statistics on {len(self.records)} records")
        return self.pipeline.run(self.records)

    @property
    def results(self) -> Optional[Results]:
        """Get the statistics results."""
        return self._results

    def analyze(self, records: Optional[Iterable[InsuranceRecord]] = None) -> Results:
        """
        Analyze the given records.

        Args:
            records: Optional iterable of records. If None, uses self.records.

        Returns:
            Results object with collected statistics
        """
        if records is not None:
            self.records = list(records)

        self._results = self._analyze()
        return self._results

    def get_value(self, category: str, name: str, default=None):
        """
        Convenience method to get a specific statistic value.

        Args:
            category: Category name (e.g., 'summary', 'ages')
            name: Statistic name (e.g., 'record_count')
            default: Default value if not found

        Returns:
            The statistic value or default
        """
        if self._results:
            return self._results.get_value(category, name, default)
        return default

    def get_category(self, category: str) -> Dict[str, Any]:
        """
        Get all statistics in a category.

        Args:
            category: Category name (e.g., 'children')

        Returns:
            Dictionary of statistic names to values
        """
        if self._results:
            return self._results.get_category(category)
        return {}

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """
        Export all statistics as a dictionary.

        Returns:
            Dictionary of categories to statistics
        """
        if self._results:
            return self._results.to_dict()
        return {}
