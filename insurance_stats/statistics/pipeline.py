"""
Pipeline for running statistics collectors.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import yaml

from insurance_stats.errors import CollectorError
from insurance_stats.record import InsuranceRecord
from insurance_stats.statistics.base import StatisticsCollector, get_collector_registry
from insurance_stats.statistics.model import Results

logger = logging.getLogger(__name__)

# Numeric settings read from the 'statistics' section of the config file
SETTINGS = ('bmi_bin_width', 'age_bin_width', 'histogram_width', 'old_age', 'young_age', 'charge_ratio')


@dataclass
class StatisticsConfig:
    """
    Configuration for statistics collection.

    Attributes:
        collectors: Dict of collector_id -> enabled status
        bmi_bin_width: Width of the BMI histogram bins
        age_bin_width: Width of the binned age histogram
        histogram_width: Maximum bar length of horizontal histograms
        old_age: Lowest age of the old cohort
        young_age: Highest age of the young cohort
        charge_ratio: Factor the old cohort's mean charges must reach
        config_file: Path to YAML config file (optional)
    """
    collectors: Dict[str, bool] = field(default_factory=dict)
    bmi_bin_width: int = 5
    age_bin_width: int = 5
    histogram_width: int = 50
    old_age: int = 50
    young_age: int = 20
    charge_ratio: float = 2.0
    config_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Load configuration from file if config_file is specified and exists."""
        if self.config_file and Path(self.config_file).exists():
            self._load_from_file()
        elif self.config_file:
            logger.warning(f"Statistics config file {self.config_file} not found, using defaults")

    def _load_from_file(self) -> None:
        """
        Load configuration from YAML file.

        Reads the 'statistics' section from the YAML file and extracts
        collector enable/disable settings and numeric settings.
        """
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            self._apply(data.get('statistics', {}) or {})
            logger.info(f"Loaded statistics config from {self.config_file}")
        except (OSError, yaml.YAMLError, AttributeError) as e:
            logger.warning(f"Failed to load statistics config from {self.config_file}: {e}")

    def _apply(self, statistics_config: Dict[str, Any]) -> None:
        """Apply a 'statistics' config section to this instance."""
        collectors_config = statistics_config.get('collectors', {}) or {}
        for collector_id, settings in collectors_config.items():
            if isinstance(settings, dict):
                self.collectors[collector_id] = settings.get('enabled', True)
            elif isinstance(settings, bool):
                self.collectors[collector_id] = settings

        defaults = {f.name: f.default for f in fields(self) if f.name in SETTINGS}
        for name in SETTINGS:
            if name not in statistics_config:
                continue
            value = statistics_config[name]
            expected = type(defaults[name])
            allowed = (int, float) if expected is float else int
            if isinstance(value, bool) or not isinstance(value, allowed) or value <= 0:
                logger.warning(f"Ignoring invalid statistics setting {name}={value!r}")
                continue
            setattr(self, name, expected(value))

    def is_enabled(self, collector_id: str) -> bool:
        """
        Check if a collector is enabled.

        Args:
            collector_id: Identifier of the collector to check

        Returns:
            True if enabled (default if not specified), False otherwise
        """
        return self.collectors.get(collector_id, True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StatisticsConfig:
        """
        Create configuration from dictionary.

        Useful for testing and programmatic configuration. Accepts the same
        keys as the 'statistics' section of the YAML file.

        Args:
            data: Dictionary with 'collectors' key mapping collector_id to enabled
                status, plus any numeric settings

        Returns:
            StatisticsConfig instance
        """
        config = cls()
        config._apply(data)
        return config


@dataclass
class StatisticsPipeline:
    """
    Pipeline for running statistics collectors on a dataset.

    A failing collector ends the run: the error is logged and re-raised as
    CollectorError, so no partial report is produced.

    Attributes:
        collectors: List of collector instances to run
        config: Configuration for the pipeline
    """
    collectors: List[StatisticsCollector] = field(default_factory=list)
    config: StatisticsConfig = field(default_factory=StatisticsConfig)

    def __post_init__(self) -> None:
        """Load all registered collectors if none were provided."""
        if not self.collectors:
            self._load_collectors_from_registry()

    def _load_collectors_from_registry(self) -> None:
        """
        Load all registered collectors with configuration applied.

        Instantiates each collector from the registry and applies the
        enabled/disabled setting from configuration.
        """
        registry = get_collector_registry()
        for collector_id, collector_cls in registry.items():
            enabled = self.config.is_enabled(collector_id)
            try:
                collector = collector_cls(enabled=enabled, config=self.config)
                self.collectors.append(collector)
                logger.debug(f"Loaded collector: {collector_id} (enabled={enabled})")
            except (TypeError, ValueError) as e:
                logger.error(f"Failed to load collector {collector_id}: {e}")

    def run(self, records: Iterable[InsuranceRecord]) -> Results:
        """
        Run all enabled collectors on the dataset.

        Args:
            records: Iterable of InsuranceRecord objects

        Returns:
            Results object with all collected values

        Raises:
            CollectorError: If any collector fails.
        """
        results = Results()

        # Convert to list to allow multiple passes
        record_list = list(records)

        logger.debug(f"Running statistics on {len(record_list)} records")

        for collector in self.collectors:
            if not collector.enabled:
                logger.debug(f"Skipping disabled collector: {collector.collector_id}")
                continue

            logger.debug(f"Running collector: {collector.collector_id}")
            try:
                collector_results = collector.collect(record_list, results)
            except Exception as e:
                logger.error(f"Error in collector {collector.collector_id}: {e}", exc_info=True)
                raise CollectorError(collector.collector_id, e) from e
            results.merge(collector_results)

        return results
