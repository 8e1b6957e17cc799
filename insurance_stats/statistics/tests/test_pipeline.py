"""
Tests for statistics.pipeline module.
"""
from __future__ import annotations

import logging

import pytest
from dataclasses import dataclass
from typing import Any, Iterable

from insurance_stats.errors import CollectorError
from insurance_stats.statistics import base
from insurance_stats.statistics.base import StatisticsCollector, get_collector_registry, register_collector
from insurance_stats.statistics.model import Results
from insurance_stats.statistics.pipeline import StatisticsPipeline, StatisticsConfig


# Mock collector for testing (not a test class, so doesn't start with "Test")
@dataclass
class MockCollector(StatisticsCollector):
    """Mock collector for testing."""
    collector_id: str = "mock_collector"

    def collect(self, records: Iterable[Any], existing_results: Results) -> Results:
        results = Results()
        results.add_value('test', 'count', len(list(records)))
        return results


@dataclass
class FailingCollector(StatisticsCollector):
    """Collector that always raises."""
    collector_id: str = "failing_collector"

    def collect(self, records: Iterable[Any], existing_results: Results) -> Results:
        raise RuntimeError("boom")


class TestStatisticsConfig:
    """Tests for StatisticsConfig class."""

    def test_default_enabled(self):
        """Test that collectors are enabled by default."""
        config = StatisticsConfig()

        assert config.is_enabled('any_collector') is True

    def test_defaults(self):
        """Test default numeric settings."""
        config = StatisticsConfig()

        assert config.bmi_bin_width == 5
        assert config.age_bin_width == 5
        assert config.histogram_width == 50
        assert (config.old_age, config.young_age, config.charge_ratio) == (50, 20, 2.0)

    def test_explicitly_disabled(self):
        """Test explicitly disabling a collector."""
        config = StatisticsConfig(collectors={'test_collector': False})

        assert config.is_enabled('test_collector') is False

    def test_from_dict(self):
        """Test creating config from dictionary."""
        data = {'collectors': {'test_collector': False, 'other_collector': {'enabled': True}}, 'age_bin_width': 10}

        config = StatisticsConfig.from_dict(data)

        assert config.is_enabled('test_collector') is False
        assert config.is_enabled('other_collector') is True
        assert config.age_bin_width == 10

    @pytest.mark.parametrize("value", [0, -2, 2.5, "5", True, None])
    def test_invalid_width_ignored(self, value):
        """Test invalid bin widths fall back to the default."""
        config = StatisticsConfig.from_dict({'bmi_bin_width': value})

        assert config.bmi_bin_width == 5

    def test_ratio_accepts_int(self):
        """Test the float ratio setting accepts an integer."""
        config = StatisticsConfig.from_dict({'charge_ratio': 3})

        assert config.charge_ratio == 3.0
        assert isinstance(config.charge_ratio, float)

    def test_load_from_file(self, tmp_path):
        """Test loading the 'statistics' section of a YAML file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "statistics:\n"
            "  collectors:\n"
            "    smoker: false\n"
            "    ages:\n"
            "      enabled: false\n"
            "  histogram_width: 20\n"
            "  young_age: 25\n",
            encoding="utf-8",
        )

        config = StatisticsConfig(config_file=config_file)

        assert config.is_enabled('smoker') is False
        assert config.is_enabled('ages') is False
        assert config.is_enabled('bmi') is True
        assert config.histogram_width == 20
        assert config.young_age == 25

    def test_missing_file_uses_defaults(self, tmp_path, caplog):
        """Test a missing config file logs a warning and keeps defaults."""
        with caplog.at_level(logging.WARNING):
            config = StatisticsConfig(config_file=tmp_path / "nope.yaml")

        assert config.bmi_bin_width == 5
        assert "not found" in caplog.text

    def test_invalid_yaml_uses_defaults(self, tmp_path, caplog):
        """Test an unparsable config file logs a warning and keeps defaults."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("statistics: [unclosed\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = StatisticsConfig(config_file=config_file)

        assert config.age_bin_width == 5
        assert "Failed to load statistics config" in caplog.text

    def test_empty_file_uses_defaults(self, tmp_path):
        """Test an empty config file keeps defaults."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("", encoding="utf-8")

        config = StatisticsConfig(config_file=config_file)

        assert config.histogram_width == 50


class TestStatisticsPipeline:
    """Tests for StatisticsPipeline class."""

    def test_run_pipeline_with_collector(self, sample_records):
        """Test running pipeline with a mock collector."""
        pipeline = StatisticsPipeline(collectors=[MockCollector()])

        results = pipeline.run(sample_records)

        assert results.get_value('test', 'count') == 3

    def test_pipeline_respects_enabled_flag(self, sample_records):
        """Test that disabled collectors are not run."""
        pipeline = StatisticsPipeline(collectors=[MockCollector(enabled=False)])

        results = pipeline.run(sample_records)

        assert results.get_value('test', 'count') is None

    def test_registry_collectors_get_config(self):
        """Test collectors loaded from the registry receive the config."""
        config = StatisticsConfig(collectors={'smoker': False})

        pipeline = StatisticsPipeline(config=config)

        by_id = {c.collector_id: c for c in pipeline.collectors}
        assert {'summary', 'bmi', 'smoker', 'charges', 'ages', 'children'} <= set(by_id)
        assert by_id['smoker'].enabled is False
        assert by_id['bmi'].config is config

    def test_failing_collector_ends_run(self, sample_records, caplog):
        """Test an error in a collector is logged and raised as CollectorError."""
        pipeline = StatisticsPipeline(collectors=[FailingCollector(), MockCollector()])

        with caplog.at_level(logging.ERROR):
            with pytest.raises(CollectorError) as exc_info:
                pipeline.run(sample_records)

        assert exc_info.value.collector_id == "failing_collector"
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert "Error in collector failing_collector" in caplog.text

    def test_disabled_failing_collector_not_run(self, sample_records):
        """Test a disabled collector cannot fail the run."""
        pipeline = StatisticsPipeline(collectors=[FailingCollector(enabled=False), MockCollector()])

        results = pipeline.run(sample_records)

        assert results.get_value('test', 'count') == 3

    def test_accepts_generator(self, sample_records):
        """Test records may be a one-shot generator."""
        pipeline = StatisticsPipeline(collectors=[MockCollector(), MockCollector(collector_id='second')])

        results = pipeline.run(r for r in sample_records)

        assert results.get_value('test', 'count') == 3


class TestRegistry:
    """Tests for the collector registry."""

    def test_register_collector(self, monkeypatch):
        """Test the decorator adds a collector to the registry."""
        monkeypatch.setattr(base, '_COLLECTOR_REGISTRY', {})

        register_collector(MockCollector)

        assert get_collector_registry() == {'mock_collector': MockCollector}

    def test_registry_is_a_copy(self):
        """Test callers cannot modify the registry through its copy."""
        registry = get_collector_registry()
        registry.clear()

        assert get_collector_registry()

    def test_collector_id_required(self):
        """Test a collector without an id cannot be created."""
        with pytest.raises(ValueError):
            MockCollector(collector_id="")
