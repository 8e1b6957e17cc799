"""
Tests for statistics.grouping module.
"""
from __future__ import annotations

import random

import pytest

from insurance_stats.statistics import grouping
from insurance_stats.statistics.grouping import (
    bin_key,
    bin_span,
    binned_ranges,
    count_by_value,
    group_values,
    linear_bins,
    smoker_counts,
)


class TestCountByValue:
    """Tests for exact-value grouping."""

    def test_children_counts(self, sample_records):
        """Test children counts for the three-row example."""
        assert count_by_value(r.children for r in sample_records) == {0: 1, 1: 1, 2: 1}

    def test_ascending_keys(self):
        """Test keys come out ascending regardless of input order."""
        counts = count_by_value([3, 0, 3, 1, 0, 0])

        assert list(counts) == [0, 1, 3]
        assert counts == {0: 3, 1: 1, 3: 2}

    def test_empty(self):
        """Test no values gives an empty mapping."""
        assert count_by_value([]) == {}


class TestLinearBins:
    """Tests for fixed-width binning."""

    def test_bmi_example(self):
        """Test BMI values 20, 30, 25 fall in separate width-5 bins."""
        assert linear_bins([20.0, 30.0, 25.0], 5) == {20: 1, 25: 1, 30: 1}

    def test_bin_edges(self):
        """Test values on and just below a bin edge."""
        assert linear_bins([24.99, 25.0, 29.999, 30.0], 5) == {20: 1, 25: 2, 30: 1}

    def test_floor_toward_negative_infinity(self):
        """Test negative values floor rather than truncate."""
        assert bin_key(-0.5, 5) == -5
        assert bin_key(-5.0, 5) == -5
        assert bin_key(-5.1, 5) == -10

    def test_keys_are_ints(self):
        """Test float inputs produce integer keys."""
        assert all(isinstance(key, int) for key in linear_bins([33.77, 27.9], 5))

    @pytest.mark.parametrize("width", [0, -5, 2.5, True])
    def test_invalid_width(self, width):
        """Test the width must be a positive integer."""
        with pytest.raises(ValueError):
            linear_bins([1.0], width)


class TestBinnedRanges:
    """Tests for labelled range binning."""

    def test_span_materialises_empty_bins(self):
        """Test every bin between the youngest and oldest age is present."""
        bins = binned_ranges([18, 30, 45], 5)

        assert bins == {
            "15-19": 1,
            "20-24": 0,
            "25-29": 0,
            "30-34": 1,
            "35-39": 0,
            "40-44": 0,
            "45-49": 1,
        }

    def test_upper_edge(self):
        """Test a maximum on a bin's upper bound closes that bin."""
        assert binned_ranges([15, 19], 5) == {"15-19": 2}

    def test_lower_edge_of_next_bin(self):
        """Test a maximum on a bin's lower bound opens a new bin."""
        assert binned_ranges([19, 20], 5) == {"15-19": 1, "20-24": 1}

    def test_single_value(self):
        """Test one value gives one bin."""
        assert binned_ranges([64], 10) == {"60-69": 1}

    def test_empty(self):
        """Test no values gives an empty mapping."""
        assert binned_ranges([], 5) == {}

    def test_total_matches_input(self):
        """Test every value lands in exactly one bin."""
        ages = [18, 19, 23, 33, 64, 64, 50, 21]

        assert sum(binned_ranges(ages, 5).values()) == len(ages)

    def test_span(self):
        """Test span bounds are floor- and ceiling-aligned."""
        assert bin_span([18, 45], 5) == (15, 49)
        assert bin_span([20, 44], 5) == (20, 44)
        assert bin_span([-3, 3], 5) == (-5, 4)

    def test_clamp_never_used(self, monkeypatch):
        """Test correct span computation never reaches the clamp."""
        def _fail(*args):
            raise AssertionError(f"clamp reached with {args}")

        monkeypatch.setattr(grouping, "_clamp_bin", _fail)
        rng = random.Random(1337)
        for _ in range(200):
            width = rng.randint(1, 12)
            values = [rng.randint(-30, 120) for _ in range(rng.randint(1, 30))]
            floats = [v + rng.random() for v in values]

            bins = binned_ranges(values, width)
            assert sum(bins.values()) == len(values)
            assert sum(binned_ranges(floats, width).values()) == len(floats)

    def test_clamp_targets(self):
        """Test the clamp picks the first or last bin."""
        assert grouping._clamp_bin(0, 15, 49, 5) == 15
        assert grouping._clamp_bin(60, 15, 49, 5) == 45


class TestSmokerCounts:
    """Tests for smoker grouping."""

    def test_example(self, sample_records):
        """Test the three-row example has one smoker."""
        assert smoker_counts(sample_records) == {"smoker": 1, "non-smoker": 2}

    def test_case_insensitive(self, make_record):
        """Test 'YES' and 'Yes' count as smokers, anything else does not."""
        records = [make_record(smoker=flag) for flag in ("YES", "Yes", "no", "maybe", "")]

        assert smoker_counts(records) == {"smoker": 2, "non-smoker": 3}

    def test_both_keys_always_present(self):
        """Test both keys are present, in fixed order, for no records."""
        counts = smoker_counts([])

        assert list(counts) == ["smoker", "non-smoker"]
        assert counts == {"smoker": 0, "non-smoker": 0}


class TestGroupValues:
    """Tests for grouping one attribute by another."""

    def test_charges_by_children(self, sample_records):
        """Test charges grouped by children count."""
        assert group_values(sample_records, "children", "charges") == {
            0: [2000.0],
            1: [15000.0],
            2: [30000.0],
        }

    def test_record_order_within_group(self, make_record):
        """Test values keep record order inside a group."""
        records = [make_record(children=1, charges=c) for c in (3.0, 1.0, 2.0)]

        assert group_values(records, "children", "charges") == {1: [3.0, 1.0, 2.0]}
