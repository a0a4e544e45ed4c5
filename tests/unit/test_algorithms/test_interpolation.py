"""Unit tests for the table interpolation routine."""

import pytest
import numpy as np
from tabeval.algorithms.interpolation import interpolate
from tabeval.core.table import Table, TableSample


class TestInterpolation:
    """Test cases for interpolate."""
    def test_interpolate_midpoint(self, sample_table):
        """Test linear interpolation between two samples."""
        assert np.isclose(interpolate(sample_table, 1.0, "t"), 2.0)
        assert np.isclose(interpolate(sample_table, 1.0, "u"), 3.0)

    def test_interpolate_below_range_clamps(self, sample_table):
        """Test queries at or below the first sample return its value."""
        assert interpolate(sample_table, -5.0, "t") == 1.0
        assert interpolate(sample_table, 0.0, "u") == 2.0

    def test_interpolate_above_range_clamps(self, sample_table):
        """Test queries at or above the last sample return its value."""
        assert interpolate(sample_table, 10.0, "t") == 3.0
        assert interpolate(sample_table, 2.0, "u") == 4.0

    def test_interpolate_empty_table(self):
        """Test an empty table yields zero for any query and field."""
        for x in (-1e9, -1.0, 0.0, 0.5, 1e9):
            assert interpolate(Table(), x, "t") == 0.0
            assert interpolate([], x, "u") == 0.0

    def test_interpolate_single_sample(self):
        """Test a one-sample table clamps on both sides."""
        table = Table.from_samples([(1.0, 7.0, 8.0)])
        assert interpolate(table, 0.0, "t") == 7.0
        assert interpolate(table, 2.0, "u") == 8.0

    def test_interpolate_exact_match_uses_earlier_bracket(self):
        """Test an exact hit on an interior duplicate abscissa resolves to the earlier bracket."""
        table = Table.from_samples([(0.0, 0.0, 0.0), (1.0, 10.0, 10.0), (1.0, 20.0, 20.0), (2.0, 30.0, 30.0)])
        assert interpolate(table, 1.0, "t") == pytest.approx(10.0)
        assert interpolate(table, 1.5, "t") == pytest.approx(25.0)

    def test_interpolate_keeps_file_order(self):
        """Test the bracket search scans samples in the given order without sorting."""
        table = Table.from_samples([(0.0, 0.0, 0.0), (4.0, 40.0, 40.0), (2.0, 2.0, 2.0), (6.0, 6.0, 6.0)])
        # Scan order brackets x=5 between (2, 2) and (6, 6)
        assert interpolate(table, 5.0, "t") == pytest.approx(5.0)

    def test_interpolate_accepts_sample_sequences(self):
        """Test plain sequences of samples are accepted."""
        samples = [TableSample(0.0, 1.0, 2.0), TableSample(2.0, 3.0, 4.0)]
        assert interpolate(samples, 1.0, "t") == pytest.approx(2.0)

    def test_interpolate_unknown_field(self, sample_table):
        """Test an unknown column name is rejected."""
        with pytest.raises(ValueError, match="Unknown table field"):
            interpolate(sample_table, 1.0, "v")

    def test_interpolate_is_idempotent(self, sample_table):
        """Test repeated calls give the same value and leave the table untouched."""
        before = sample_table.t.copy()
        first = interpolate(sample_table, 0.7, "t")
        second = interpolate(sample_table, 0.7, "t")
        assert first == second
        np.testing.assert_array_equal(sample_table.t, before)

    def test_interpolate_result_within_bracket(self):
        """Test interior results lie between the neighbouring sample values."""
        table = Table.from_samples([(0.0, 5.0, -1.0), (1.0, -3.0, 4.0), (3.0, 2.0, 2.0)])
        for x in np.linspace(0.01, 2.99, 37):
            i = 1 if x <= 1.0 else 2
            for field in ("t", "u"):
                column = table.column(field)
                low, high = sorted((column[i - 1], column[i]))
                assert low - 1e-12 <= interpolate(table, x, field) <= high + 1e-12
