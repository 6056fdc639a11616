import math

import numpy as np
import pytest

from percolation.config import StatsConfig
from percolation.errors import InvalidArgument
from percolation.stats import PercolationStats


def _config(seed=1):
    return StatsConfig(seed=seed, use_tqdm=False, verbose=False)


def test_seeded_runs_are_reproducible():
    first = PercolationStats(5, 10, _config(seed=42))
    second = PercolationStats(5, 10, _config(seed=42))
    assert np.array_equal(first.thresholds, second.thresholds)


def test_thresholds_are_fractions_of_open_sites():
    stats = PercolationStats(6, 20, _config())
    assert stats.thresholds.shape == (20,)
    assert np.all(stats.thresholds > 0)
    assert np.all(stats.thresholds <= 1)
    # n consecutive sites are the minimum needed to span a column.
    assert np.all(stats.thresholds >= 6 / 36)
    assert stats.confidence_low() <= stats.mean() <= stats.confidence_high()


def test_single_site_grid_threshold_is_one():
    stats = PercolationStats(1, 3, _config())
    assert stats.thresholds.tolist() == [1.0, 1.0, 1.0]
    assert stats.mean() == 1.0
    assert stats.stddev() == 0.0


def test_single_trial_has_undefined_stddev():
    stats = PercolationStats(3, 1, _config())
    assert math.isnan(stats.stddev())


def test_to_frame_lists_each_trial():
    stats = PercolationStats(3, 4, _config())
    frame = stats.to_frame()
    assert frame["trial"].tolist() == [1, 2, 3, 4]
    assert frame["threshold"].tolist() == stats.thresholds.tolist()


@pytest.mark.parametrize("n, trials", [(0, 5), (5, 0)])
def test_non_positive_parameters_rejected(n, trials):
    with pytest.raises(InvalidArgument):
        PercolationStats(n, trials, _config())


def test_seed_read_from_environment(monkeypatch):
    monkeypatch.setenv("PERCOLATION_SEED", "11")
    assert StatsConfig().seed == 11
    assert StatsConfig(seed=3).seed == 3


def test_non_numeric_seed_variable_rejected(monkeypatch):
    monkeypatch.setenv("PERCOLATION_SEED", "abc")
    with pytest.raises(ValueError):
        StatsConfig()
