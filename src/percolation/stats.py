"""Monte Carlo estimation of the percolation threshold."""

from __future__ import annotations

import math
import time
from typing import Optional

import numpy as np
import pandas as pd

from .config import StatsConfig
from .errors import InvalidArgument
from .grid import PercolationGrid
from .progress import track


class PercolationStats:
    """Estimate the fraction of open sites at which an ``n`` by ``n`` grid percolates.

    Each trial opens sites of a fresh grid in a uniformly random order until
    the grid percolates and records the fraction of sites that were open at
    that moment. The trials run eagerly at construction time.
    """

    def __init__(self, n: int, trials: int, config: Optional[StatsConfig] = None) -> None:
        if n < 1:
            raise InvalidArgument(f"grid side length must be positive, got {n}")
        if trials < 1:
            raise InvalidArgument(f"number of trials must be positive, got {trials}")
        self.n = n
        self.trials = trials
        self.config = config or StatsConfig()

        t0 = time.time()
        if self.config.verbose:
            print(f"Running {trials} trials on a {n}x{n} grid...")
        rng = np.random.default_rng(self.config.seed)
        iterator = track(range(trials), self.config.use_tqdm, desc="   Trials", unit="trial")
        self.thresholds = np.array([self._run_trial(rng) for _ in iterator], dtype=float)
        if self.config.verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

    def _run_trial(self, rng: np.random.Generator) -> float:
        grid = PercolationGrid(self.n)
        for site in rng.permutation(self.n * self.n):
            row, col = divmod(int(site), self.n)
            grid.open(row + 1, col + 1)
            if grid.percolates():
                break
        return grid.number_of_open_sites() / (self.n * self.n)

    def mean(self) -> float:
        return float(np.mean(self.thresholds))

    def stddev(self) -> float:
        """Sample standard deviation of the thresholds; ``nan`` for one trial."""

        if self.trials == 1:
            return math.nan
        return float(np.std(self.thresholds, ddof=1))

    def _half_width(self) -> float:
        return self.config.confidence_z * self.stddev() / math.sqrt(self.trials)

    def confidence_low(self) -> float:
        return self.mean() - self._half_width()

    def confidence_high(self) -> float:
        return self.mean() + self._half_width()

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "trial": np.arange(1, self.trials + 1),
                "threshold": self.thresholds,
            }
        )

    def summary(self) -> str:
        return (
            f"mean                    = {self.mean():.6f}\n"
            f"stddev                  = {self.stddev():.6f}\n"
            f"confidence interval     = [{self.confidence_low():.6f}, {self.confidence_high():.6f}]"
        )


__all__ = ["PercolationStats"]
