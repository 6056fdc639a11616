"""Configuration objects for the runner and the Monte Carlo estimator."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class RunConfig:
    """Configuration for replaying a file of opened sites."""

    verbose: bool = True
    use_tqdm: bool | None = None
    stop_on_percolation: bool = False


@dataclass
class StatsConfig:
    """Configuration for :class:`~percolation.stats.PercolationStats`."""

    seed: int | None = None
    confidence_z: float = 1.96  # 95% two-sided
    use_tqdm: bool | None = None
    verbose: bool = True

    def __post_init__(self) -> None:
        if self.seed is None:
            env_seed = os.getenv("PERCOLATION_SEED")
            if env_seed:
                try:
                    self.seed = int(env_seed)
                except ValueError:
                    raise ValueError(f"PERCOLATION_SEED must be an integer, got {env_seed!r}") from None


__all__ = ["RunConfig", "StatsConfig"]
