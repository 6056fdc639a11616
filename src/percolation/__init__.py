"""Percolation library initialization."""

from .config import RunConfig, StatsConfig
from .errors import InvalidArgument, OutOfRange, PercolationError
from .grid import PercolationGrid, SiteStatus
from .runner import RunResult, read_sites, run_file, run_sites
from .stats import PercolationStats
from .structures import DisjointSet

__all__ = [
    "PercolationGrid",
    "SiteStatus",
    "DisjointSet",
    "PercolationStats",
    "RunConfig",
    "StatsConfig",
    "RunResult",
    "read_sites",
    "run_sites",
    "run_file",
    "PercolationError",
    "InvalidArgument",
    "OutOfRange",
]
