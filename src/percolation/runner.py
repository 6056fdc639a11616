"""Convenience helpers for replaying a file of opened sites."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .config import RunConfig
from .errors import OutOfRange
from .grid import PercolationGrid
from .progress import track

TRACE_COLUMNS = ["step", "row", "col", "open_sites", "percolates"]


@dataclass
class RunResult:
    """Result bundle returned by :func:`run_sites`."""

    grid: PercolationGrid
    trace: pd.DataFrame
    percolated_after: int | None


def read_sites(path: str | Path) -> Tuple[int, List[Tuple[int, int]]]:
    """Read a grid size followed by (row, col) pairs from `path`."""

    tokens = Path(path).read_text().split()
    if not tokens:
        raise ValueError("input is empty; expected a grid size")
    try:
        values = np.array(tokens, dtype=np.int64)
    except (ValueError, OverflowError):
        raise ValueError("input must contain only whitespace-separated 64-bit integers") from None

    n = int(values[0])
    coordinates = values[1:]
    if len(coordinates) % 2:
        raise ValueError(f"found {len(coordinates)} coordinates; expected (row, col) pairs")
    sites = [(int(row), int(col)) for row, col in coordinates.reshape(-1, 2)]
    return n, sites


def run_sites(
    n: int,
    sites: Sequence[Tuple[int, int]],
    config: Optional[RunConfig] = None,
) -> RunResult:
    """Open `sites` in order on a fresh grid and record the state after each step."""

    config = config or RunConfig()
    grid = PercolationGrid(n)
    records = []
    percolated_after = None

    iterator = track(sites, config.use_tqdm, desc="   Opening sites", unit="site")
    for step, (row, col) in enumerate(iterator, start=1):
        grid.open(row, col)
        percolates = grid.percolates()
        records.append((step, row, col, grid.number_of_open_sites(), percolates))
        if percolates and percolated_after is None:
            percolated_after = grid.number_of_open_sites()
            if config.stop_on_percolation:
                break

    trace = pd.DataFrame.from_records(records, columns=TRACE_COLUMNS)
    return RunResult(grid=grid, trace=trace, percolated_after=percolated_after)


def run_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    config: Optional[RunConfig] = None,
) -> RunResult | None:
    """Run the full workflow on `input_path` and optionally save the trace."""

    input_path = Path(input_path)
    config = config or RunConfig()
    verbose = config.verbose

    t0 = time.time()
    if verbose:
        print("1. Loading sites...")
    try:
        n, sites = read_sites(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except ValueError as exc:
        print(f"ERROR: Could not parse '{input_path}': {exc}")
        return None
    if verbose:
        print(f"   Loaded a {n}x{n} grid and {len(sites)} sites. Done in {time.time() - t0:.2f}s")

    t0 = time.time()
    if verbose:
        print("2. Opening sites...")
    try:
        result = run_sites(n, sites, config)
    except (OutOfRange, ValueError) as exc:
        print(f"ERROR: {exc}")
        return None
    if verbose:
        print(f"   Done in {time.time() - t0:.2f}s")

    if verbose:
        if result.percolated_after is not None:
            print(f"System percolated after opening {result.percolated_after} sites")
        else:
            print("System does not percolate")

    if output_path is not None:
        try:
            save_dataframe(result.trace, output_path)
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return None
        if verbose:
            print(f"   Trace saved to '{output_path}'")

    return result


def save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = ["RunResult", "read_sites", "run_sites", "run_file", "save_dataframe"]
