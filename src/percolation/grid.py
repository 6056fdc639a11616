"""Site percolation on an n-by-n grid."""

from __future__ import annotations

import operator
from enum import IntEnum
from typing import Iterator, List

import numpy as np

from .errors import InvalidArgument, OutOfRange
from .structures import DisjointSet


class SiteStatus(IntEnum):
    """State of a single grid site."""

    CLOSED = 0
    OPEN = 1
    FULL = 2


class PercolationGrid:
    """Track which sites of an ``n`` by ``n`` grid are open and full.

    Rows and columns are 1-indexed. Two virtual elements sit above the first
    row and below the last one, so ``percolates`` is a single connectivity
    query. A site is full when it is open and shares a tree with the virtual
    top element; the cached status is kept in sync by a flood fill each time
    an opened site joins the top's tree.
    """

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise InvalidArgument(f"grid side length must be a positive integer, got {n!r}")
        self.n = n
        self._status: List[SiteStatus] = [SiteStatus.CLOSED] * (n * n)
        self._sets = DisjointSet(n * n + 2)
        self._open_sites = 0
        self._bottom_full = False

    @property
    def virtual_top(self) -> int:
        return self.n * self.n

    @property
    def virtual_bottom(self) -> int:
        return self.n * self.n + 1

    def index(self, row: int, col: int) -> int:
        """Return the row-major element index of the site at (`row`, `col`)."""

        row = operator.index(row)
        col = operator.index(col)
        if not 1 <= row <= self.n:
            raise OutOfRange(f"row index {row} must be between 1 and {self.n}")
        if not 1 <= col <= self.n:
            raise OutOfRange(f"column index {col} must be between 1 and {self.n}")
        return (row - 1) * self.n + (col - 1)

    def open(self, row: int, col: int) -> None:
        """Open the site at (`row`, `col`) and connect it to its open neighbours."""

        site = self.index(row, col)
        if self._status[site] is not SiteStatus.CLOSED:
            return

        self._status[site] = SiteStatus.OPEN
        self._open_sites += 1

        # A 1x1 grid's only site is both the top and the bottom row.
        if row == 1:
            self._sets.union(site, self.virtual_top)
        for neighbor in self._neighbors(site):
            if self._status[neighbor] is not SiteStatus.CLOSED:
                self._sets.union(site, neighbor)
        if row == self.n:
            self._sets.union(site, self.virtual_bottom)

        if self._sets.connected(site, self.virtual_top):
            self._fill_from(site)

    def is_open(self, row: int, col: int) -> bool:
        return self._status[self.index(row, col)] is not SiteStatus.CLOSED

    def is_full(self, row: int, col: int) -> bool:
        return self._status[self.index(row, col)] is SiteStatus.FULL

    def percolates(self) -> bool:
        return self._sets.connected(self.virtual_top, self.virtual_bottom)

    def number_of_open_sites(self) -> int:
        return self._open_sites

    def snapshot(self) -> np.ndarray:
        """Return an ``(n, n)`` array of :class:`SiteStatus` values."""

        return np.array(self._status, dtype=np.int8).reshape(self.n, self.n)

    def __repr__(self) -> str:
        return (
            f"PercolationGrid(n={self.n}, open_sites={self._open_sites}, "
            f"percolates={self.percolates()})"
        )

    def _fill_from(self, site: int) -> None:
        # Every open site reachable from `site` is in the top's tree; sites
        # already full were reached by an earlier fill.
        stack = [site]
        self._status[site] = SiteStatus.FULL
        while stack:
            current = stack.pop()
            for neighbor in self._fill_candidates(current):
                if self._status[neighbor] is SiteStatus.OPEN:
                    self._status[neighbor] = SiteStatus.FULL
                    stack.append(neighbor)

    def _fill_candidates(self, site: int) -> Iterator[int]:
        yield from self._neighbors(site)
        # Open bottom-row sites are joined through the virtual bottom element.
        if not self._bottom_full and site >= self.n * (self.n - 1):
            self._bottom_full = True
            yield from range(self.n * (self.n - 1), self.n * self.n)

    def _neighbors(self, site: int) -> Iterator[int]:
        row, col = divmod(site, self.n)
        if row > 0:
            yield site - self.n
        if row < self.n - 1:
            yield site + self.n
        if col > 0:
            yield site - 1
        if col < self.n - 1:
            yield site + 1


__all__ = ["PercolationGrid", "SiteStatus"]
