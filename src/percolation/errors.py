"""Exceptions raised by the percolation model."""

from __future__ import annotations


class PercolationError(Exception):
    """Base class for errors raised by the percolation package."""


class InvalidArgument(PercolationError, ValueError):
    """A size or count passed at construction time is not usable."""


class OutOfRange(PercolationError, IndexError):
    """A coordinate or element index lies outside the structure."""


__all__ = ["PercolationError", "InvalidArgument", "OutOfRange"]
