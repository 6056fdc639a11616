"""Optional tqdm progress bars."""

from __future__ import annotations

from typing import Iterable, TypeVar

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

T = TypeVar("T")


def tqdm_enabled(requested: bool | None) -> bool:
    if requested is not None:
        return requested and _TQDM_AVAILABLE
    return _TQDM_AVAILABLE


def track(iterable: Iterable[T], requested: bool | None, **kwargs) -> Iterable[T]:
    """Wrap `iterable` in a tqdm bar when progress bars are enabled."""

    if tqdm_enabled(requested):
        return tqdm(iterable, **kwargs)
    return iterable
