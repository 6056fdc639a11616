"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgument, OutOfRange


@dataclass
class DisjointSet:
    """Weighted union-find over the integers ``0 .. count - 1``.

    Trees are joined by size (the smaller tree goes under the larger root,
    ties keep the root of the first argument) and ``find`` compresses the
    path it walks, so every operation runs in near-constant amortized time.
    """

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise InvalidArgument("count must be non-negative")
        self.parent = list(range(self.count))
        self.size = [1] * self.count
        self.components = self.count

    def __len__(self) -> int:
        return self.count

    def find(self, index: int) -> int:
        self._validate(index)
        return self._root(index)

    def union(self, left: int, right: int) -> None:
        self._validate(left)
        self._validate(right)
        root_left = self._root(left)
        root_right = self._root(right)
        if root_left == root_right:
            return
        if self.size[root_left] < self.size[root_right]:
            root_left, root_right = root_right, root_left
        self.parent[root_right] = root_left
        self.size[root_left] += self.size[root_right]
        self.components -= 1

    def connected(self, left: int, right: int) -> bool:
        return self.find(left) == self.find(right)

    def _root(self, index: int) -> int:
        parent = self.parent[index]
        if parent != index:
            parent = self._root(parent)
            self.parent[index] = parent
        return parent

    def _validate(self, index: int) -> None:
        if not 0 <= index < self.count:
            raise OutOfRange(f"element {index} must be between 0 and {self.count - 1}")
