"""Integer partitioning, ranges and shuffling."""

from __future__ import annotations

import random
from dataclasses import dataclass


def partition(n: int, p: int) -> list[int]:
    """Split ``n`` into at most ``p`` near-equal parts, larger parts first."""
    if n < 0:
        raise ValueError(f"trying to partition a negative value: {n}")
    if p < 0:
        raise ValueError(f"number of partitions cannot be negative: {p}")
    count = min(n, p)
    if count == 0:
        return []
    q, r = divmod(n, count)
    return [q + 1] * r + [q] * (count - r)


def shuffle(values: list[int]) -> None:
    """Shuffle a list of integers in place."""
    random.shuffle(values)


@dataclass(frozen=True)
class IntRange:
    """The half-open integer range [start, limit)."""

    start: int
    limit: int

    def __post_init__(self) -> None:
        if self.limit < self.start:
            raise ValueError(
                f"Bad range creation request({self.start}, {self.limit}): "
                "limit cannot be less than start"
            )

    @property
    def size(self) -> int:
        return self.limit - self.start

    def __len__(self) -> int:
        return self.size

    def rand(self) -> int:
        """Return a random value in the range; raises on an empty range."""
        if self.size == 0:
            raise ValueError("cannot pick a random value from an empty range")
        return random.randrange(self.start, self.limit)

    def ints(self) -> list[int]:
        return list(range(self.start, self.limit))

    def partition(self, p: int) -> list[IntRange]:
        """Split into at most ``p`` contiguous ranges of near-equal size."""
        output = []
        begin = self.start
        for part in partition(self.size, p):
            output.append(IntRange(begin, begin + part))
            begin += part
        return output

    def duplicate(self, n: int) -> list[IntRange]:
        if n < 0:
            raise ValueError(f"number of copies cannot be negative: {n}")
        return [self] * n

    def __str__(self) -> str:
        return f"[{self.start}, {self.limit})"