"""
Wang Fill - Random Picker

Weighted random selection among candidate tiles.
"""

from __future__ import annotations

import random
from bisect import bisect_right
from typing import Generic, TypeVar

T = TypeVar("T")


class RandomPicker(Generic[T]):
    """
    Picks one item with probability proportional to its weight.

    Items with weight 0 are only picked when no item has a positive weight,
    in which case all items are equally likely. Results are reproducible
    when a seeded random.Random is supplied.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()
        self._items: list[T] = []
        self._weighted: list[T] = []
        self._thresholds: list[float] = []
        self._sum = 0.0

    def add(self, item: T, weight: float = 1.0) -> None:
        """
        Add a candidate.

        Raises:
            ValueError: If weight is negative
        """
        if weight < 0:
            raise ValueError(f"Weight must not be negative: {weight}")

        self._items.append(item)
        if weight > 0:
            self._sum += weight
            self._weighted.append(item)
            self._thresholds.append(self._sum)

    def pick(self) -> T:
        """
        Pick a random item.

        Raises:
            ValueError: If no items were added
        """
        if not self._items:
            raise ValueError("Cannot pick from an empty RandomPicker")

        if not self._weighted:
            return self._items[self.rng.randrange(len(self._items))]

        value = self.rng.random() * self._sum
        position = bisect_right(self._thresholds, value)
        # Guard against float rounding at the top of the range
        return self._weighted[min(position, len(self._weighted) - 1)]

    def clear(self) -> None:
        self._items.clear()
        self._weighted.clear()
        self._thresholds.clear()
        self._sum = 0.0

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
