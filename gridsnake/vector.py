"""Integer 2D vectors and random grid positions."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol


class RandomSource(Protocol):
    """Anything offering ``randrange(stop)`` like :class:`random.Random`."""

    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class IVec2:
    """An immutable pair of integer coordinates."""

    x: int
    y: int

    def __add__(self, other: IVec2) -> IVec2:
        if not isinstance(other, IVec2):
            return NotImplemented
        return IVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: IVec2) -> IVec2:
        if not isinstance(other, IVec2):
            return NotImplemented
        return IVec2(self.x - other.x, self.y - other.y)


def random_position(max_x: int, max_y: int, rng: RandomSource | None = None) -> IVec2:
    """Return a position with ``1 <= x <= max_x`` and ``1 <= y <= max_y``."""
    if max_x <= 0 or max_y <= 0:
        raise ValueError(f"bounds must be positive, got ({max_x}, {max_y})")
    source = rng if rng is not None else random
    x = source.randrange(max_x) + 1
    y = source.randrange(max_y) + 1
    return IVec2(x, y)