"""Building blocks for strategy authors: bounded memory and random generators."""

from collections import deque
import math
import numbers
import random
from typing import Generic, Iterator, Optional, TypeVar

from .engine import Move

T = TypeVar("T")


class InvalidConfiguration(ValueError):
    """Raised when a building block is constructed with invalid parameters."""


def _check_probability(value: float, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfiguration(f"{label} must be a number, got {value!r}")
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidConfiguration(f"{label} must be between 0.0 and 1.0, got {value!r}")
    return float(value)


# ---------------------------------------------------------------------------
# Bounded history
# ---------------------------------------------------------------------------

class BoundedHistory(Generic[T]):
    """Fixed-capacity memory that forgets its oldest entry first.

    Values are kept in insertion order. Once ``capacity`` values are held,
    remembering another one drops the oldest. A capacity of 0 remembers
    nothing.

    Only ``remember`` mutates the history; everything else is a read.
    """
    __slots__ = ('_data', '_capacity')

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise InvalidConfiguration(
                f"capacity must be a non-negative integer, got {capacity!r}")
        self._capacity = capacity
        self._data: deque = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._data) == self._capacity

    def remember(self, value: T) -> None:
        """Remember ``value``. When at capacity the oldest entry is dropped."""
        # deque(maxlen=...) pops the left end as part of the append
        self._data.append(value)

    def last(self) -> Optional[T]:
        """Return the most recently remembered value, or None if empty."""
        if not self._data:
            return None
        return self._data[-1]

    def last_n(self, n: int) -> Optional[T]:
        """Return the value at position ``n``, counting from the oldest retained entry.

        ``last_n(0)`` is the oldest value still held, ``last_n(len(h) - 1)``
        the newest. Returns None when ``n`` is out of range.
        """
        if n < 0 or n >= len(self._data):
            return None
        return self._data[n]

    def __len__(self):
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __bool__(self):
        return bool(self._data)

    def __repr__(self):
        return f"BoundedHistory(capacity={self._capacity}, {list(self._data)!r})"


# ---------------------------------------------------------------------------
# Random generators
# ---------------------------------------------------------------------------

class RandomBoolean:
    """Biased coin: ``get()`` is True with the configured probability."""

    def __init__(self, probability: float, seed: Optional[int] = None):
        self.probability = _check_probability(probability, "probability")
        self._rng = random.Random(seed)

    def get(self) -> bool:
        return self._rng.random() < self.probability

    def __repr__(self):
        return f"RandomBoolean(probability={self.probability})"


class RandomMove:
    """Weighted random move generator.

    ``prob_x`` and ``prob_y`` are the chances of drawing X and Y; Z gets the
    remainder. Their sum cannot exceed 1.0.

    A draw ``u`` in [0, 1) maps to X when ``u < prob_x``, to Y when
    ``u < prob_x + prob_y`` and to Z otherwise.
    """

    def __init__(self, prob_x: float = 1 / 3, prob_y: float = 1 / 3, seed: Optional[int] = None):
        prob_x = _check_probability(prob_x, "probability of X")
        prob_y = _check_probability(prob_y, "probability of Y")
        if prob_x + prob_y > 1.0:
            raise InvalidConfiguration(
                f"combined probability of X and Y cannot exceed 1.0, got {prob_x + prob_y!r}")
        self.prob_x = prob_x
        self.prob_y = prob_y
        self._rng = random.Random(seed)

    @classmethod
    def default(cls, seed: Optional[int] = None) -> "RandomMove":
        """Equal chance for every move."""
        third = 1 / 3
        return cls(third, third, seed=seed)

    @property
    def prob_z(self) -> float:
        return max(0.0, 1.0 - self.prob_x - self.prob_y)

    def get(self) -> Move:
        value = self._rng.random()
        if value < self.prob_x:
            return Move.X
        elif value < self.prob_x + self.prob_y:
            return Move.Y
        return Move.Z

    def __repr__(self):
        return f"RandomMove(prob_x={self.prob_x}, prob_y={self.prob_y})"
