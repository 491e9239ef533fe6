"""Core vocabulary for the X/Y/Z move game: moves and round outcomes."""

from enum import Enum
from dataclasses import dataclass
from functools import total_ordering


@total_ordering
class Move(Enum):
    X = "x"
    Y = "y"
    Z = "z"

    def __lt__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]

    def opposite(self) -> "Move":
        return OPPOSITE[self]

    def __str__(self):
        return self.name


MOVES = [Move.X, Move.Y, Move.Z]

_ORDER = {m: i for i, m in enumerate(MOVES)}

# X and Y swap, Z maps to itself
OPPOSITE = {
    Move.X: Move.Y,
    Move.Y: Move.X,
    Move.Z: Move.Z,
}


def opposite(move: Move) -> Move:
    """Return the opposite of ``move`` (X <-> Y, Z -> Z)."""
    return OPPOSITE[move]


@dataclass(frozen=True)
class Round:
    """The result of one completed round, seen from one participant."""
    my_move: Move
    opponent_move: Move

    @classmethod
    def of(cls, my_move: Move, opponent_move: Move) -> "Round":
        return cls(my_move, opponent_move)

    def swapped(self) -> "Round":
        """The same round from the opponent's side."""
        return Round(self.opponent_move, self.my_move)
