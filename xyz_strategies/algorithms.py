"""Strategy base class and a few sample strategies built on the shared utils."""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as _np

from .engine import Move, MOVES, Round, opposite
from .utils import BoundedHistory, RandomBoolean, RandomMove


class Strategy(ABC):
    """Base class for X/Y/Z strategies.

    Subclasses set ``name`` to a stable display name and implement the two
    callbacks below. An instance belongs to exactly one participant and is
    driven by one caller, one round at a time. Both calls should return well
    within 100 ms.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def play_for_favoured_move(self, favoured_move: Move) -> Move:
        """Return the move to play next, given the move favoured by the opponent or game."""
        ...

    @abstractmethod
    def handle_last_round(self, round: Round, favoured_move: Move) -> None:
        """Receive the outcome of the round that just finished."""
        ...

    def __repr__(self):
        return f"<{self.name}>"


# ---------------------------------------------------------------------------
# Deterministic strategies
# ---------------------------------------------------------------------------

class PlayFavoured(Strategy):
    """Always plays the favoured move."""
    name = "Play Favoured"

    def play_for_favoured_move(self, favoured_move):
        return favoured_move

    def handle_last_round(self, round, favoured_move):
        pass


class Contrarian(Strategy):
    """Always plays the opposite of the favoured move.

    Z has no opposite other than itself, so a favoured Z is played as Z.
    """
    name = "Contrarian"

    def play_for_favoured_move(self, favoured_move):
        return opposite(favoured_move)

    def handle_last_round(self, round, favoured_move):
        pass


class CopyOpponent(Strategy):
    """Replays the opponent's previous move.

    Before the first round has finished it falls back to the favoured move.
    """
    name = "Copy Opponent"

    def __init__(self):
        self._rounds = BoundedHistory(1)

    def play_for_favoured_move(self, favoured_move):
        last = self._rounds.last()
        if last is None:
            return favoured_move
        return last.opponent_move

    def handle_last_round(self, round, favoured_move):
        self._rounds.remember(round)


class DelayedMirror(Strategy):
    """Replays the opponent's move from ``delay`` rounds ago.

    Keeps a window of the opponent's last ``delay`` moves. The oldest one in a
    full window (``last_n(0)``) is exactly ``delay`` rounds old. Until the
    window fills up the favoured move is played.
    """
    name = "Delayed Mirror"

    def __init__(self, delay: int = 3):
        self.delay = delay
        self._opp_moves = BoundedHistory(delay)

    def play_for_favoured_move(self, favoured_move):
        if self.delay == 0 or not self._opp_moves.is_full:
            return favoured_move
        return self._opp_moves.last_n(0)

    def handle_last_round(self, round, favoured_move):
        self._opp_moves.remember(round.opponent_move)


class FrequencyCounter(Strategy):
    """Plays the opponent's most frequent move over a recent window.

    **Window**: the last ``window`` opponent moves
    **Ties**: the earlier move in X, Y, Z order wins
    """
    name = "Frequency Counter"

    def __init__(self, window: int = 20):
        self._opp_moves = BoundedHistory(window)
        self._m2i = {m: i for i, m in enumerate(MOVES)}

    def play_for_favoured_move(self, favoured_move):
        if not self._opp_moves:
            return favoured_move
        counts = _np.zeros(3)
        for move in self._opp_moves:
            counts[self._m2i[move]] += 1
        return MOVES[int(_np.argmax(counts))]

    def handle_last_round(self, round, favoured_move):
        self._opp_moves.remember(round.opponent_move)


# ---------------------------------------------------------------------------
# Randomised strategies
# ---------------------------------------------------------------------------

class CoinFlip(Strategy):
    """Plays the favoured move with probability ``probability``, else its opposite."""
    name = "Coin Flip"

    def __init__(self, probability: float = 0.5, seed: Optional[int] = None):
        self._coin = RandomBoolean(probability, seed=seed)

    def play_for_favoured_move(self, favoured_move):
        if self._coin.get():
            return favoured_move
        return opposite(favoured_move)

    def handle_last_round(self, round, favoured_move):
        pass


class WeightedRandom(Strategy):
    """Ignores everything and draws from a fixed X/Y/Z distribution."""
    name = "Weighted Random"

    def __init__(self, prob_x: float = 1 / 3, prob_y: float = 1 / 3, seed: Optional[int] = None):
        self._moves = RandomMove(prob_x, prob_y, seed=seed)

    def play_for_favoured_move(self, favoured_move):
        return self._moves.get()

    def handle_last_round(self, round, favoured_move):
        pass
