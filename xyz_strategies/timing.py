"""Per-call timing checks for strategies.

Strategies are expected to answer each call well within ``DEFAULT_BUDGET_MS``.
Nothing here interrupts a slow call; the helpers only measure and report.
"""

import random
import time
from dataclasses import dataclass, field
from typing import Optional

import numpy as _np

from .engine import Move, Round
from .algorithms import Strategy
from .submission import OwnedStrategy
from .utils import RandomMove

DEFAULT_BUDGET_MS = 100.0
DEFAULT_ROUNDS = 100


class BudgetExceeded(AssertionError):
    """A strategy call took longer than the allowed budget."""


def time_call(fn, *args):
    """Call ``fn(*args)`` and return ``(result, elapsed_ms)``."""
    start = time.perf_counter()
    result = fn(*args)
    return result, (time.perf_counter() - start) * 1000


def assert_within_budget(fn, *args, budget_ms: float = DEFAULT_BUDGET_MS):
    """Call ``fn(*args)`` and fail if it ran longer than ``budget_ms``.

    Meant for strategy authors' own tests::

        move = assert_within_budget(strategy.play_for_favoured_move, Move.X)
    """
    result, elapsed = time_call(fn, *args)
    if elapsed > budget_ms:
        label = getattr(fn, "__qualname__", repr(fn))
        raise BudgetExceeded(f"{label} took {elapsed:.2f} ms (budget {budget_ms:.2f} ms)")
    return result


@dataclass
class CallTimings:
    """Elapsed times (ms) of every call to one strategy operation."""
    operation: str
    samples_ms: list = field(default_factory=list)

    @property
    def calls(self) -> int:
        return len(self.samples_ms)

    @property
    def mean_ms(self) -> float:
        return float(_np.mean(self.samples_ms)) if self.samples_ms else 0.0

    @property
    def p95_ms(self) -> float:
        return float(_np.percentile(self.samples_ms, 95)) if self.samples_ms else 0.0

    @property
    def max_ms(self) -> float:
        return float(_np.max(self.samples_ms)) if self.samples_ms else 0.0

    def slow_calls(self, budget_ms: float) -> int:
        return int(_np.count_nonzero(_np.asarray(self.samples_ms) > budget_ms))

    def to_dict(self, budget_ms: float) -> dict:
        return {
            "operation": self.operation,
            "calls": self.calls,
            "mean_ms": round(self.mean_ms, 4),
            "p95_ms": round(self.p95_ms, 4),
            "max_ms": round(self.max_ms, 4),
            "slow_calls": self.slow_calls(budget_ms),
        }


@dataclass
class TimingReport:
    """Timings for one strategy over a profiling run."""
    strategy_name: str
    rounds: int
    budget_ms: float
    play: CallTimings = field(default_factory=lambda: CallTimings("play_for_favoured_move"))
    handle: CallTimings = field(default_factory=lambda: CallTimings("handle_last_round"))

    @property
    def slow_calls(self) -> int:
        return self.play.slow_calls(self.budget_ms) + self.handle.slow_calls(self.budget_ms)

    @property
    def within_budget(self) -> bool:
        return self.slow_calls == 0

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy_name,
            "rounds": self.rounds,
            "budget_ms": self.budget_ms,
            "within_budget": self.within_budget,
            "operations": [
                self.play.to_dict(self.budget_ms),
                self.handle.to_dict(self.budget_ms),
            ],
        }


def profile_strategy(
    strategy,
    rounds: int = DEFAULT_ROUNDS,
    seed: Optional[int] = None,
    budget_ms: float = DEFAULT_BUDGET_MS,
) -> TimingReport:
    """Drive ``strategy`` for ``rounds`` rounds and time every call.

    The opponent and the favoured move are both drawn uniformly at random,
    each from its own generator seeded from ``seed``. No score is kept.

    Args:
        strategy: A ``Strategy`` or an ``OwnedStrategy``.
    """
    if isinstance(strategy, OwnedStrategy):
        name = strategy.id()
        strategy = strategy.strategy
    elif isinstance(strategy, Strategy):
        name = strategy.name
    else:
        raise TypeError(f"Expected a Strategy or OwnedStrategy, got {type(strategy).__name__}")

    master_rng = random.Random(seed)
    favoured_moves = RandomMove.default(seed=master_rng.randint(0, 2**31))
    opponent = RandomMove.default(seed=master_rng.randint(0, 2**31))

    report = TimingReport(strategy_name=name, rounds=rounds, budget_ms=budget_ms)
    play_samples = report.play.samples_ms
    handle_samples = report.handle.samples_ms

    for _ in range(rounds):
        favoured = favoured_moves.get()
        my_move, elapsed = time_call(strategy.play_for_favoured_move, favoured)
        play_samples.append(elapsed)
        if not isinstance(my_move, Move):
            raise TypeError(f"{name} returned {my_move!r} instead of a Move")

        last_round = Round.of(my_move, opponent.get())
        _, elapsed = time_call(strategy.handle_last_round, last_round, favoured)
        handle_samples.append(elapsed)

    return report
