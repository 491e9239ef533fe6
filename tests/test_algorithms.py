import pytest

from xyz_strategies.algorithms import (
    CoinFlip,
    Contrarian,
    CopyOpponent,
    DelayedMirror,
    FrequencyCounter,
    PlayFavoured,
    Strategy,
    WeightedRandom,
)
from xyz_strategies.engine import MOVES, Move, Round
from xyz_strategies.utils import InvalidConfiguration


def _feed(strategy, opponent_moves, favoured=Move.Z):
    for opp in opponent_moves:
        mine = strategy.play_for_favoured_move(favoured)
        strategy.handle_last_round(Round.of(mine, opp), favoured)


def test_strategy_requires_both_callbacks():
    class Incomplete(Strategy):
        name = "Incomplete"

        def play_for_favoured_move(self, favoured_move):
            return favoured_move

    with pytest.raises(TypeError):
        Incomplete()


def test_strategy_repr_uses_name():
    assert repr(PlayFavoured()) == "<Play Favoured>"


SAMPLES = [
    PlayFavoured, Contrarian, CopyOpponent, DelayedMirror,
    FrequencyCounter, CoinFlip, WeightedRandom,
]


def test_every_sample_has_a_distinct_name():
    names = [cls().name for cls in SAMPLES]
    assert all(isinstance(n, str) and n for n in names)
    assert len(set(names)) == len(SAMPLES)


@pytest.mark.parametrize("move", MOVES)
def test_play_favoured(move):
    assert PlayFavoured().play_for_favoured_move(move) is move


def test_contrarian():
    strategy = Contrarian()
    assert strategy.play_for_favoured_move(Move.X) is Move.Y
    assert strategy.play_for_favoured_move(Move.Y) is Move.X
    assert strategy.play_for_favoured_move(Move.Z) is Move.Z


def test_copy_opponent():
    strategy = CopyOpponent()
    assert strategy.play_for_favoured_move(Move.Y) is Move.Y
    _feed(strategy, [Move.X])
    assert strategy.play_for_favoured_move(Move.Y) is Move.X
    _feed(strategy, [Move.Z])
    assert strategy.play_for_favoured_move(Move.Y) is Move.Z


def test_delayed_mirror_waits_for_full_window():
    strategy = DelayedMirror(delay=2)
    _feed(strategy, [Move.X])
    assert strategy.play_for_favoured_move(Move.Y) is Move.Y
    _feed(strategy, [Move.Z])
    # window is X, Z; the oldest is two rounds old
    assert strategy.play_for_favoured_move(Move.Y) is Move.X
    _feed(strategy, [Move.Y])
    assert strategy.play_for_favoured_move(Move.Y) is Move.Z


def test_delayed_mirror_with_no_delay_plays_favoured():
    strategy = DelayedMirror(delay=0)
    _feed(strategy, [Move.X, Move.X])
    assert strategy.play_for_favoured_move(Move.Z) is Move.Z


def test_frequency_counter():
    strategy = FrequencyCounter(window=4)
    assert strategy.play_for_favoured_move(Move.Y) is Move.Y
    _feed(strategy, [Move.Z, Move.Z, Move.Y])
    assert strategy.play_for_favoured_move(Move.X) is Move.Z
    # Y pushes the first Z out: window is Z, Y, Y, Y
    _feed(strategy, [Move.Y, Move.Y])
    assert strategy.play_for_favoured_move(Move.X) is Move.Y


def test_frequency_counter_tie_goes_to_earlier_move():
    strategy = FrequencyCounter(window=4)
    _feed(strategy, [Move.Z, Move.Y])
    assert strategy.play_for_favoured_move(Move.X) is Move.Y


def test_coin_flip_extremes():
    always = CoinFlip(1.0, seed=1)
    never = CoinFlip(0.0, seed=1)
    for _ in range(500):
        assert always.play_for_favoured_move(Move.X) is Move.X
        assert never.play_for_favoured_move(Move.X) is Move.Y


def test_coin_flip_rejects_bad_probability():
    with pytest.raises(InvalidConfiguration):
        CoinFlip(1.5)


def test_weighted_random_follows_weights():
    strategy = WeightedRandom(0.0, 1.0, seed=9)
    assert {strategy.play_for_favoured_move(Move.X) for _ in range(500)} == {Move.Y}


def test_weighted_random_rejects_bad_weights():
    with pytest.raises(InvalidConfiguration):
        WeightedRandom(0.6, 0.6)
