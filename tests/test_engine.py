import pytest

from xyz_strategies.engine import MOVES, OPPOSITE, Move, Round, opposite


@pytest.mark.parametrize("move, expected", [
    (Move.X, Move.Y),
    (Move.Y, Move.X),
    (Move.Z, Move.Z),
])
def test_opposite(move, expected):
    assert opposite(move) is expected
    assert move.opposite() is expected
    assert OPPOSITE[move] is expected


@pytest.mark.parametrize("move", MOVES)
def test_opposite_is_involution(move):
    assert opposite(opposite(move)) is move


def test_opposite_is_permutation():
    assert sorted(opposite(m) for m in MOVES) == MOVES


def test_moves_are_totally_ordered():
    assert Move.X < Move.Y < Move.Z
    assert Move.Z >= Move.Y >= Move.X
    assert sorted([Move.Z, Move.X, Move.Y]) == [Move.X, Move.Y, Move.Z]
    assert max(MOVES) is Move.Z


def test_move_str_is_variant_name():
    assert [str(m) for m in MOVES] == ["X", "Y", "Z"]


def test_round_of_accepts_any_pair():
    for mine in MOVES:
        for theirs in MOVES:
            r = Round.of(mine, theirs)
            assert r.my_move is mine
            assert r.opponent_move is theirs


def test_round_is_immutable_value():
    r = Round.of(Move.X, Move.Z)
    assert r == Round(Move.X, Move.Z)
    assert hash(r) == hash(Round(Move.X, Move.Z))
    with pytest.raises(AttributeError):
        r.my_move = Move.Y


def test_round_swapped():
    assert Round.of(Move.X, Move.Z).swapped() == Round.of(Move.Z, Move.X)
