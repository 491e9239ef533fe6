"""Shared vocabulary and building blocks for X/Y/Z game strategies."""

from .engine import Move, MOVES, OPPOSITE, Round, opposite
from .utils import BoundedHistory, InvalidConfiguration, RandomBoolean, RandomMove
from .algorithms import Strategy
from .submission import (
    InvalidSubmission,
    OwnedStrategy,
    Participant,
    ParticipantType,
    make_submission,
)

__all__ = [
    "Move", "MOVES", "OPPOSITE", "Round", "opposite",
    "BoundedHistory", "InvalidConfiguration", "RandomBoolean", "RandomMove",
    "Strategy",
    "InvalidSubmission", "OwnedStrategy", "Participant", "ParticipantType", "make_submission",
]
