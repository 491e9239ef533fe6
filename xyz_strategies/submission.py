"""Participants and the packaging of a strategy with its owner."""

from enum import Enum
from dataclasses import dataclass

from .algorithms import Strategy


class InvalidSubmission(ValueError):
    """Raised when a strategy cannot be submitted for the given participant."""


class ParticipantType(Enum):
    SYSTEM = "System"
    REMOTE = "Remote"
    ONSITE = "Onsite"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Participant:
    """A participant in the game.

    ``name`` is the internal, unique name; ``pub_name`` is shown publicly.
    """
    participant_type: ParticipantType
    name: str
    pub_name: str

    def __str__(self):
        if self.participant_type is ParticipantType.SYSTEM:
            return str(self.participant_type)
        return self.pub_name


class OwnedStrategy:
    """A strategy instance together with the participant that owns it.

    The holder of an ``OwnedStrategy`` is the only one that drives the
    strategy. Anything that only needs to identify it should use ``id()``
    or ``describe()``.
    """
    __slots__ = ('owner', 'strategy')

    def __init__(self, owner: Participant, strategy: Strategy):
        self.owner = owner
        self.strategy = strategy

    @property
    def name(self) -> str:
        return self.strategy.name

    def id(self) -> str:
        return str(self)

    def describe(self) -> dict:
        return {
            "id": self.id(),
            "strategy": self.name,
            "owner": self.owner.name,
            "owner_public": str(self.owner),
            "participant_type": str(self.owner.participant_type),
        }

    def __eq__(self, other):
        if not isinstance(other, OwnedStrategy):
            return NotImplemented
        return self.owner == other.owner and self.name == other.name

    def __hash__(self):
        return hash((self.owner, self.name))

    def __str__(self):
        return f"{self.owner.name}: {self.name}"

    def __repr__(self):
        return f"OwnedStrategy(owner={self.owner!r}, strategy={self.name!r})"


def make_submission(strategy: Strategy, participant: Participant) -> OwnedStrategy:
    """Package ``strategy`` for ``participant``.

    System participants are reserved for built-in opponents and cannot submit.
    """
    if not isinstance(strategy, Strategy):
        raise TypeError(f"Expected a Strategy instance, got {type(strategy).__name__}")
    if participant.participant_type is ParticipantType.SYSTEM:
        raise InvalidSubmission(
            f"{participant.name}: ParticipantType.SYSTEM isn't acceptable. Use REMOTE or ONSITE.")
    return OwnedStrategy(participant, strategy)
