"""
This module contains the Participant class shared by both games, together with
the name sources a participant can draw its name from.

A participant is either human-controlled or computer-controlled. Rather than
subclassing per kind, the kind is a tag and the behaviour that differs between
kinds is passed in:

- a *name source*: `PromptedName` asks the IO interface for a name,
  `RosterName` samples one from a fixed roster with an injected random source.
- a *move source*: any callable ``move_source(participant, view)`` returning
  the participant's next move. For humans it forwards to an IO interface
  request, for the computer it is a fixed policy function.

Each game builds on this with its own participant class (cards for
Twenty-One, a marker for Tic-Tac-Toe).
"""

import logging
import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from parlor.common.io_interface import IOInterface

logger = logging.getLogger(__name__)

MoveSource = Callable[["Participant", Any], Any]


class ParticipantKind(Enum):
    """Who decides a participant's moves."""

    HUMAN = "human"
    COMPUTER = "computer"


class NameSource(ABC):
    """Abstract base class for the ways a participant gets its name."""

    @abstractmethod
    def pick_name(self) -> str:
        """
        Return a display name.
        """


class PromptedName(NameSource):
    """Name entered by the person at the keyboard."""

    def __init__(self, io_interface: IOInterface):
        self.io_interface = io_interface

    def pick_name(self) -> str:
        name = self.io_interface.request_name().strip()
        if not name:
            raise ValueError("Name must not be empty")
        return name


class RosterName(NameSource):
    """Name sampled from a fixed roster."""

    def __init__(self, roster: Sequence[str], rng: Optional[random.Random] = None):
        if not roster:
            raise ValueError("Roster must contain at least one name")
        self.roster = tuple(roster)
        self.rng = rng or random.Random()

    def pick_name(self) -> str:
        return self.rng.choice(self.roster)


class Participant:
    """
    A participant in one of the games.

    :param kind: Whether a human or the computer controls this participant
    :param name_source: Where the participant's name comes from
    :param move_source: Callable returning the next move for a given view
    :param name: Explicit name; drawn from `name_source` when omitted
    """

    def __init__(
        self,
        kind: ParticipantKind,
        name_source: NameSource,
        move_source: MoveSource,
        name: Optional[str] = None,
    ):
        self.kind = kind
        self.name_source = name_source
        self.move_source = move_source
        self.name = name if name is not None else name_source.pick_name()
        logger.debug("Seated %s participant %s", kind.value, self.name)

    @property
    def is_human(self) -> bool:
        return self.kind is ParticipantKind.HUMAN

    @property
    def is_computer(self) -> bool:
        return self.kind is ParticipantKind.COMPUTER

    def repick_name(self) -> str:
        """
        Draw a new name from the name source.

        :return: The new name
        """
        self.name = self.name_source.pick_name()
        return self.name

    def next_move(self, view: Any = None) -> Any:
        """
        Ask the move source for this participant's next move.

        :param view: What the participant is allowed to see of the game
        :return: The move, in whatever form the game expects
        """
        return self.move_source(self, view)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.kind.name})"

    def __str__(self) -> str:
        return self.name
