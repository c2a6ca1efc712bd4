"""
Participants of a Tic-Tac-Toe match.

The human picks squares through `IOInterface.request_square`; the computer
picks them with `choose_move`. Markers are assigned at the start of each match.
"""

import random
from typing import Optional

from parlor.common.actor import (
    MoveSource,
    NameSource,
    Participant,
    ParticipantKind,
    PromptedName,
    RosterName,
)
from parlor.common.io_interface import IOInterface
from parlor.tictactoe.board import Board, Marker
from parlor.tictactoe.rules import MatchRules
from parlor.tictactoe.strategy import choose_move


class MarkerParticipant(Participant):
    """A participant that places a marker on the board."""

    def __init__(
        self,
        kind: ParticipantKind,
        name_source: NameSource,
        move_source: MoveSource,
        name: Optional[str] = None,
        marker: Optional[Marker] = None,
    ):
        super().__init__(kind, name_source, move_source, name)
        self.marker = marker

    def next_move(self, board: Board) -> int:
        if self.marker is None:
            raise ValueError(f"{self.name} has no marker yet")
        return super().next_move(board)


def make_human(io_interface: IOInterface, name: Optional[str] = None) -> MarkerParticipant:
    """Seat the human. Asks the IO interface for a name unless given one."""
    return MarkerParticipant(
        ParticipantKind.HUMAN,
        PromptedName(io_interface),
        lambda participant, board: io_interface.request_square(board),
        name,
    )


def make_computer(
    rules: Optional[MatchRules] = None,
    rng: Optional[random.Random] = None,
    name: Optional[str] = None,
) -> MarkerParticipant:
    """Seat the computer opponent, named from the roster in `rules`."""
    rules = rules or MatchRules()
    rng = rng or random.Random()
    return MarkerParticipant(
        ParticipantKind.COMPUTER,
        RosterName(rules.computer_names, rng),
        lambda participant, board: choose_move(
            board, participant.marker, participant.marker.opponent, rng
        ),
        name,
    )
