"""Tic-Tac-Toe match rules."""

from enum import Enum
from typing import Sequence, Union

WIN_SCORE = 5

COMPUTER_NAMES = (
    "Jon",
    "Arya",
    "Sansa",
    "Robb",
    "Ned",
    "Caitlyn",
    "Bran",
    "Daenerys",
    "Rickon",
)


class FirstMover(Enum):
    """Who opens each round of a match."""

    HUMAN = "human"
    COMPUTER = "computer"
    RANDOM = "random"
    # Ask the human at the start of each match
    CHOOSE = "choose"


class MatchRules:
    def __init__(
        self,
        win_score: int = WIN_SCORE,
        first_to_move: Union[FirstMover, str] = FirstMover.CHOOSE,
        computer_names: Sequence[str] = COMPUTER_NAMES,
    ):
        if win_score < 1:
            raise ValueError("win_score must be at least 1")
        self.win_score = win_score
        self.first_to_move = FirstMover(first_to_move)
        self.computer_names = tuple(computer_names)

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "win_score": self.win_score,
            "first_to_move": self.first_to_move.value,
            "computer_names": list(self.computer_names),
        }
