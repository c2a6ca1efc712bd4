"""
Immutable snapshots and results for Tic-Tac-Toe.

`BoardView` is reported when a round starts and after every placed marker,
`RoundResult` after each round and `MatchResult` when a match is over.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from parlor.tictactoe.board import Marker, draw


class RoundOutcome(Enum):
    """Possible results of a Tic-Tac-Toe round."""

    HUMAN_WIN = "human_win"
    COMPUTER_WIN = "computer_win"
    TIE = "tie"


@dataclass(frozen=True)
class BoardView:
    """
    Snapshot of the board and who is playing what.

    Attributes:
        squares: Position -> marker text, None for unmarked squares
        human_name: Display name of the human
        human_marker: The human's marker
        computer_name: Display name of the computer
        computer_marker: The computer's marker
        current_marker: Marker of the side about to move
        round_number: 1-based round within the match
    """

    squares: Dict[int, Optional[str]]
    human_name: str
    human_marker: Marker
    computer_name: str
    computer_marker: Marker
    current_marker: Marker
    round_number: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "squares": dict(self.squares),
            "human": {"name": self.human_name, "marker": self.human_marker.value},
            "computer": {
                "name": self.computer_name,
                "marker": self.computer_marker.value,
            },
            "current_marker": self.current_marker.value,
            "round_number": self.round_number,
        }

    def __str__(self) -> str:
        return (
            f"{self.human_name} is an {self.human_marker}. "
            f"{self.computer_name} is an {self.computer_marker}.\n\n"
            f"{draw(self.squares)}"
        )


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of one round.

    Attributes:
        outcome: Who won the round
        winning_marker: The marker that completed a line, None on a tie
        winner_name: Name of the round winner, None on a tie
        scores: (name, score) pairs after this round, human first
        match_winner_name: Set when this round decided the match
    """

    outcome: RoundOutcome
    winning_marker: Optional[Marker]
    winner_name: Optional[str]
    scores: Tuple[Tuple[str, int], ...] = ()
    match_winner_name: Optional[str] = None

    @property
    def is_tie(self) -> bool:
        return self.outcome is RoundOutcome.TIE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "winning_marker": self.winning_marker.value if self.winning_marker else None,
            "winner": self.winner_name,
            "scores": [{"name": name, "score": score} for name, score in self.scores],
            "match_winner": self.match_winner_name,
        }

    def __str__(self) -> str:
        match self.outcome:
            case RoundOutcome.HUMAN_WIN:
                lines = ["You won this round!"]
            case RoundOutcome.COMPUTER_WIN:
                lines = [f"{self.winner_name} won this round!"]
            case _:
                lines = ["It's a tie!"]

        if self.match_winner_name is not None:
            if self.outcome is RoundOutcome.HUMAN_WIN:
                lines.append("Congratulations! You won the game!")
            else:
                lines.append("Sorry, you lost the game!")

        lines.append(
            " | ".join(f"{name}'s score: {score}" for name, score in self.scores)
        )
        return "\n".join(lines)


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of a match.

    Attributes:
        winner_name: Who reached the winning score, None if the match was abandoned
        scores: (name, score) pairs at the end of the match, human first
        rounds_played: Rounds played in the match, ties included
        abandoned: True when the human declined to play the next round
    """

    winner_name: Optional[str]
    scores: Tuple[Tuple[str, int], ...]
    rounds_played: int
    abandoned: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "winner": self.winner_name,
            "scores": [{"name": name, "score": score} for name, score in self.scores],
            "rounds_played": self.rounds_played,
            "abandoned": self.abandoned,
        }

    def __str__(self) -> str:
        if self.winner_name is None:
            return f"Match ended after {self.rounds_played} rounds with no winner."
        return f"{self.winner_name} wins the match after {self.rounds_played} rounds."
