"""
Immutable snapshots of a Twenty-One round.

`TableView` is what gets reported to the IO interface after each step. During
the flop and the player's turn the dealer's second card is left out of the
view; the engine itself always holds the full hand.

`RoundResult` is the reported outcome of a finished round.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Optional, Tuple

from parlor.common.card import Card

RULE = "-" * 48


class RoundStage(Enum):
    """Possible stages of a Twenty-One round."""

    DEALING = auto()
    PLAYER_TURN = auto()
    DEALER_TURN = auto()
    ROUND_ENDED = auto()


class RoundOutcome(Enum):
    """Possible results of a Twenty-One round."""

    PLAYER_BUST = "player_bust"
    DEALER_BUST = "dealer_bust"
    PLAYER_WIN = "player_win"
    DEALER_WIN = "dealer_win"
    TIE = "tie"

    @property
    def player_won(self) -> bool:
        return self in (RoundOutcome.DEALER_BUST, RoundOutcome.PLAYER_WIN)

    @property
    def dealer_won(self) -> bool:
        return self in (RoundOutcome.PLAYER_BUST, RoundOutcome.DEALER_WIN)


def _cards_str(cards: Tuple[Card, ...]) -> str:
    return " ".join(f"[{card}]" for card in cards)


@dataclass(frozen=True)
class TableView:
    """
    Snapshot of the table as the player may see it.

    Attributes:
        stage: Stage of the round the snapshot was taken in
        player_name: Display name of the player
        player_cards: Every card in the player's hand
        player_total: The player's current total
        dealer_name: Display name of the dealer
        dealer_cards: The dealer cards that are face up
        dealer_total: The dealer's total, or None while a card is hidden
        dealer_showing: Total of the dealer's face-up cards
        hidden_cards: Number of dealer cards face down
        cards_remaining: Cards left in the deck
    """

    stage: RoundStage
    player_name: str
    player_cards: Tuple[Card, ...]
    player_total: int
    dealer_name: str
    dealer_cards: Tuple[Card, ...]
    dealer_total: Optional[int]
    dealer_showing: int = 0
    hidden_cards: int = 0
    cards_remaining: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stage": self.stage.name,
            "player": {
                "name": self.player_name,
                "cards": [str(card) for card in self.player_cards],
                "total": self.player_total,
            },
            "dealer": {
                "name": self.dealer_name,
                "cards": [str(card) for card in self.dealer_cards],
                "total": self.dealer_total,
                "showing": self.dealer_showing,
                "hidden_cards": self.hidden_cards,
            },
            "cards_remaining": self.cards_remaining,
        }

    def __str__(self) -> str:
        dealer_line = _cards_str(self.dealer_cards)
        if self.hidden_cards:
            dealer_line = f"{dealer_line} " + " ".join(["[??]"] * self.hidden_cards)
        dealer_points = (
            self.dealer_total if self.dealer_total is not None else self.dealer_showing
        )
        return "\n".join(
            [
                f"{self.player_name}: {_cards_str(self.player_cards)}",
                f"{self.dealer_name}: {dealer_line}",
                RULE,
                f"Points = {self.player_name}: {self.player_total} | "
                f"{self.dealer_name}: {dealer_points}",
                RULE,
            ]
        )


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of a finished Twenty-One round.
    """

    outcome: RoundOutcome
    player_name: str
    dealer_name: str
    player_cards: Tuple[Card, ...]
    dealer_cards: Tuple[Card, ...]
    player_total: int
    dealer_total: int

    @property
    def player_won(self) -> bool:
        return self.outcome.player_won

    @property
    def dealer_won(self) -> bool:
        return self.outcome.dealer_won

    @property
    def is_tie(self) -> bool:
        return self.outcome is RoundOutcome.TIE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "player": {
                "name": self.player_name,
                "cards": [str(card) for card in self.player_cards],
                "total": self.player_total,
            },
            "dealer": {
                "name": self.dealer_name,
                "cards": [str(card) for card in self.dealer_cards],
                "total": self.dealer_total,
            },
        }

    def __str__(self) -> str:
        match self.outcome:
            case RoundOutcome.PLAYER_BUST:
                return f"{self.player_name} has busted! {self.dealer_name} wins!"
            case RoundOutcome.DEALER_BUST:
                return f"{self.dealer_name} has busted! {self.player_name} wins!"
            case RoundOutcome.PLAYER_WIN:
                return f"{self.player_name} wins!"
            case RoundOutcome.DEALER_WIN:
                return f"{self.dealer_name} wins!"
            case _:
                return "It's a tie!"
