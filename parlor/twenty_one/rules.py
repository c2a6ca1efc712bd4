"""
Twenty-One table rules and the dealer's drawing policy.

The dealer is a two-state machine. While DRAWING it takes a card; it moves to
STANDING as soon as its total reaches the stand threshold, it busts, or the
deck runs out. STANDING ends the dealer's turn.
"""

from enum import Enum
from typing import Optional, Sequence

from parlor.twenty_one.action import Action
from parlor.twenty_one.constants import (
    ACE_ADJUSTMENT,
    BUST_LIMIT,
    DEALER_NAMES,
    DEALER_STAND_TOTAL,
)
from parlor.twenty_one.hand import TwentyOneHand, hand_total


class DealerState(Enum):
    """States of the dealer's turn."""

    DRAWING = "drawing"
    STANDING = "standing"


class Rules:
    def __init__(
        self,
        dealer_stand_total: int = DEALER_STAND_TOTAL,
        bust_limit: int = BUST_LIMIT,
        ace_adjustment: int = ACE_ADJUSTMENT,
        dealer_names: Sequence[str] = DEALER_NAMES,
    ):
        if dealer_stand_total > bust_limit:
            raise ValueError("Dealer stand total cannot exceed the bust limit")
        self.dealer_stand_total = dealer_stand_total
        self.bust_limit = bust_limit
        self.ace_adjustment = ace_adjustment
        self.dealer_names = tuple(dealer_names)

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "dealer_stand_total": self.dealer_stand_total,
            "bust_limit": self.bust_limit,
            "ace_adjustment": self.ace_adjustment,
            "dealer_names": list(self.dealer_names),
        }

    def total(self, hand: TwentyOneHand) -> int:
        return hand_total(hand.cards, self.bust_limit, self.ace_adjustment)

    def is_bust(self, hand: TwentyOneHand) -> bool:
        return self.total(hand) > self.bust_limit

    def should_dealer_hit(self, hand: TwentyOneHand) -> bool:
        """Determine if the dealer should hit based on the game rules."""
        return self.total(hand) < self.dealer_stand_total and not self.is_bust(hand)


def dealer_state(
    hand: TwentyOneHand,
    rules: Optional[Rules] = None,
    cards_remaining: Optional[int] = None,
) -> DealerState:
    """
    Where the dealer's turn stands for the given hand.

    :param hand: The dealer's hand
    :param rules: Table rules; the defaults when omitted
    :param cards_remaining: Cards left in the deck, if known. An empty deck
                            forces STANDING.
    """
    rules = rules or Rules()
    if cards_remaining is not None and cards_remaining <= 0:
        return DealerState.STANDING
    if rules.should_dealer_hit(hand):
        return DealerState.DRAWING
    return DealerState.STANDING


def dealer_decision(
    hand: TwentyOneHand,
    rules: Optional[Rules] = None,
    cards_remaining: Optional[int] = None,
) -> Action:
    """The dealer's next action: HIT while drawing, STAY once standing."""
    if dealer_state(hand, rules, cards_remaining) is DealerState.DRAWING:
        return Action.HIT
    return Action.STAY
