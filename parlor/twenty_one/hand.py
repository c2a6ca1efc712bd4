"""
Hand scoring for Twenty-One.

Totals are always recomputed from the cards. Aces start at 11 each; then,
once per ace, if the running total is over 21 it drops by 10. The order the
cards arrived in never changes the result.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from parlor.common.card import Card
from parlor.common.hand import Hand
from parlor.twenty_one.constants import ACE_ADJUSTMENT, BUST_LIMIT


def hand_total(
    cards: Iterable[Card],
    bust_limit: int = BUST_LIMIT,
    ace_adjustment: int = ACE_ADJUSTMENT,
) -> int:
    """
    Score a collection of cards.

    >>> from parlor.common.card import Card, Rank, Suit
    >>> hand_total([Card(Suit.HEARTS, Rank.ACE), Card(Suit.CLUBS, Rank.KING)])
    21
    >>> hand_total([Card(Suit.HEARTS, Rank.ACE)] * 2 + [Card(Suit.CLUBS, Rank.NINE)])
    21
    """
    total = 0
    aces = 0
    for card in cards:
        total += card.rank.rank_value
        if card.is_ace:
            aces += 1

    for _ in range(aces):
        if total <= bust_limit:
            break
        total -= ace_adjustment

    return total


def is_bust(cards: Iterable[Card], bust_limit: int = BUST_LIMIT) -> bool:
    """True when the cards total more than `bust_limit`."""
    return hand_total(cards, bust_limit) > bust_limit


class HasHand(ABC):
    """Capability of anything holding a Twenty-One hand."""

    @abstractmethod
    def add_card(self, card: Card) -> None:
        """Take one more card."""

    @abstractmethod
    def total(self) -> int:
        """Current score of the hand."""

    @property
    @abstractmethod
    def is_busted(self) -> bool:
        """True when the hand is over the limit."""


class TwentyOneHand(Hand):
    """A hand in the game of Twenty-One."""

    def __init__(
        self, bust_limit: int = BUST_LIMIT, ace_adjustment: int = ACE_ADJUSTMENT
    ):
        super().__init__()
        self.bust_limit = bust_limit
        self.ace_adjustment = ace_adjustment

    def total(self) -> int:
        """Calculate the value of the hand with ace handling."""
        return hand_total(self._cards, self.bust_limit, self.ace_adjustment)

    @property
    def is_busted(self) -> bool:
        return self.total() > self.bust_limit

    @property
    def is_soft(self) -> bool:
        """Determine if the hand holds an ace still counted high."""
        hard_total = sum(
            card.rank.rank_value - (self.ace_adjustment if card.is_ace else 0)
            for card in self._cards
        )
        return self.total() != hard_total
