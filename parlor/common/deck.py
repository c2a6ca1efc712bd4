"""
This module contains the Deck class, which represents a deck of cards.

>>> import random
>>> deck = Deck.build(random.Random(7))
>>> deck.size
52
>>> card = deck.deal_one()
>>> deck.size
51
"""

import logging
import random
from typing import List, Optional

from parlor.common.card import Card, Rank, Suit

logger = logging.getLogger(__name__)


class EmptyDeckError(IndexError):
    """Raised when a card is dealt from a deck with no cards left."""

    pass


class Deck:
    """
    A class representing a deck of cards.

    The top of the deck is the end of `cards`; dealing pops from there.
    """

    # Precompute the default deck
    _default_deck = [Card(suit, rank) for suit in Suit for rank in Rank]

    def __init__(
        self, cards: Optional[List[Card]] = None, rng: Optional[random.Random] = None
    ):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, a default deck will be constructed.
        :param rng: Random source used by `shuffle` (optional).
        """
        self.rng = rng or random.Random()
        if cards is None:
            self.cards: List[Card] = self.initialize_default_deck()
        else:
            self.cards = list(cards)

    @classmethod
    def build(cls, rng: Optional[random.Random] = None) -> "Deck":
        """
        Build a fresh 52-card deck and shuffle it.

        :param rng: Random source for the shuffle. Pass a seeded
                    `random.Random` for a reproducible order.
        :return: A shuffled Deck.
        """
        return cls(rng=rng).shuffle()

    def initialize_default_deck(self) -> List[Card]:
        """
        Construct a default deck with all possible combinations of suits and ranks.

        :return: A list of Card instances representing the default deck.
        """
        return self._default_deck.copy()

    def shuffle(self) -> "Deck":
        """
        Shuffle the cards in the deck with the deck's random source.
        """
        self.rng.shuffle(self.cards)
        return self

    def deal_one(self) -> Card:
        """
        Remove and return the top card of the deck.

        :raises EmptyDeckError: If no cards are left.
        """
        if not self.cards:
            raise EmptyDeckError("Cannot deal from an empty deck")
        card = self.cards.pop()
        logger.debug("Dealt %s, %d cards left", card, len(self.cards))
        return card

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        """
        Check if the deck is empty.

        :return: True if the deck is empty, False otherwise.
        """
        return len(self.cards) == 0

    def reset(self) -> "Deck":
        """
        Reset the deck by recreating all 52 cards and shuffling them.
        """
        self.cards = self.initialize_default_deck()
        return self.shuffle()

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
