"""
This module provides the participants of a Twenty-One round.

Both the player and the dealer are `CardParticipant` instances. They differ
only in their kind, where their name comes from and how they decide to hit:

- the player's decisions come from `IOInterface.request_hit_or_stay`
- the dealer's decisions come from `dealer_decision`, the fixed house policy
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
from parlor.common.card import Card
from parlor.common.io_interface import IOInterface
from parlor.twenty_one.action import Action
from parlor.twenty_one.hand import HasHand, TwentyOneHand
from parlor.twenty_one.rules import Rules, dealer_decision


class CardParticipant(Participant, HasHand):
    """A participant holding a Twenty-One hand."""

    def __init__(
        self,
        kind: ParticipantKind,
        name_source: NameSource,
        move_source: MoveSource,
        rules: Optional[Rules] = None,
        name: Optional[str] = None,
    ):
        super().__init__(kind, name_source, move_source, name)
        self.rules = rules or Rules()
        self.hand = TwentyOneHand(self.rules.bust_limit, self.rules.ace_adjustment)

    @property
    def cards(self):
        return self.hand.cards

    def add_card(self, card: Card) -> None:
        self.hand.add_card(card)

    def total(self) -> int:
        return self.rules.total(self.hand)

    @property
    def is_busted(self) -> bool:
        return self.rules.is_bust(self.hand)

    def reset_hand(self) -> None:
        self.hand.clear()

    def next_move(self, view=None) -> Action:
        action = super().next_move(view)
        if not isinstance(action, Action):
            raise ValueError(f"{self.name} returned an invalid action: {action!r}")
        return action


def make_player(
    io_interface: IOInterface, rules: Optional[Rules] = None, name: Optional[str] = None
) -> CardParticipant:
    """Seat the human player. Asks the IO interface for a name unless given one."""
    return CardParticipant(
        ParticipantKind.HUMAN,
        PromptedName(io_interface),
        lambda participant, view: io_interface.request_hit_or_stay(view),
        rules,
        name,
    )


def make_dealer(
    rules: Optional[Rules] = None,
    rng: Optional[random.Random] = None,
    name: Optional[str] = None,
) -> CardParticipant:
    """Seat the computer dealer with a name drawn from the dealer roster."""
    rules = rules or Rules()
    return CardParticipant(
        ParticipantKind.COMPUTER,
        RosterName(rules.dealer_names, rng),
        lambda participant, view: dealer_decision(
            participant.hand,
            participant.rules,
            getattr(view, "cards_remaining", None),
        ),
        rules,
        name,
    )
