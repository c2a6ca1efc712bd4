"""
Round and game controller for Twenty-One.

A round runs in a fixed order:

1. a fresh deck is built and shuffled, both hands are emptied
2. two cards each are dealt, player first
3. the flop is reported (the dealer's second card stays face down)
4. the player hits until they stay or bust
5. if the player did not bust, the dealer draws by the house policy
6. busts decide the round; otherwise the higher total wins, equal totals tie

Run ``twenty-one`` (or ``python -m parlor.twenty_one.game``) to play in a
terminal, or ``twenty-one --simulate 1000`` for a non-interactive run.
"""

import argparse
import logging
import random
import sys
from typing import Callable, Optional

from parlor.common.card import Card
from parlor.common.deck import Deck
from parlor.common.io_interface import (
    ConsoleIOInterface,
    ContinuePrompt,
    DummyIOInterface,
    IOInterface,
)
from parlor.common.state import Scoreboard
from parlor.events import EngineEventType, EventBus
from parlor.twenty_one.action import Action
from parlor.twenty_one.actor import CardParticipant, make_dealer, make_player
from parlor.twenty_one.constants import CARDS_PER_INITIAL_DEAL
from parlor.twenty_one.hand import hand_total
from parlor.twenty_one.rules import Rules
from parlor.twenty_one.state import RoundOutcome, RoundResult, RoundStage, TableView

logger = logging.getLogger(__name__)


class TwentyOneGame:
    """
    One player against the computer dealer.

    :param io_interface: Where decisions come from and results go to
    :param rules: Table rules; defaults when omitted
    :param rng: Random source for shuffling and the dealer's name
    :param player: Pre-built player; a human seated through `io_interface` otherwise
    :param dealer: Pre-built dealer; a computer dealer otherwise
    :param deck_factory: Builds the deck for each round; a shuffled 52-card
                         deck drawn from `rng` otherwise
    """

    def __init__(
        self,
        io_interface: IOInterface,
        rules: Optional[Rules] = None,
        rng: Optional[random.Random] = None,
        player: Optional[CardParticipant] = None,
        dealer: Optional[CardParticipant] = None,
        deck_factory: Optional[Callable[[], Deck]] = None,
    ):
        self.io_interface = io_interface
        self.rules = rules or Rules()
        self.rng = rng or random.Random()
        self.deck_factory = deck_factory or (lambda: Deck.build(self.rng))
        self.event_bus = EventBus.get_instance()

        self.player = player or make_player(io_interface, self.rules)
        self.dealer = dealer or make_dealer(self.rules, self.rng)
        self.deck = self.deck_factory()
        self.stage = RoundStage.DEALING
        self.scoreboard = Scoreboard((self.player, self.dealer))

    def reset(self) -> None:
        """Discard both hands and start from a new deck."""
        self.deck = self.deck_factory()
        self.player.reset_hand()
        self.dealer.reset_hand()
        self.stage = RoundStage.DEALING
        self.event_bus.emit(EngineEventType.SHUFFLE, {"cards": self.deck.size})

    def view(self, hide_hole_card: bool = False) -> TableView:
        """
        Snapshot the table.

        :param hide_hole_card: Leave every dealer card but the first face down
        """
        dealer_cards = tuple(self.dealer.cards)
        hidden = 0
        dealer_total: Optional[int] = self.dealer.total()
        if hide_hole_card and len(dealer_cards) > 1:
            hidden = len(dealer_cards) - 1
            dealer_cards = dealer_cards[:1]
            dealer_total = None

        return TableView(
            stage=self.stage,
            player_name=self.player.name,
            player_cards=tuple(self.player.cards),
            player_total=self.player.total(),
            dealer_name=self.dealer.name,
            dealer_cards=dealer_cards,
            dealer_total=dealer_total,
            dealer_showing=hand_total(
                dealer_cards, self.rules.bust_limit, self.rules.ace_adjustment
            ),
            hidden_cards=hidden,
            cards_remaining=self.deck.size,
        )

    def _deal_to(self, participant: CardParticipant) -> Card:
        card = self.deck.deal_one()
        participant.add_card(card)
        face_down = participant is self.dealer and len(participant.hand) == 2
        self.event_bus.emit(
            EngineEventType.CARD_DEALT,
            {
                "participant": participant.name,
                "card": None if face_down else str(card),
                "total": None if face_down else participant.total(),
            },
        )
        logger.debug("%s receives %s", participant.name, card)
        return card

    def deal_cards(self) -> None:
        """Deal the opening cards, alternating player and dealer."""
        for _ in range(CARDS_PER_INITIAL_DEAL):
            self._deal_to(self.player)
            self._deal_to(self.dealer)

    def _take_turn(self, participant: CardParticipant, hide_hole_card: bool) -> None:
        event = (
            EngineEventType.DEALER_ACTION
            if participant is self.dealer
            else EngineEventType.PLAYER_ACTION
        )
        while not participant.is_busted:
            action = participant.next_move(self.view(hide_hole_card))
            self.event_bus.emit(
                event,
                {
                    "participant": participant.name,
                    "action": action.value,
                    "total": participant.total(),
                },
            )
            logger.debug(
                "%s chooses %s on %d", participant.name, action.value, participant.total()
            )
            if action is Action.STAY:
                break
            self._deal_to(participant)
            self.io_interface.report_state(self.view(hide_hole_card))

        if participant.is_busted:
            self.event_bus.emit(
                EngineEventType.HAND_BUSTED,
                {"participant": participant.name, "total": participant.total()},
            )
            logger.debug("%s busts with %d", participant.name, participant.total())

    def player_turn(self) -> None:
        """Let the player hit until they stay or bust."""
        self.stage = RoundStage.PLAYER_TURN
        self._take_turn(self.player, hide_hole_card=True)

    def dealer_turn(self) -> None:
        """Apply the house policy until the dealer stands or busts."""
        self.stage = RoundStage.DEALER_TURN
        self._take_turn(self.dealer, hide_hole_card=False)

    def determine_outcome(self) -> RoundOutcome:
        """Decide the round from the current hands."""
        if self.player.is_busted:
            return RoundOutcome.PLAYER_BUST
        if self.dealer.is_busted:
            return RoundOutcome.DEALER_BUST
        player_total, dealer_total = self.player.total(), self.dealer.total()
        if player_total > dealer_total:
            return RoundOutcome.PLAYER_WIN
        if player_total < dealer_total:
            return RoundOutcome.DEALER_WIN
        return RoundOutcome.TIE

    def play_round(self) -> RoundResult:
        """
        Play one full round and report its result.

        Returns:
            The RoundResult that was reported
        """
        self.reset()
        self.event_bus.emit(
            EngineEventType.ROUND_STARTED,
            {"round_number": self.scoreboard.rounds_played + 1},
        )

        self.deal_cards()
        self.io_interface.report_state(self.view(hide_hole_card=True))

        self.player_turn()
        dealer_plays = not self.player.is_busted
        if dealer_plays:
            self.dealer_turn()
        self.stage = RoundStage.ROUND_ENDED
        if dealer_plays:
            self.io_interface.report_state(self.view())

        outcome = self.determine_outcome()
        result = RoundResult(
            outcome=outcome,
            player_name=self.player.name,
            dealer_name=self.dealer.name,
            player_cards=tuple(self.player.cards),
            dealer_cards=tuple(self.dealer.cards),
            player_total=self.player.total(),
            dealer_total=self.dealer.total(),
        )

        if result.player_won:
            self.scoreboard.record(self.player)
        elif result.dealer_won:
            self.scoreboard.record(self.dealer)
        else:
            self.scoreboard.record(None)

        self.io_interface.report_result(result)
        self.event_bus.emit(EngineEventType.ROUND_ENDED, result.to_dict())
        logger.info(
            "Round %d: %s (%d vs %d)",
            self.scoreboard.rounds_played,
            outcome.value,
            result.player_total,
            result.dealer_total,
        )
        return result

    def play(self) -> Scoreboard:
        """
        Play rounds until the player declines another game.

        Returns:
            The scoreboard for the session
        """
        self.event_bus.emit(
            EngineEventType.GAME_STARTED,
            {"player": self.player.name, "dealer": self.dealer.name},
        )
        while True:
            self.play_round()
            if not self.io_interface.request_continue(ContinuePrompt.PLAY_AGAIN):
                break

        self.event_bus.emit(EngineEventType.GAME_ENDED, self.scoreboard.to_dict())
        self.io_interface.output("Thank you for playing Twenty One. Good bye!")
        return self.scoreboard


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Twenty-One against the dealer.")
    parser.add_argument(
        "-s", "--seed", type=int, default=None, help="seed for shuffling (default: none)"
    )
    parser.add_argument(
        "--simulate",
        type=int,
        default=0,
        metavar="ROUNDS",
        help="play ROUNDS rounds without input, the player always staying",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every deal and decision"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    rng = random.Random(args.seed)

    if args.simulate > 0:
        game = TwentyOneGame(DummyIOInterface(), rng=rng)
        for _ in range(args.simulate):
            game.play_round()
        print(f"Finished playing {args.simulate} rounds.")
        print(game.scoreboard.summary())
        return 0

    io_interface = ConsoleIOInterface()
    try:
        game = TwentyOneGame(io_interface, rng=rng)
        game.play()
    except (KeyboardInterrupt, EOFError):
        io_interface.output("\nGood bye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
