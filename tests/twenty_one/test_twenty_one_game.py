import random

import pytest

from parlor.common.card import Card, Rank, Suit
from parlor.common.deck import Deck
from parlor.common.io_interface import ContinuePrompt, TestIOInterface
from parlor.events import EngineEventType
from parlor.twenty_one.action import Action
from parlor.twenty_one.actor import make_dealer, make_player
from parlor.twenty_one.game import TwentyOneGame, main
from parlor.twenty_one.rules import Rules
from parlor.twenty_one.state import RoundOutcome, RoundStage


def c(rank, suit=Suit.HEARTS):
    return Card(suit, rank)


def stacked(*deal_order):
    """Deck factory dealing `deal_order` first to last."""
    return lambda: Deck(cards=list(reversed(deal_order)))


def make_game(actions, *deal_order, continues=()):
    io_interface = TestIOInterface(names=["Alice"], actions=actions, continues=continues)
    game = TwentyOneGame(
        io_interface,
        rng=random.Random(0),
        dealer=make_dealer(name="Hal"),
        deck_factory=stacked(*deal_order),
    )
    return game, io_interface


def test_player_is_named_through_io_interface():
    game, _ = make_game([])
    assert game.player.name == "Alice"
    assert game.player.is_human
    assert game.dealer.is_computer


def test_scripted_hits_then_stay():
    game, io_interface = make_game(
        [Action.HIT, Action.HIT, Action.STAY],
        c(Rank.TWO),
        c(Rank.TEN, Suit.SPADES),
        c(Rank.THREE),
        c(Rank.SEVEN, Suit.SPADES),
        c(Rank.FOUR),
        c(Rank.FIVE),
    )

    result = game.play_round()

    assert game.player.cards == [c(Rank.TWO), c(Rank.THREE), c(Rank.FOUR), c(Rank.FIVE)]
    assert result.player_total == 14
    assert result.dealer_total == 17
    assert result.outcome is RoundOutcome.DEALER_WIN
    assert str(result) == "Hal wins!"
    assert io_interface.actions == []
    assert io_interface.results == [result]
    assert game.stage is RoundStage.ROUND_ENDED


def test_hole_card_hidden_until_dealer_turn():
    game, io_interface = make_game(
        [Action.HIT, Action.STAY],
        c(Rank.TWO),
        c(Rank.TEN, Suit.SPADES),
        c(Rank.THREE),
        c(Rank.SEVEN, Suit.SPADES),
        c(Rank.FOUR),
    )

    game.play_round()

    flop, after_hit, final = io_interface.states
    for view in (flop, after_hit):
        assert view.dealer_cards == (c(Rank.TEN, Suit.SPADES),)
        assert view.hidden_cards == 1
        assert view.dealer_total is None
        assert "[??]" in str(view)
    assert after_hit.player_total == 9
    assert final.hidden_cards == 0
    assert final.dealer_total == 17
    assert len(final.dealer_cards) == 2


def test_player_bust_skips_dealer_turn():
    game, io_interface = make_game(
        [Action.HIT],
        c(Rank.KING),
        c(Rank.TEN, Suit.SPADES),
        c(Rank.QUEEN),
        c(Rank.TWO, Suit.SPADES),
        c(Rank.FIVE),
    )

    result = game.play_round()

    assert result.outcome is RoundOutcome.PLAYER_BUST
    assert result.dealer_won
    assert len(game.dealer.cards) == 2
    assert str(result) == "Alice has busted! Hal wins!"
    assert game.scoreboard.score(game.dealer) == 1


def test_dealer_draws_until_bust():
    game, _ = make_game(
        [Action.STAY],
        c(Rank.TEN),
        c(Rank.TEN, Suit.SPADES),
        c(Rank.NINE),
        c(Rank.SIX, Suit.SPADES),
        c(Rank.KING, Suit.SPADES),
    )

    result = game.play_round()

    assert result.outcome is RoundOutcome.DEALER_BUST
    assert result.dealer_total == 26
    assert result.player_won
    assert game.scoreboard.score(game.player) == 1


def test_dealer_draws_to_stand_total():
    game, _ = make_game(
        [Action.STAY],
        c(Rank.TEN),
        c(Rank.TWO, Suit.SPADES),
        c(Rank.EIGHT),
        c(Rank.THREE, Suit.SPADES),
        c(Rank.FOUR, Suit.SPADES),
        c(Rank.ACE, Suit.SPADES),
        c(Rank.KING, Suit.SPADES),
    )

    result = game.play_round()

    # 2 + 3 + 4 = 9, then the ace makes 20
    assert result.dealer_total == 20
    assert len(result.dealer_cards) == 4
    assert result.outcome is RoundOutcome.DEALER_WIN


def test_dealer_draws_are_reported():
    game, io_interface = make_game(
        [Action.STAY],
        c(Rank.TEN),
        c(Rank.TWO, Suit.SPADES),
        c(Rank.EIGHT),
        c(Rank.THREE, Suit.SPADES),
        c(Rank.FOUR, Suit.SPADES),
        c(Rank.ACE, Suit.SPADES),
    )

    game.play_round()

    flop, first_draw, second_draw, final = io_interface.states
    assert flop.hidden_cards == 1
    assert [len(view.dealer_cards) for view in (first_draw, second_draw)] == [3, 4]
    assert first_draw.hidden_cards == 0
    assert first_draw.dealer_total == 9
    assert second_draw.dealer_total == 20
    assert first_draw.stage is RoundStage.DEALER_TURN
    assert final.stage is RoundStage.ROUND_ENDED


def test_custom_ace_adjustment_scores_hands_one_way():
    rules = Rules(ace_adjustment=9)
    io_interface = TestIOInterface(names=["Alice"], actions=[Action.STAY])
    game = TwentyOneGame(
        io_interface,
        rules=rules,
        dealer=make_dealer(rules, name="Hal"),
        deck_factory=stacked(
            c(Rank.ACE),
            c(Rank.ACE, Suit.SPADES),
            c(Rank.KING),
            c(Rank.NINE, Suit.SPADES),
            c(Rank.FIVE),
        ),
    )
    game.reset()
    game.deal_cards()
    game.player.add_card(game.deck.deal_one())

    # A, K, 5 is 26 with the ace high; softening it by 9 leaves 17
    assert game.player.total() == 17
    assert game.player.hand.total() == 17
    assert not game.player.hand.is_soft

    view = game.view(hide_hole_card=True)
    assert view.player_total == 17
    assert view.dealer_showing == 11
    assert "Hal: 11" in str(view)


def test_higher_total_wins():
    game, _ = make_game(
        [Action.STAY],
        c(Rank.TEN),
        c(Rank.TEN, Suit.SPADES),
        c(Rank.KING),
        c(Rank.SEVEN, Suit.SPADES),
    )
    result = game.play_round()
    assert result.outcome is RoundOutcome.PLAYER_WIN
    assert str(result) == "Alice wins!"


def test_equal_totals_tie():
    game, _ = make_game(
        [Action.STAY],
        c(Rank.TEN),
        c(Rank.TEN, Suit.SPADES),
        c(Rank.EIGHT),
        c(Rank.EIGHT, Suit.SPADES),
    )
    result = game.play_round()
    assert result.outcome is RoundOutcome.TIE
    assert result.is_tie
    assert str(result) == "It's a tie!"
    assert game.scoreboard.ties == 1


def test_deal_order_alternates():
    game, _ = make_game(
        [],
        c(Rank.TWO),
        c(Rank.THREE),
        c(Rank.FOUR),
        c(Rank.FIVE),
    )
    game.reset()
    game.deal_cards()
    assert game.player.cards == [c(Rank.TWO), c(Rank.FOUR)]
    assert game.dealer.cards == [c(Rank.THREE), c(Rank.FIVE)]
    assert game.deck.is_empty()


def test_events_hide_hole_card(recorded_events):
    game, _ = make_game(
        [Action.STAY],
        c(Rank.TEN),
        c(Rank.TEN, Suit.SPADES),
        c(Rank.KING),
        c(Rank.SEVEN, Suit.SPADES),
    )
    game.play_round()

    dealt = [data for kind, data in recorded_events if kind == "CARD_DEALT"]
    assert [d["participant"] for d in dealt] == ["Alice", "Hal", "Alice", "Hal"]
    assert dealt[1]["card"] == "10 of ♠"
    assert dealt[3]["card"] is None

    kinds = [kind for kind, _ in recorded_events]
    assert kinds[0] == EngineEventType.SHUFFLE.name
    assert kinds[-1] == EngineEventType.ROUND_ENDED.name
    assert EngineEventType.DEALER_ACTION.name in kinds


def test_play_repeats_until_declined():
    game, io_interface = make_game(
        [Action.STAY, Action.STAY],
        c(Rank.TEN),
        c(Rank.TEN, Suit.SPADES),
        c(Rank.KING),
        c(Rank.SEVEN, Suit.SPADES),
        continues=[True],
    )

    scoreboard = game.play()

    assert scoreboard.rounds_played == 2
    assert scoreboard.score(game.player) == 2
    assert io_interface.prompts == [ContinuePrompt.PLAY_AGAIN] * 2
    assert io_interface.sent_messages[-1] == "Thank you for playing Twenty One. Good bye!"


def test_invalid_player_action_raises():
    io_interface = TestIOInterface(names=["Alice"])
    player = make_player(io_interface)
    io_interface.actions.append("fold")
    with pytest.raises(ValueError):
        player.next_move(None)


def test_seeded_games_are_reproducible():
    def run(seed):
        io_interface = TestIOInterface(actions=[Action.STAY] * 3)
        game = TwentyOneGame(io_interface, rng=random.Random(seed))
        return [game.play_round().to_dict() for _ in range(3)]

    assert run(21) == run(21)


def test_main_simulate(capsys):
    assert main(["--simulate", "25", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Finished playing 25 rounds." in out
    assert "Rounds Played: 25" in out
