import itertools
import random

import pytest

from parlor.common.card import Card, Rank, Suit
from parlor.common.deck import Deck
from parlor.twenty_one.hand import TwentyOneHand, hand_total, is_bust


def cards(*ranks):
    return [Card(Suit.SPADES, rank) for rank in ranks]


@pytest.mark.parametrize(
    "ranks, total",
    [
        ((Rank.TWO, Rank.THREE), 5),
        ((Rank.KING, Rank.QUEEN), 20),
        ((Rank.ACE, Rank.KING), 21),
        ((Rank.ACE, Rank.ACE), 12),
        ((Rank.ACE, Rank.ACE, Rank.NINE), 21),
        ((Rank.ACE, Rank.ACE, Rank.ACE, Rank.EIGHT), 21),
        ((Rank.ACE, Rank.SIX, Rank.KING), 17),
        ((Rank.KING, Rank.QUEEN, Rank.TWO), 22),
        ((Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK), 31),
    ],
)
def test_hand_total(ranks, total):
    assert hand_total(cards(*ranks)) == total


def test_empty_hand_totals_zero():
    assert hand_total([]) == 0


def test_total_ignores_card_order():
    hand = cards(Rank.ACE, Rank.ACE, Rank.FIVE, Rank.KING)
    expected = hand_total(hand)
    for ordering in itertools.permutations(hand):
        assert hand_total(ordering) == expected


def test_total_ignores_card_order_on_random_hands():
    rng = random.Random(11)
    for _ in range(200):
        deck = Deck.build(rng)
        hand = [deck.deal_one() for _ in range(rng.randint(2, 7))]
        shuffled = list(hand)
        rng.shuffle(shuffled)
        assert hand_total(hand) == hand_total(shuffled)


def test_once_bust_always_bust():
    rng = random.Random(5)
    for _ in range(200):
        deck = Deck.build(rng)
        hand = []
        busted = False
        while not deck.is_empty() and len(hand) < 12:
            hand.append(deck.deal_one())
            if busted:
                assert is_bust(hand)
            busted = is_bust(hand)


def test_is_bust():
    assert not is_bust(cards(Rank.KING, Rank.ACE))
    assert is_bust(cards(Rank.KING, Rank.QUEEN, Rank.TWO))
    assert not is_bust(cards(Rank.KING, Rank.QUEEN, Rank.TWO), bust_limit=22)


def test_twenty_one_hand():
    hand = TwentyOneHand()
    for card in cards(Rank.ACE, Rank.SIX):
        hand.add_card(card)
    assert hand.total() == 17
    assert hand.is_soft
    assert not hand.is_busted

    hand.add_card(Card(Suit.HEARTS, Rank.KING))
    assert hand.total() == 17
    assert not hand.is_soft

    hand.add_card(Card(Suit.HEARTS, Rank.FIVE))
    assert hand.total() == 22
    assert hand.is_busted


def test_twenty_one_hand_clear():
    hand = TwentyOneHand()
    hand.add_card(Card(Suit.HEARTS, Rank.KING))
    hand.clear()
    assert hand.total() == 0
    assert len(hand) == 0


def test_twenty_one_hand_uses_its_ace_adjustment():
    hand = TwentyOneHand(ace_adjustment=9)
    for card in cards(Rank.ACE, Rank.KING, Rank.FIVE):
        hand.add_card(card)
    assert hand.total() == hand_total(hand.cards, 21, 9) == 17
    assert not hand.is_soft
    assert not hand.is_busted

    soft = TwentyOneHand(ace_adjustment=9)
    for card in cards(Rank.ACE, Rank.FIVE):
        soft.add_card(card)
    assert soft.total() == 16
    assert soft.is_soft
