import pytest

from parlor.common.card import Card, Suit, Rank
from parlor.common.hand import Hand


def test_hand_initialization():
    hand = Hand()
    assert hand.cards == []
    assert len(hand) == 0


def test_hand_add_card():
    hand = Hand()
    card = Card(Suit.HEARTS, Rank.ACE)
    hand.add_card(card)
    assert hand.cards == [card]


def test_hand_add_card_rejects_non_cards():
    hand = Hand()
    with pytest.raises(TypeError):
        hand.add_card("A of ♥")


def test_cards_is_a_copy():
    hand = Hand()
    hand.add_card(Card(Suit.HEARTS, Rank.ACE))
    hand.cards.append(Card(Suit.SPADES, Rank.TWO))
    assert len(hand) == 1


def test_hand_clear():
    hand = Hand()
    hand.add_card(Card(Suit.HEARTS, Rank.ACE))
    hand.add_card(Card(Suit.CLUBS, Rank.TWO))
    hand.clear()
    assert hand.cards == []


def test_hand_repr():
    hand = Hand()
    hand.add_card(Card(Suit.HEARTS, Rank.ACE))
    assert repr(hand) == "Hand([Card(Suit.HEARTS, Rank.ACE)])"


def test_hand_str():
    hand = Hand()
    hand.add_card(Card(Suit.HEARTS, Rank.ACE))
    hand.add_card(Card(Suit.SPADES, Rank.KING))
    assert str(hand) == "A of ♥, K of ♠"
