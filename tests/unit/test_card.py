"""Tests for card module."""
from dataclasses import FrozenInstanceError

import pytest
from hand_checker.core.card import Card, Rank, Suit, parse_cards


def test_card_creation():
    """Test basic card creation."""
    card = Card(Rank.ACE, Suit.SPADES)
    assert card.rank == Rank.ACE
    assert card.suit == Suit.SPADES
    assert card.value == 14


def test_card_string_representation():
    """Test string conversion of cards."""
    assert str(Card(Rank.ACE, Suit.SPADES)) == "SA"
    assert str(Card(Rank.TEN, Suit.HEARTS)) == "H10"
    assert str(Card(Rank.TWO, Suit.CLUBS)) == "C2"
    assert repr(Card(Rank.QUEEN, Suit.DIAMONDS)) == "Card('DQ')"


def test_card_display():
    assert Card(Rank.TEN, Suit.SPADES).display == "♠10"
    assert Card(Rank.KING, Suit.HEARTS).display == "♥K"


def test_card_equality():
    """Test card equality comparison."""
    card1 = Card(Rank.ACE, Suit.SPADES)
    card2 = Card(Rank.ACE, Suit.SPADES)
    card3 = Card(Rank.ACE, Suit.HEARTS)

    assert card1 == card2
    assert card1 != card3  # Different suits are not equal
    assert card1 != "SA"  # Different types are not equal
    assert len({card1, card2, card3}) == 2


def test_card_is_immutable():
    card = Card(Rank.ACE, Suit.SPADES)
    with pytest.raises(FrozenInstanceError):
        card.rank = Rank.KING


@pytest.mark.parametrize("card_str,expected_rank,expected_suit", [
    ("SA", Rank.ACE, Suit.SPADES),
    ("H2", Rank.TWO, Suit.HEARTS),
    ("D10", Rank.TEN, Suit.DIAMONDS),
    ("DT", Rank.TEN, Suit.DIAMONDS),
    ("CK", Rank.KING, Suit.CLUBS),
    ("CJ", Rank.JACK, Suit.CLUBS),
    (" sq ", Rank.QUEEN, Suit.SPADES),
])
def test_card_from_string(card_str, expected_rank, expected_suit):
    """Test creating cards from string representation."""
    card = Card.from_string(card_str)
    assert card.rank == expected_rank
    assert card.suit == expected_suit


@pytest.mark.parametrize("invalid_str", [
    "",           # Empty string
    "S",          # Missing rank
    "AS",         # Rank before suit
    "XA",         # Invalid suit
    "S1",         # Invalid rank
    "S11",        # Invalid rank
    "SAA",        # Too long rank
    "H100",       # Too long
])
def test_card_from_string_invalid(invalid_str):
    """Test error handling for invalid card strings."""
    with pytest.raises(ValueError):
        Card.from_string(invalid_str)


def test_card_from_string_rejects_non_strings():
    with pytest.raises(ValueError):
        Card.from_string(14)


@pytest.mark.parametrize("card_str", ["sa", "SA", "Sa", "sA"])
def test_card_from_string_case_insensitivity(card_str):
    """Test that from_string is case-insensitive."""
    card = Card.from_string(card_str)
    assert card == Card(Rank.ACE, Suit.SPADES)


def test_round_trip_through_string():
    for token in ["S2", "H10", "DJ", "CQ", "SK", "HA"]:
        assert str(Card.from_string(token)) == token


def test_rank_numeric_order():
    values = [rank.numeric for rank in Rank]
    assert values == list(range(2, 15))
    assert Rank.from_numeric(11) == Rank.JACK
    with pytest.raises(ValueError):
        Rank.from_numeric(1)


def test_rank_names():
    assert Rank.ACE.full_name == "Ace"
    assert Rank.TEN.plural_name == "Tens"
    assert Rank.SIX.plural_name == "Sixes"
    assert Rank.TWO.plural_name == "Twos"


def test_suit_properties():
    assert Suit.SPADES.symbol == "♠"
    assert Suit.HEARTS.is_red
    assert Suit.DIAMONDS.is_red
    assert not Suit.CLUBS.is_red
    assert str(Suit.CLUBS) == "C"


def test_parse_cards_from_string():
    parsed = parse_cards("SA H10, dq")
    assert parsed == [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.TEN, Suit.HEARTS),
        Card(Rank.QUEEN, Suit.DIAMONDS),
    ]


def test_parse_cards_from_tokens_and_cards():
    king = Card(Rank.KING, Suit.CLUBS)
    assert parse_cards(["S2", king]) == [Card(Rank.TWO, Suit.SPADES), king]
    assert parse_cards("") == []


def test_parse_cards_reports_position():
    with pytest.raises(ValueError, match="position 2"):
        parse_cards("SA ZZ")


def test_parse_cards_rejects_non_iterables():
    with pytest.raises(ValueError):
        parse_cards(5)
