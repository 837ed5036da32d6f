"""Tests for showdown evaluation."""
import pytest
from hand_checker.evaluation.exceptions import InvalidPoolShape
from hand_checker.evaluation.hand_description import HandDescriber
from hand_checker.evaluation.showdown import evaluate_showdown
from hand_checker.evaluation.types import HandCategory

from tests.test_helpers import cards


def test_single_winner():
    result = evaluate_showdown(
        cards("SA SK SQ H4 D7"),
        [cards("SJ S10"), cards("HA DA")],
    )
    assert result.winners == [0]
    assert not result.is_split
    assert result.results[0].descriptor.category == HandCategory.ROYAL_FLUSH
    assert result.results[0].is_winner
    assert result.results[1].descriptor.category == HandCategory.THREE_OF_A_KIND
    assert not result.results[1].is_winner


def test_split_pot_when_board_plays():
    result = evaluate_showdown(
        cards("C2 C5 C9 SJ S7"),
        [cards("HA HK"), cards("DA DK"), cards("H3 D4")],
    )
    assert result.winners == [0, 1]
    assert result.is_split
    assert [r.is_winner for r in result.results] == [True, True, False]


def test_later_player_can_take_the_lead():
    result = evaluate_showdown(
        cards("H2 D5 C9 SJ H7"),
        [cards("CA DK"), cards("DJ S3"), cards("H9 D9")],
    )
    assert result.winners == [2]
    assert result.results[2].descriptor.category == HandCategory.THREE_OF_A_KIND


def test_single_player_always_wins():
    result = evaluate_showdown(cards("H2 D5 C9"), [cards("CA DK")])
    assert result.winners == [0]


def test_results_keep_seat_order_and_hole_cards():
    holes = [cards("CA DK"), cards("DJ S3")]
    result = evaluate_showdown(cards("H2 D5 C9 SJ H7"), holes)
    assert [r.index for r in result.results] == [0, 1]
    assert [list(r.hole) for r in result.results] == holes
    assert all(isinstance(r.hole, tuple) for r in result.results)


def test_to_dict():
    result = evaluate_showdown(
        cards("SA SK SQ H4 D7"),
        [cards("SJ S10"), cards("HA DA")],
    )
    data = result.to_dict(HandDescriber("en"))
    assert data["winners"] == [0]
    first = data["results"][0]
    assert first["player"] == 0
    assert first["hole"] == ["SJ", "S10"]
    assert first["name"] == "Royal Flush"
    assert first["hand"]["category"] == "royal_flush"
    assert first["is_winner"] is True
    assert data["results"][1]["description"] == "Three Aces"


def test_no_players():
    with pytest.raises(InvalidPoolShape, match="at least one player"):
        evaluate_showdown(cards("SA SK SQ"), [])


def test_card_shared_between_players():
    with pytest.raises(InvalidPoolShape, match="Duplicate"):
        evaluate_showdown(cards("SA SK SQ"), [cards("H2 H3"), cards("H3 H4")])


def test_card_in_community_and_hole():
    with pytest.raises(InvalidPoolShape, match="Duplicate"):
        evaluate_showdown(cards("SA SK SQ"), [cards("SA H3")])


def test_malformed_hole():
    with pytest.raises(InvalidPoolShape):
        evaluate_showdown(cards("SA SK SQ"), [cards("H2 H3 H4")])
