"""JSON routes for classifying and comparing poker hands."""

from flask import Blueprint, current_app, jsonify, request

from hand_checker.core.card import parse_cards
from hand_checker.core.deck import Deck
from hand_checker.evaluation.classifier import classify
from hand_checker.evaluation.comparator import compare
from hand_checker.evaluation.hand_description import HandDescriber
from hand_checker.evaluation.selector import best_hand
from hand_checker.evaluation.showdown import evaluate_showdown

checker_bp = Blueprint("checker", __name__, url_prefix="/api")


def _payload() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def _describer(data: dict) -> HandDescriber:
    return HandDescriber(data.get("locale") or current_app.config["DEFAULT_LOCALE"])


def _bad_request(error: ValueError):
    current_app.logger.warning(f"Rejected request to {request.path}: {error}")
    return jsonify({"success": False, "error": str(error)}), 400


@checker_bp.route("/cards", methods=["GET"])
def list_cards():
    """List the 52 selectable cards.

    Returns:
        JSON response with card tokens and display glyphs
    """
    cards = [
        {
            "card": str(card),
            "suit": card.suit.value,
            "rank": card.rank.value,
            "display": card.display,
            "red": card.suit.is_red,
        }
        for card in Deck().get_cards()
    ]
    return jsonify({"success": True, "cards": cards, "count": len(cards)})


@checker_bp.route("/classify", methods=["POST"])
def classify_cards():
    """Classify exactly five cards.

    Returns:
        JSON response with the hand descriptor and its names
    """
    try:
        data = _payload()
        describer = _describer(data)
        descriptor = classify(parse_cards(data.get("cards") or []))
    except ValueError as e:
        return _bad_request(e)

    return jsonify({
        "success": True,
        "hand": descriptor.to_dict(),
        "name": describer.describe(descriptor),
        "description": describer.describe_detailed(descriptor),
    })


@checker_bp.route("/best-hand", methods=["POST"])
def find_best_hand():
    """Find the best five-card hand from community and hole cards.

    Returns:
        JSON response with the best hand descriptor and its names
    """
    try:
        data = _payload()
        describer = _describer(data)
        community = parse_cards(data.get("community") or [])
        hole = parse_cards(data.get("hole") or [])
        descriptor = best_hand(community, hole)
    except ValueError as e:
        return _bad_request(e)

    return jsonify({
        "success": True,
        "hand": descriptor.to_dict(),
        "name": describer.describe(descriptor),
        "description": describer.describe_detailed(descriptor),
    })


@checker_bp.route("/showdown", methods=["POST"])
def showdown():
    """Evaluate several players against one board and report the winners.

    Returns:
        JSON response with per-player results and winning seat indices
    """
    try:
        data = _payload()
        describer = _describer(data)
        community = parse_cards(data.get("community") or [])
        players = data.get("players") or []
        if not isinstance(players, list):
            raise ValueError("players must be a list of hole card lists")
        max_players = current_app.config["MAX_PLAYERS"]
        if len(players) > max_players:
            raise ValueError(f"At most {max_players} players are supported")
        holes = [parse_cards(hole) for hole in players]
        result = evaluate_showdown(community, holes)
    except ValueError as e:
        return _bad_request(e)

    current_app.logger.info(f"Showdown for {len(holes)} player(s), winners {result.winners}")
    return jsonify({"success": True, **result.to_dict(describer)})


@checker_bp.route("/compare", methods=["POST"])
def compare_hands():
    """Compare two five-card hands.

    Returns:
        JSON response with 1 if a wins, -1 if b wins, 0 for a tie
    """
    try:
        data = _payload()
        hand_a = classify(parse_cards(data.get("a") or []))
        hand_b = classify(parse_cards(data.get("b") or []))
    except ValueError as e:
        return _bad_request(e)

    return jsonify({
        "success": True,
        "result": int(compare(hand_a, hand_b)),
        "a": hand_a.to_dict(),
        "b": hand_b.to_dict(),
    })
