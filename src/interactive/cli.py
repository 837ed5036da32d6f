import logging
from typing import List, Optional

from hand_checker.core.card import Card, parse_cards
from hand_checker.evaluation.hand_description import SUPPORTED_LOCALES, HandDescriber
from hand_checker.evaluation.selector import HOLE_SIZE, MAX_COMMUNITY
from hand_checker.table import COMMUNITY, MIN_COMMUNITY_TO_CHECK, CheckerTable, Target
from web.config import get_config, setup_logging

from .display import display_results, display_table

logger = logging.getLogger(__name__)


def get_locale() -> str:
    """Prompt for the language used for hand names."""
    options = "/".join(SUPPORTED_LOCALES)
    while True:
        choice = input(f"Hand name language ({options}) [default: en]: ").strip().lower() or "en"
        if choice in SUPPORTED_LOCALES:
            return choice
        print(f"Please enter one of: {options}.")


def get_player_count(max_players: int) -> int:
    """Prompt for the number of players."""
    while True:
        num_input = input(f"Enter number of players (1-{max_players}) [default: 2]: ").strip()
        try:
            num_players = int(num_input) if num_input else 2
        except ValueError:
            print("Invalid input, enter a number.")
            continue
        if 1 <= num_players <= max_players:
            return num_players
        print(f"Number must be between 1 and {max_players}.")


def _add_all(table: CheckerTable, cards: List[Card], target: Target) -> Optional[str]:
    """Add cards to target, undoing partial additions on failure."""
    added = []
    try:
        for card in cards:
            table.add_card(card, target)
            added.append(card)
    except ValueError as e:
        for card in added:
            table.remove_card(card, target)
        return str(e)
    return None


def get_cards(table: CheckerTable, target: Target, min_cards: int, max_cards: int, label: str) -> None:
    """Prompt for card tokens (e.g. 'SA H10 DQ') and add them to the table."""
    if min_cards == max_cards:
        count_text = f"{min_cards}"
    else:
        count_text = f"{min_cards}-{max_cards}"
    while True:
        choice = input(f"Enter {count_text} cards for {label} (e.g. 'SA H10 DQ'): ").strip()
        try:
            cards = parse_cards(choice)
        except ValueError as e:
            print(f"Invalid input: {e}")
            continue
        if not min_cards <= len(cards) <= max_cards:
            print(f"Must enter between {min_cards} and {max_cards} cards.")
            continue
        if len(set(cards)) != len(cards):
            print("Duplicate cards. Try again.")
            continue
        error = _add_all(table, cards, target)
        if error:
            logger.warning(f"Rejected cards for {label}: {error}")
            print(f"Error: {error}")
            continue
        return


def setup_table(max_players: int = 10) -> CheckerTable:
    """Fill a table from user input."""
    table = CheckerTable(max_players=max_players)
    for _ in range(get_player_count(max_players) - 1):
        table.add_player()

    get_cards(table, COMMUNITY, MIN_COMMUNITY_TO_CHECK, MAX_COMMUNITY, "the community")
    for index in range(len(table.players)):
        get_cards(table, index, HOLE_SIZE, HOLE_SIZE, f"Player {index + 1}")
    return table


def run_checker(max_players: int = 10) -> None:
    """Run the interactive hand checker until the user stops."""
    describer = HandDescriber(get_locale())

    while True:
        table = setup_table(max_players)
        display_table(table)
        display_results(table.check(), describer)

        while True:
            choice = input("\nCheck another hand? (y/n): ").strip().lower()
            if choice in ('y', 'n'):
                break
            print("Please enter 'y' or 'n'.")

        if choice == 'n':
            print("Goodbye.")
            break


def main() -> None:
    """Console entry point: configure logging, then run the checker."""
    config_class = get_config()
    setup_logging(config_class.CONSOLE_LOG_LEVEL)
    run_checker(config_class.MAX_PLAYERS)
