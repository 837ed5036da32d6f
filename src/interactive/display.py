from hand_checker.evaluation.hand_description import HandDescriber
from hand_checker.evaluation.showdown import ShowdownResult
from hand_checker.table import CheckerTable


def format_cards(cards) -> str:
    return " ".join(card.display for card in cards) if cards else "None"


def display_table(table: CheckerTable) -> None:
    """Display the current selection in a user-friendly way."""
    print("\n=== Poker Hand Checker ===")
    print(f"Community Cards: {format_cards(table.community)}")
    print("\nPlayers:")
    for index, hole in enumerate(table.players):
        print(f"Player {index + 1}: {format_cards(hole)}")
    print(f"\nCards remaining: {len(table.available_cards())}")


def display_results(result: ShowdownResult, describer: HandDescriber) -> None:
    """Display each player's best hand and mark the winners."""
    print("\n=== Showdown ===")
    for player in result.results:
        marker = "  <- Winner" if player.is_winner else ""
        name = describer.describe(player.descriptor)
        detail = describer.describe_detailed(player.descriptor)
        print(
            f"Player {player.index + 1}: {format_cards(player.hole)} | "
            f"{name} ({detail}) | Best five: {format_cards(player.descriptor.cards)}{marker}"
        )
    if result.is_split:
        winners = ", ".join(f"Player {i + 1}" for i in result.winners)
        print(f"\nSplit pot between {winners}")
