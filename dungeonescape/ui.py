"""Menus and prompts shown to the player."""

from __future__ import annotations

from dungeonescape.console import Color, Console, paint
from dungeonescape.inventory import Inventory

_SHIELD = "\U0001F6E1\uFE0F"


def ask_player_name(console: Console) -> str:
    """Ask the player's name and return it decorated with a shield."""
    console.write("\n\033[93mBefore your journey begins...\n")
    name = console.read_line("What is your name, brave adventurer?\n> \033[0m")
    return f"{name} {_SHIELD}"


def render_main_menu() -> str:
    """The main menu text."""
    entries = [
        "1. \U0001F6AA Move to another room\n",
        "2. \U0001F392 View Inventory\n",
        "3. \U0001F50D Search Inventory\n",
        "4. \u2694\uFE0F Battle (if monster in room)\n",
        "5. \U0001F4DA Learn a Skill\n",
        "6. \U0001F4DD View Battle Log\n",
    ]
    parts = [paint("\n====== \U0001F31F Escape Game Menu \U0001F31F ======\n", Color.BRIGHT_WHITE)]
    parts.extend(paint(entry, Color.BLOOD_RED) for entry in entries)
    parts.append(paint("7. \U0001F6AA Exit Game\n", Color.BRIGHT_WHITE))
    return "".join(parts)


def display_main_menu(console: Console) -> None:
    """Show the main menu."""
    console.write(render_main_menu())


def get_menu_choice(console: Console) -> int:
    """Ask for a menu number until the player types an integer."""
    prompt = paint("\n\U0001F3AF Enter your choice: ", Color.WARNING_YELL)
    while True:
        try:
            return console.read_int(prompt)
        except ValueError:
            console.write("Invalid choice. Please try again.\n")


def search_inventory(console: Console, inventory: Inventory) -> list[str]:
    """Ask for a pattern, show the matching items and return them.

    Raises re.error for an invalid pattern.
    """
    pattern = console.read_line("\n\U0001F50D Enter a keyword or pattern to search for items: ")
    matches = inventory.search(pattern)
    console.write(inventory.render_search(pattern))
    return matches


def display_exit_message(console: Console) -> None:
    """Say goodbye."""
    console.write(
        "==================================================\n"
        "\U0001F389 Thank you for playing Dungeon Escape Game!\n"
    )