"""The dungeon, the main game loop and the command that starts it."""

from __future__ import annotations

import re
import sys

from dungeonescape import ui
from dungeonescape.console import Color, Console, paint
from dungeonescape.inventory import Inventory
from dungeonescape.player import Player
from dungeonescape.world import Monster, Room

_RULE = "==================================================\n"

_INTRO = (
    paint(
        "\U0001F6CC You wake up in a dark, cold dungeon with no memory of how you got here.",
        Color.BLOOD_RED,
    ),
    paint(
        "\U0001F9F1 The stone walls are damp, and the air smells of rust and decay.",
        Color.WARNING_YELL,
    ),
    paint(
        "\U0001F47B Whispers echo through the stone halls... are they real, or just in your mind?",
        Color.BLOOD_RED,
    ),
    paint(
        "\U0001F463 You hear distant footsteps... and realize you are not alone.",
        Color.WARNING_YELL,
    ),
    paint(
        "\U0001F513 Somewhere ahead lies your only chance at escape - if you can survive.",
        Color.BLOOD_RED,
    ),
)

ENTRANCE = "Entrance"
INVENTORY_ROOM = "Inventory Room"
GOBLIN_LAIR = "Monster Lair 1"
ORC_LAIR = "Monster Lair 2"
EXIT = "Exit"

_KEY_ICON = "\U0001F5DD\uFE0F"


class Game:
    """The dungeon map, the player's position in it and the main menu loop."""

    def __init__(self, player: Player, console: Console | None = None) -> None:
        self.player = player
        self.console = console if console is not None else Console()
        self.rooms: dict[str, Room] = {}
        self.current_room: Room = self._create_dungeon()

    def _create_dungeon(self) -> Room:
        entrance = Room(ENTRANCE, "You are at the entrance of the dungeon.\n")
        storage = Room(INVENTORY_ROOM, "You are in a dusty storage room filled with old supplies.\n")
        goblin_lair = Room(GOBLIN_LAIR, "You are in the lair of a fearsome goblin.\n")
        orc_lair = Room(ORC_LAIR, "You are in the lair of a brutal orc.\n")
        exit_room = Room(EXIT, "You have reached the final door out of the dungeon.\n")

        entrance.connect(storage)
        storage.connect(goblin_lair)
        goblin_lair.connect(entrance)
        goblin_lair.connect(storage)

        self.rooms = {
            room.name: room for room in (entrance, storage, goblin_lair, orc_lair, exit_room)
        }

        goblin_lair.monster = Monster("Goblin \U0001F47A", 100, 15)
        orc_lair.monster = Monster("Orc \U0001F479", 200, 30)
        return entrance

    def tell_intro(self) -> None:
        """Show the title and the backstory one line at a time."""
        self.console.write(
            "=============================\n"
            "  \U0001F3F0 DUNGEON ESCAPE GAME \U0001F3F0\n"
            "=============================\n\n"
        )
        for line in _INTRO:
            self.console.wait_for_enter(line)

    def _neighbor_list(self) -> str:
        return "".join(
            f"{number}. {room.name}\n"
            for number, room in enumerate(self.current_room.neighbors, 1)
        )

    def display_current_room(self) -> None:
        """Show the current room, its monster and its neighbours."""
        room = self.current_room
        parts = [_RULE, room.description + "\n"]
        if room.monster is not None:
            parts.append(f"A {room.monster.name} is here!\n")
            parts.append(f"Monster HP: {room.monster.hp}, Attack: {room.monster.attack}\n")
        if room.neighbors:
            parts.append(paint("Neighboring rooms:", Color.WARNING_YELL) + "\n")
            parts.append(self._neighbor_list())
            parts.append(_RULE)
        else:
            parts.append("There are no neighboring rooms.\n")
        self.console.write("".join(parts))

    def move_player(self) -> bool:
        """Let the player pick a neighbouring room; True if they moved."""
        neighbors = self.current_room.neighbors
        if not neighbors:
            self.console.write("There are no neighboring rooms to move to.\n")
            return False

        self.console.write("\U0001F6AA Neighboring rooms:\n" + _RULE + self._neighbor_list())
        try:
            choice = self.console.read_int("Enter the number of the room you want to move to: ")
        except ValueError:
            choice = 0
        if not 1 <= choice <= len(neighbors):
            self.console.write("Invalid choice. Please try again.\n")
            return False

        self.current_room = neighbors[choice - 1]
        self.console.write(f"You moved to: {self.current_room.name}\n")
        return True

    def end_game(self) -> None:
        """Announce that the player lost the battle."""
        self.console.write("\U0001F480 GAME OVER! \U0001F480\n")

    def handle_battle(self, inventory: Inventory) -> bool:
        """Fight the monster in the current room; True if it was defeated."""
        room = self.current_room
        if room.monster is None:
            self.console.write("There is no monster to battle in this room.\n")
            return False

        if not self.player.battle(room.monster):
            self.end_game()
            return False

        room.remove_monster()
        if room.name == GOBLIN_LAIR:
            orc_lair = self.rooms[ORC_LAIR]
            room.connect(orc_lair)
            orc_lair.connect(self.rooms[ENTRANCE])
            orc_lair.connect(self.rooms[INVENTORY_ROOM])
            inventory.add("Goblin Key")
            self.console.write(
                paint(f"\n{_KEY_ICON} You have acquired the Goblin Key!", Color.GREEN) + "\n"
            )
        elif room.name == ORC_LAIR:
            room.connect(self.rooms[ENTRANCE])
            room.connect(self.rooms[INVENTORY_ROOM])
            room.connect(self.rooms[EXIT])
            inventory.add("Orc Key")
            self.console.write(
                paint(
                    f"\n{_KEY_ICON} The Orc Key is hidden in the final room of the dungeon!",
                    Color.GREEN,
                )
                + "\n"
            )
        return True

    def start(self, inventory: Inventory) -> None:
        """Run the main menu until the player chooses to exit."""
        while True:
            ui.display_main_menu(self.console)
            choice = ui.get_menu_choice(self.console)

            if choice == 1:
                self.move_player()
                self.display_current_room()
            elif choice == 2:
                inventory.sort()
                self.console.write(inventory.render())
            elif choice == 3:
                try:
                    ui.search_inventory(self.console, inventory)
                except re.error:
                    self.console.write("Invalid search pattern.\n")
            elif choice == 4:
                self.handle_battle(inventory)
            elif choice == 5:
                self.player.learn_skill()
            elif choice == 6:
                self.player.print_battle_log()
            elif choice == 7:
                if self.rooms[ORC_LAIR].monster is None:
                    self.console.write(
                        paint(
                            "\nYou used the Goblin and Orc Keys to escape the Dungeon!",
                            Color.BLUE,
                        )
                        + "\n"
                    )
                ui.display_exit_message(self.console)
                return
            else:
                self.console.write("Invalid choice. Please try again.\n")


def main(argv: list[str] | None = None) -> int:
    """Start the game on the terminal."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8")

    console = Console()
    try:
        name = ui.ask_player_name(console)
        player = Player(name, console)
        game = Game(player, console)
        game.tell_intro()
        inventory = Inventory()

        game.display_current_room()
        console.write("\n")

        player.unlock_skill("Fireball")
        inventory.add("Healing Amulet")
        console.write(
            paint(
                "\nYou have acquired a Healing Amulet!\nMay it bring you luck on your journey...",
                Color.GREEN,
            )
            + "\n"
        )
        game.start(inventory)
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())