"""The player's inventory of collected items."""

from __future__ import annotations

import re
from typing import Iterator

from dungeonescape.console import Color, paint


class Inventory:
    """Items held by the player, newest first until sorted."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def add(self, name: str) -> None:
        """Put an item at the front of the inventory."""
        self._items.insert(0, name)

    def sort(self) -> None:
        """Sort items alphabetically."""
        self._items.sort()

    def search(self, pattern: str) -> list[str]:
        """Items whose names match the regular expression, ignoring case.

        Raises re.error for an invalid pattern.
        """
        regex = re.compile(pattern, re.IGNORECASE)
        return [item for item in self._items if regex.search(item)]

    def render(self) -> str:
        """The inventory listing as shown to the player."""
        parts = [
            "\n====================================\n",
            paint("         Your Inventory\n", Color.WARNING_YELL),
            "====================================\n",
        ]
        parts.extend(f"- {item}\n" for item in self._items)
        return "".join(parts)

    def render_search(self, pattern: str) -> str:
        """The result of a search as shown to the player."""
        matches = self.search(pattern)
        lines = ["\nMatching items:\n"]
        if matches:
            lines.extend(f"- {item}\n" for item in matches)
        else:
            lines.append("No items matched your search.\n")
        return "".join(lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)