"""Monsters and the rooms of the dungeon graph."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Monster:
    """A monster guarding a room."""

    name: str
    hp: int
    attack: int


@dataclass(eq=False)
class Room:
    """A dungeon room; neighbours form an undirected graph."""

    name: str
    description: str
    neighbors: list[Room] = field(default_factory=list)
    monster: Monster | None = None

    def connect(self, other: Room) -> None:
        """Link this room and ``other`` both ways, unless already linked or the same."""
        if other is self:
            return
        if other not in self.neighbors:
            self.neighbors.append(other)
            other.neighbors.append(self)

    def remove_monster(self) -> None:
        """Leave the room without a monster."""
        self.monster = None