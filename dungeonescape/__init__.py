"""A text-mode dungeon escape role-playing game: rooms, monsters, skills and an inventory."""

__version__ = "1.0.0"
__all__ = ["console", "skills", "world", "inventory", "player", "ui", "game"]