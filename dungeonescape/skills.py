"""Skills and the binary skill tree the player unlocks them from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Skill:
    """A combat skill with its mana cost and damage."""

    name: str
    icon: str
    mana_cost: int
    damage: int
    unlocked: bool = False

    def describe(self) -> str:
        """One-line summary as shown in the skill tree."""
        text = f"{self.name}{self.icon} (Mana: {self.mana_cost}, Damage: {self.damage})"
        if not self.unlocked:
            text += " [Locked]"
        return text


@dataclass(eq=False)
class SkillNode:
    """A node of the skill tree."""

    skill: Skill
    left: SkillNode | None = None
    right: SkillNode | None = None


class SkillError(Exception):
    """Base class for failures to unlock a skill."""


class SkillNotFoundError(SkillError):
    """The named skill is not in the tree."""


class SkillAlreadyUnlockedError(SkillError):
    """The named skill has already been unlocked."""


class PrerequisiteLockedError(SkillError):
    """The parent of the named skill is still locked."""


class SkillTree:
    """A binary tree of skills; a skill unlocks only after its parent."""

    def __init__(self, root: SkillNode | None = None) -> None:
        self.root = root

    def find(self, name: str) -> SkillNode | None:
        """Return the node holding the named skill, or None."""
        return next((node for node in self.preorder() if node.skill.name == name), None)

    def preorder(self) -> Iterator[SkillNode]:
        """Yield nodes in preorder: node, left subtree, right subtree."""

        def walk(node: SkillNode | None) -> Iterator[SkillNode]:
            if node is None:
                return
            yield node
            yield from walk(node.left)
            yield from walk(node.right)

        return walk(self.root)

    def _parent_of(self, name: str) -> SkillNode | None:
        for node in self.preorder():
            for child in (node.left, node.right):
                if child is not None and child.skill.name == name:
                    return node
        return None

    def is_parent_unlocked(self, name: str) -> bool:
        """True if the named skill has a parent and that parent is unlocked."""
        parent = self._parent_of(name)
        return parent is not None and parent.skill.unlocked

    def unlock(self, name: str) -> Skill:
        """Unlock the named skill and return it.

        Raises SkillNotFoundError, SkillAlreadyUnlockedError or
        PrerequisiteLockedError when it cannot be unlocked.
        """
        target = self.find(name)
        if target is None:
            raise SkillNotFoundError("Skill not found.")
        if target.skill.unlocked:
            raise SkillAlreadyUnlockedError(f"{name} is already unlocked.")
        if target is not self.root and not self.is_parent_unlocked(name):
            raise PrerequisiteLockedError("You must unlock the prerequisite skill first.")
        target.skill.unlocked = True
        return target.skill

    def is_unlocked(self, name: str) -> bool:
        """True if the named skill exists and is unlocked."""
        node = self.find(name)
        return node is not None and node.skill.unlocked

    def render(self) -> str:
        """Draw the tree sideways: right subtree above, left subtree below."""
        lines = ["====================== Skill Tree ======================"]

        def draw(node: SkillNode | None, indent: int) -> None:
            if node is None:
                return
            draw(node.right, indent + 4)
            lines.append(" " * indent + node.skill.describe())
            draw(node.left, indent + 4)

        draw(self.root, 0)
        lines.append("========================================================")
        return "\n".join(lines) + "\n"


def build_default_tree() -> SkillTree:
    """The fire skill tree every player starts with."""
    root = SkillNode(Skill("Fireball", "\U0001F525", 10, 25))
    root.left = SkillNode(Skill("Flame Burst", "\U0001F4A5", 15, 35))
    root.left.left = SkillNode(Skill("Ember Nova", "\u2728", 25, 70))
    root.right = SkillNode(Skill("Inferno", "\U0001F30B", 20, 50))
    root.right.right = SkillNode(Skill("Hellfire", "\U0001F525\U0001F525", 30, 90))
    return SkillTree(root)