"""The player: stats, learned skills, battles and the battle log."""

from __future__ import annotations

from dungeonescape.console import Color, Console, paint
from dungeonescape.skills import SkillNode, build_default_tree
from dungeonescape.world import Monster

_FULL_HP = 100
_FULL_MANA = 100
_MANA_PER_LEVEL = 20
_RESPAWN_HP = {"Goblin": 100, "Orc": 200}


class Player:
    """A hero with hit points, mana, a skill tree and a log of battle actions."""

    def __init__(self, name: str = "Unknown Player", console: Console | None = None) -> None:
        self.name = name
        self.console = console if console is not None else Console()
        self.level = 1
        self.hp = _FULL_HP
        self.mana = _FULL_MANA
        self.skill_tree = build_default_tree()
        self.learned_skills: list[str] = []
        self._battle_log: list[str] = []

    def level_up(self) -> None:
        """Raise the level by one and grant extra mana."""
        self.level += 1
        self.mana += _MANA_PER_LEVEL
        self.console.write(f"{self.name} leveled up to Level {self.level}!\n")

    def unlock_skill(self, name: str) -> None:
        """Unlock the named skill and add it to the learned skills.

        Raises a SkillError when the skill cannot be unlocked.
        """
        skill = self.skill_tree.unlock(name)
        self.learned_skills.append(name)
        self.console.write(
            paint("You have unlocked the skill: ", Color.GREEN)
            + paint(skill.name, Color.BLOOD_RED)
            + "!\n\n"
        )

    def render_stats(self) -> str:
        """The player's level, mana and skill tree as text."""
        return (
            f"=== {self.name}'s Stats ===\n"
            f"Level: {self.level}\n"
            f"Mana: {self.mana}\n" + self.skill_tree.render()
        )

    def can_use_skill(self, name: str) -> bool:
        """True if the named skill is unlocked."""
        return self.skill_tree.is_unlocked(name)

    def use_skill(self, name: str, monster: Monster) -> bool:
        """Cast the named skill on ``monster``; return True if it was cast."""
        if not self.can_use_skill(name):
            self.console.write(f"Skill {name} is not unlocked yet.\n")
            return False
        node = self.skill_tree.find(name)
        if node is None:
            self.console.write(f"Skill {name} not found in the skill tree.\n")
            return False
        skill = node.skill
        if self.mana < skill.mana_cost:
            self.console.write(f"Not enough mana to use {name}.\n")
            return False

        self.mana -= skill.mana_cost
        self.console.write(
            f"\n{self.name} used {name}!\n"
            f"Mana cost: {skill.mana_cost}, Remaining mana: {self.mana}\n\n"
        )
        monster.hp -= skill.damage
        self.console.write(f"Dealt {skill.damage} damage to {monster.name}!\n\n")
        self.log_battle_action(
            f"{self.name} used {name} and dealt {skill.damage} damage to {monster.name}."
        )
        return True

    def learn_skill(self) -> bool:
        """Offer locked skills in preorder until one is accepted; True if one was."""
        return self._offer(self.skill_tree.root)

    def _offer(self, node: SkillNode | None) -> bool:
        if node is None:
            return False
        self.console.clear()

        skill = node.skill
        if not skill.unlocked:
            self.console.write(self.skill_tree.render() + "\n")
            if node is not self.skill_tree.root and not self.skill_tree.is_parent_unlocked(skill.name):
                self.console.write("You must unlock the prerequisite skill first.\n")
                return False

            self.console.write(
                f"Available Skill: {skill.name}\n"
                f"  Mana Cost: {skill.mana_cost}, Damage: {skill.damage}\n"
            )
            choice = self.console.read_char("  Unlock this skill? (y/n): ")
            self.console.write("\n")
            if choice in ("y", "Y"):
                self.unlock_skill(skill.name)
                self.console.write(f"Skill unlocked: {skill.name}\n\n")
                return True
            self.console.write("Skill not unlocked.\n")

        return self._offer(node.left) or self._offer(node.right)

    def log_battle_action(self, action: str) -> None:
        """Record an action in the battle log."""
        self._battle_log.append(action)

    def battle_log(self) -> list[str]:
        """Logged actions, most recent first."""
        return list(reversed(self._battle_log))

    def print_battle_log(self) -> None:
        """Show the battle log, most recent action first."""
        lines = ["=== Battle Log ===\n"]
        lines.extend(f"{entry}\n" for entry in self.battle_log())
        self.console.write("".join(lines))

    def _restore(self) -> None:
        self.hp = _FULL_HP
        self.mana = _FULL_MANA

    def _choose_skill(self) -> int | None:
        try:
            return self.console.read_int("Enter the number of the skill to use: ")
        except ValueError:
            return None

    def battle(self, monster: Monster | None) -> bool:
        """Fight ``monster`` turn by turn; True if it was defeated."""
        if monster is None:
            self.console.write("There is no monster here to battle.\n")
            return False

        self.console.write(f"A battle begins between {self.name} and {monster.name}!\n")

        while self.hp > 0 and monster.hp > 0:
            lines = [
                f"\n=== {self.name}'s Turn ===\n",
                f"HP: {self.hp}, Mana: {self.mana}\n",
                "Available Skills:\n",
            ]
            for number, skill_name in enumerate(self.learned_skills, 1):
                node = self.skill_tree.find(skill_name)
                if node is not None:
                    lines.append(f"{number}. {node.skill.icon} {node.skill.name}\n")
            self.console.write("".join(lines))

            choice = self._choose_skill()
            if choice is None or not 1 <= choice <= len(self.learned_skills):
                self.console.write("Invalid choice. Skipping turn.\n")
            else:
                chosen = self.learned_skills[choice - 1]
                if self.can_use_skill(chosen):
                    self.use_skill(chosen, monster)
                else:
                    self.console.write("Invalid skill or not enough mana. Skipping turn.\n")

            if monster.hp <= 0:
                self.console.write(
                    f"{monster.name} has been defeated!\n"
                    "Your stats were replenished by Healing Amulet!\n"
                )
                self.log_battle_action(f"{monster.name} was defeated!")
                self._restore()
                return True

            self.hp -= monster.attack
            self.console.write(
                f"\n=== {monster.name}'s Turn ===\n"
                f"{monster.name} attacks {self.name} for {monster.attack} damage!\n"
            )
            self.log_battle_action(f"{monster.name} dealt {monster.attack} damage to {self.name}")

            if self.hp <= 0:
                self.console.write(f"{self.name} has been defeated!\n")
                self.log_battle_action(f"{self.name} was defeated!")
                self._restore()
                monster.hp = _RESPAWN_HP.get(monster.name, monster.hp)
                return False
        return False