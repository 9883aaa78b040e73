# dungeonescape

A short text-mode role-playing game played in the terminal. You wake up in a
dark dungeon and have to fight your way out: move between connected rooms,
defeat the goblin and the orc guarding the lairs, learn fire skills from a
skill tree, and collect the keys that open the way out.

## Installing

```
pip install .
```

## Playing

```
dungeonescape
```

The game first asks for your name, tells the backstory one line at a time
(press ENTER to continue), shows the entrance room and then the main menu:

1. Move to another room
2. View inventory (sorted alphabetically)
3. Search inventory with a case-insensitive regular expression
4. Battle the monster in the current room
5. Learn a skill from the skill tree
6. View the battle log, newest entry first
7. Exit the game

You start with the **Fireball** skill and a **Healing Amulet**. After a
battle, won or lost, your HP and mana are restored to 100. In battle you pick
one of your learned skills by number each turn; anything else skips your turn.
Defeating the goblin in "Monster Lair 1" gives you the Goblin Key and opens the
way to "Monster Lair 2"; defeating the orc there gives you the Orc Key and
connects that lair to the exit. Ending the input (Ctrl-D) or pressing Ctrl-C
leaves the game.

### Skills

Skills form a tree rooted at Fireball. A skill can only be learned once the
skill above it has been unlocked:

| Skill        | Mana | Damage | Requires    |
|--------------|------|--------|-------------|
| Fireball     | 10   | 25     | —           |
| Flame Burst  | 15   | 35     | Fireball    |
| Ember Nova   | 25   | 70     | Flame Burst |
| Inferno      | 20   | 50     | Fireball    |
| Hellfire     | 30   | 90     | Inferno     |

## Using the pieces in code

The modules can be used on their own:

- `dungeonescape.skills` — `Skill`, `SkillNode`, `SkillTree` and
  `build_default_tree()`. `SkillTree.unlock()` raises `SkillNotFoundError`,
  `SkillAlreadyUnlockedError` or `PrerequisiteLockedError` (all subclasses of
  `SkillError`).
- `dungeonescape.world` — `Monster` and `Room`; `Room.connect()` links two
  rooms both ways.
- `dungeonescape.inventory` — `Inventory`, with `add()`, `sort()`,
  `search()` (raises `re.error` for a bad pattern), `render()` and
  `render_search()`.
- `dungeonescape.player` — `Player`, with skills, `battle()` and the battle log.
- `dungeonescape.ui` — the menu and prompts.
- `dungeonescape.game` — `Game`, the dungeon and main loop, and `main()`.
- `dungeonescape.console` — `Color`, `paint()` and `Console`.

```python
from dungeonescape.skills import build_default_tree
from dungeonescape.inventory import Inventory

tree = build_default_tree()
tree.unlock("Fireball")
print(tree.is_unlocked("Fireball"))   # True
print(tree.render())

bag = Inventory()
bag.add("Healing Amulet")
bag.add("Goblin Key")
print(bag.search("key"))              # ['Goblin Key']
```

All terminal input and output goes through `dungeonescape.console.Console`,
which takes any pair of text streams. That lets you script a whole game
session from an `io.StringIO`:

```python
import io
from dungeonescape.console import Console
from dungeonescape.game import Game
from dungeonescape.inventory import Inventory
from dungeonescape.player import Player

out = io.StringIO()
console = Console(io.StringIO("7\n"), out)
game = Game(Player("Hero", console), console)
game.start(Inventory())
print(out.getvalue())
```

## What it does not do

The game keeps everything in memory: there is no saving or loading of a game,
no settings, and the dungeon layout is fixed.

## Running the tests

```
pip install ".[test]"
pytest
```