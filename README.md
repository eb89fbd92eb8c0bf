# textrpg

A small role-playing game that runs in a terminal. You walk a hero around a
tile map, talk to townsfolk, stumble into goblins in the bushes and finally
face the boss in the deepest room. The game's texts are in Korean.

The screen is drawn with ANSI escape sequences. Keys are read directly from
the terminal: through `msvcrt` on Windows, in raw mode elsewhere.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Playing

```
textrpg
textrpg --seed 42
```

`--seed` fixes the random numbers used for damage, critical hits and bush
encounters, so a session can be repeated.

The game opens on a title menu. Use the up and down arrow keys to move the
cursor and Enter to choose. "새 게임" goes to the field and "게임 종료" quits.

On the field:

- Arrow keys turn the hero to face that way and move one step if the tile is
  free (not a wall, not an NPC, inside the map).
- `z` talks to the character the hero is facing. The nurse (†) restores HP
  and MP fully. Facing the boss (▼) and pressing `z` starts the boss fight.
- `i` opens the inventory. Choose an item with the arrow keys and use it with
  Enter; it is used up. Escape goes back to the field. The hero starts with
  one health potion, which restores 50 HP up to the maximum.
- Stepping onto a portal (回) takes you to the next area.
- Each step into a bush (∗∗) has a one-in-ten chance of meeting a goblin.

In battle the menu offers attack, defend, item and flee. Attack opens the
list of skills the hero knows (a basic attack, plus a "back" entry). After
each of your actions the enemy strikes back with its basic attack. The
battle ends when one side reaches 0 HP or when you flee, and play returns to
the field.

## What the game does not do

- The title menu entries for loading, settings and credits do nothing.
- There is no saving.
- The item shop and skill shop NPCs only show a message; nothing can be
  bought or learned.
- The battle "item" entry only says the bag is empty; items are used from the
  field inventory instead.
- Choosing "defend" sets the hero's defending flag, but the flag is cleared
  just before the enemy attacks, so it does not reduce the damage taken.
- Winning a battle gives no experience, and losing one does not end the game:
  the hero returns to the field with 0 HP until healed.

## Using it as a library

The pieces can be used on their own:

- `textrpg.attributes.AttributeSet` holds a character's stats. Maximum HP is
  base HP plus two per strength, maximum MP is base MP plus five per
  intelligence. `add_experience` levels up as often as the experience covers.
- `textrpg.actors` provides `Player`, `Goblin`, `Boss` and `Direction`. Every
  actor has `ability_system` and the shortcut `attributes`.
- `textrpg.damage` has `calculate_physical_damage`, `calculate_magical_damage`
  and `apply_damage_variance`. Each takes an optional random source such as a
  `random.Random`; without one the `random` module is used.
- `textrpg.abilities.BasicAttack` is the first skill; `textrpg.items` has
  `HealthPotion` and `Inventory`.
- `textrpg.field.Field` loads the five maps (ids 0 to 4). It answers whether a
  tile can be walked on (`is_walkable`), where portals lead (`portal_at`),
  which NPC stands where (`npc_at`) and which tile lies at a spot
  (`tile_type`).
- `textrpg.console.Console` takes an output stream, a key source and a sleep
  function, so screens can be driven without a real terminal.

```python
import random

from textrpg.actors import Goblin, Player
from textrpg.abilities import BasicAttack

hero = Player("용사")
goblin = Goblin()
attack = BasicAttack(random.Random(1))
print(attack.activate(hero, goblin))
```