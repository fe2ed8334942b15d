# combatsim

A small turn-based combat game for the terminal. You choose a hero, give
it a name, and fight a randomly chosen Demon until one of you falls.

## Installing

    pip install .

## Playing

    combatsim

Pass `--seed N` to make the dice repeatable:

    combatsim --seed 42

Input is read from standard input as whitespace-separated words. You are
first asked to choose a character:

1. **Bard**: 30 hp, 3 charges of charisma for a deterring song
2. **Knight**: 25 hp, 4 charges of stamina for a long sword attack
3. **Mage**: 15 hp, 8 charges of mana for a fireball
4. **Ranger**: 20 hp, 5 charges of stamina for a leap attack

Then you enter a name, which is a single word. The Demon is one of the
same four classes, chosen at random, with 20 hp and 5 charges.

Each turn you pick one of two attacks:

- **1. Basic attack**: base damage 10. It never runs out.
- **2. Powerful attack**: base damage 20. Each use spends one charge.
  When the charges are gone, the attack does nothing.

Any answer other than `1` counts as the powerful attack.

Every attack rolls a twenty-sided die, and every roll is printed. A roll
above 10 hits. A second roll then sets the damage: the base damage times
the roll, divided by 20 and rounded down. A roll of 10 or less misses.
Health never drops below zero. The Demon picks between its two attacks at
random.

The command exits with status 0 when the fight is over, 2 if the
character selection is not a number from 1 to 4, and 1 if input runs out
before the fight ends.

## Using it as a library

```python
import random

from combatsim.battle import Battle
from combatsim.cli import make_character
from combatsim.character import Knight, Mage

rng = random.Random(7)

# An interactive fight that reads attack choices with input()
hero = make_character(2, "Aria", rng)
won = Battle(hero, rng=rng).start()

# A scripted fight against a chosen enemy
hero = Mage(15, "Aria", 8, rng=rng)
foe = Knight(20, "Demon", 5, rng=rng)
choices = iter(["2"] * 100)
won = Battle(hero, foe, rng=rng, read=lambda: next(choices)).start()
```

- `combatsim.character` has the abstract `Character` and its subclasses
  `Bard`, `Knight`, `Mage` and `Ranger`. Each takes health, a name and its
  number of charges, plus keyword-only `rng` (a `random.Random`) and `out`
  (a text stream for messages; standard output when not given). Fighters
  can be set against each other directly with `do_basic_attack` and
  `do_powerful_attack`; `receive_damage` lowers `health`.
- `combatsim.battle.Battle` runs a fight. Without an `enemy` it calls
  `select_enemy` to pick a random Demon. `read` is called once per turn to
  get the player's choice. `start()` prints the title and every turn, and
  returns `True` if the player wins.
- `combatsim.cli.make_character(selection, name, rng=None, out=None)`
  builds the hero for a menu number from 1 to 4 and raises `ValueError`
  for anything else.
- `combatsim.attack.Attack` and `combatsim.dice.Dice` are the attack and
  the d20 behind every strike.

## Running the tests

    pip install .[test]
    pytest