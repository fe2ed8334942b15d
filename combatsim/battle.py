"""Turn-based duel between the player and a randomly chosen demon."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import TextIO

from combatsim.character import Bard, Character, Knight, Mage, Ranger

ENEMY_NAME = "Demon"
ENEMY_HEALTH = 20
ENEMY_RESOURCE = 5

_ENEMY_CLASSES = (Bard, Knight, Mage, Ranger)

_TITLE = """
+------------------------------------------+
|             Combat Simulator             |
+------------------------------------------+
"""


def select_enemy(rng: random.Random, out: TextIO | None = None) -> Character:
    """Pick a demon of a random class."""
    cls = _ENEMY_CLASSES[rng.randint(1, len(_ENEMY_CLASSES)) - 1]
    return cls(ENEMY_HEALTH, ENEMY_NAME, ENEMY_RESOURCE, rng=rng, out=out)


def _wants_basic_attack(choice: str) -> bool:
    try:
        return int(choice.strip()) == 1
    except ValueError:
        return False


class Battle:
    """A fight that runs until either side drops to zero health."""

    def __init__(
        self,
        player: Character,
        enemy: Character | None = None,
        *,
        rng: random.Random | None = None,
        out: TextIO | None = None,
        read: Callable[[], str] = input,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.out = out
        self.read = read
        self.player = player
        self.enemy = enemy if enemy is not None else select_enemy(self.rng, out)
        self.turn = 1

    def _say(self, text: str = "") -> None:
        print(text, file=self.out)

    def print_title(self) -> None:
        """Show the game's banner."""
        self._say(_TITLE)

    def start(self) -> bool:
        """Play the fight to the end; return True if the player wins."""
        player, enemy = self.player, self.enemy
        self.print_title()

        while player.health > 0:
            self._say(f"------- Turn {self.turn} -------")
            self._say(f"+ {player.name}'s turn +")
            self._say("Choose attack \n\n 1. Basic attack \n 2. Powerful attack \n")

            if _wants_basic_attack(self.read()):
                player.do_basic_attack(enemy)
            else:
                player.do_powerful_attack(enemy)

            self._say(f"{enemy.name} has {enemy.health}hp")
            if enemy.health <= 0:
                break

            self._say(f"\n+ {enemy.name}'s turn +")
            if self.rng.randint(1, 2) == 1:
                enemy.do_basic_attack(player)
            else:
                enemy.do_powerful_attack(player)

            self._say(f"{player.name} has {player.health}hp")
            self._say("-----------------------\n")
            self.turn += 1

        self._say()
        if player.health > 0:
            self._say(f"{player.name} wins!")
        if enemy.health > 0:
            self._say(f"{player.name} loses!")
        return player.health > 0