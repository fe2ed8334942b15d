"""Playable characters and their attacks."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TextIO

from combatsim.attack import Attack
from combatsim.dice import Dice

BASIC_DAMAGE = 10
POWERFUL_DAMAGE = 20


class Character(ABC):
    """A fighter with health, a basic attack and a limited powerful attack."""

    def __init__(
        self,
        health: int = 20,
        name: str = "You",
        *,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.health = health
        self.name = name
        self.out = out
        dice = Dice(rng if rng is not None else random.Random(), out)
        self.basic_attack = Attack(BASIC_DAMAGE, name, dice, out)
        self.powerful_attack = Attack(POWERFUL_DAMAGE, name, dice, out)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, health={self.health})"

    def receive_damage(self, damage: int) -> None:
        """Lose ``damage`` points of health."""
        self.health -= damage

    def do_basic_attack(self, enemy: Character) -> None:
        """Strike ``enemy`` with a short sword."""
        print(f"{self.name} tries to do a short sword attack", file=self.out)
        self.basic_attack.execute(enemy)

    @abstractmethod
    def do_powerful_attack(self, enemy: Character) -> None:
        """Use the class's special attack on ``enemy``."""

    def _attempt_powerful(
        self, enemy: Character, action: str, remaining: int, resource: str
    ) -> bool:
        print(f"{self.name} tries to {action}", file=self.out)
        if remaining > 0:
            self.powerful_attack.execute(enemy)
            return True
        print(f"but it's out of {resource}", file=self.out)
        return False


class Bard(Character):
    """Sings at enemies while charisma lasts."""

    def __init__(
        self,
        health: int = 20,
        name: str = "You",
        charisma: int = 5,
        *,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        super().__init__(health, name, rng=rng, out=out)
        self.charisma = charisma

    def do_powerful_attack(self, enemy: Character) -> None:
        if self._attempt_powerful(
            enemy, "sing a deterring song attack", self.charisma, "charisma"
        ):
            self.charisma -= 1


class Knight(Character):
    """Swings a long sword while stamina lasts."""

    def __init__(
        self,
        health: int = 20,
        name: str = "You",
        stamina: int = 5,
        *,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        super().__init__(health, name, rng=rng, out=out)
        self.stamina = stamina

    def do_powerful_attack(self, enemy: Character) -> None:
        if self._attempt_powerful(
            enemy, "do a long sword attack", self.stamina, "stamina"
        ):
            self.stamina -= 1


class Mage(Character):
    """Throws fireballs while mana lasts."""

    def __init__(
        self,
        health: int = 20,
        name: str = "You",
        mana: int = 5,
        *,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        super().__init__(health, name, rng=rng, out=out)
        self.mana = mana

    def do_powerful_attack(self, enemy: Character) -> None:
        if self._attempt_powerful(enemy, "throw a fireball attack", self.mana, "mana"):
            self.mana -= 1


class Ranger(Character):
    """Leaps at enemies while stamina lasts."""

    def __init__(
        self,
        health: int = 20,
        name: str = "You",
        stamina: int = 5,
        *,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        super().__init__(health, name, rng=rng, out=out)
        self.stamina = stamina

    def do_powerful_attack(self, enemy: Character) -> None:
        if self._attempt_powerful(enemy, "throw a leap attack", self.stamina, "stamina"):
            self.stamina -= 1