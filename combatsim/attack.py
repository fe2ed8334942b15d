"""Attacks resolved with a d20."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, TextIO

from combatsim.dice import SIDES, Dice

SUCCESS_THRESHOLD = 10


class Target(Protocol):
    """Anything that has health and can take damage."""

    health: int

    def receive_damage(self, damage: int) -> None:
        ...


@dataclass
class Attack:
    """An attack of a given strength made by a named attacker."""

    base_damage: int = 10
    attacker: str = "You"
    dice: Dice = field(default_factory=Dice)
    out: TextIO | None = None

    def calculate_damage(self) -> int:
        """Roll to hit, then roll for how much of the base damage lands."""
        if self.dice.throw_once() > SUCCESS_THRESHOLD:
            print(f"{self.attacker} got a successful attack ", file=self.out)
            damage = self.base_damage * self.dice.throw_once() // SIDES
            print(f"and did {damage} damage!", file=self.out)
            return damage
        print(f"{self.attacker} failed!", file=self.out)
        return 0

    def execute(self, enemy: Target) -> None:
        """Damage ``enemy``, never leaving its health below zero."""
        enemy.receive_damage(self.calculate_damage())
        enemy.health = max(enemy.health, 0)