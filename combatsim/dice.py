"""A twenty-sided die that announces every roll."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TextIO

SIDES = 20


@dataclass
class Dice:
    """A d20 drawing from ``rng`` and reporting each result to ``out``."""

    rng: random.Random = field(default_factory=random.Random)
    out: TextIO | None = None

    def throw_once(self) -> int:
        """Roll once and return a value between 1 and 20."""
        result = self.rng.randint(1, SIDES)
        print(f"Rolled a {result}!", file=self.out)
        return result