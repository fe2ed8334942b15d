"""Command line entry point: pick a class and a name, then fight."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator
from typing import TextIO

from combatsim.battle import Battle
from combatsim.character import Bard, Character, Knight, Mage, Ranger

MENU = "Choose a Character! \n\n 1. Bard \n 2. Knight \n 3. Mage \n 4. Ranger \n"

# selection -> (class, health, resource)
_ROSTER: dict[int, tuple[type[Character], int, int]] = {
    1: (Bard, 30, 3),
    2: (Knight, 25, 4),
    3: (Mage, 15, 8),
    4: (Ranger, 20, 5),
}


def make_character(
    selection: int,
    name: str,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> Character:
    """Build the player's character for a menu selection from 1 to 4."""
    try:
        cls, health, resource = _ROSTER[selection]
    except KeyError:
        raise ValueError(f"no character for selection {selection!r}") from None
    return cls(health, name, resource, rng=rng, out=out)


class _TokenReader:
    """Hands out whitespace-separated words from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = self._split(stream)

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def __call__(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("no more input") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="combatsim", description="Fight a demon.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    read = _TokenReader(sys.stdin)

    try:
        print(MENU)
        selection_text = read()
        print()
        print("Choose a name: ", end="")
        name = read()
        print()
        try:
            player = make_character(int(selection_text), name, rng)
        except ValueError as exc:
            print(f"combatsim: {exc}", file=sys.stderr)
            return 2
        Battle(player, rng=rng, read=read).start()
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())