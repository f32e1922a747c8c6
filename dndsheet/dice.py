"""Polyhedral dice rolls."""

from __future__ import annotations

import random
from enum import Enum


class Die(Enum):
    """A die; the value is its title."""

    D4 = "d4"
    D6 = "d6"
    D8 = "d8"
    D10 = "d10"
    D12 = "d12"
    D20 = "d20"
    D100 = "d100"

    @property
    def title(self) -> str:
        return self.value

    @property
    def sides(self) -> int:
        return int(self.value[1:])


_ACTIONS = {f"actionD{die.sides}": die for die in Die}


def die_from_action(name: str) -> Die:
    """Return the die named by a menu action such as ``actionD20``."""
    try:
        return _ACTIONS[name]
    except KeyError:
        raise ValueError(f"unknown dice action: {name!r}") from None


def roll(die: Die, rng: random.Random | None = None) -> int:
    """Roll a die.

    A d100 gives a multiple of ten from 10 to 90; other dice give
    1 up to their number of sides.
    """
    source = rng if rng is not None else random.Random()
    if die is Die.D100:
        return 10 * source.randint(1, 9)
    return source.randint(1, die.sides)