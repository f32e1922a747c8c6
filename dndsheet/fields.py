"""Editable sheet fields and how typed text is stored in character data."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from dndsheet.character import Ability, CharacterData

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int:
    """Parse a decimal 32-bit integer, allowing surrounding whitespace.

    Raises ``ValueError`` when the text is not such a number.
    """
    stripped = text.strip()
    if not _INT_PATTERN.fullmatch(stripped):
        raise ValueError(f"not an integer: {text!r}")
    value = int(stripped)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def signed_prefix(value: int) -> str:
    """Prefix shown before a bonus: ``+`` for positive values, nothing otherwise."""
    return "+" if value > 0 else ""


def _owner(data: CharacterData, path: tuple[Any, ...]) -> Any:
    target: Any = data
    for part in path[:-1]:
        target = getattr(target, part) if isinstance(part, str) else target[part]
    return target


def _read(data: CharacterData, path: tuple[Any, ...]) -> Any:
    owner = _owner(data, path)
    last = path[-1]
    return getattr(owner, last) if isinstance(last, str) else owner[last]


def _write(data: CharacterData, path: tuple[Any, ...], value: Any) -> None:
    owner = _owner(data, path)
    last = path[-1]
    if isinstance(last, str):
        setattr(owner, last, value)
    else:
        owner[last] = value


class TextField(Enum):
    """Free-text fields of the sheet other than the character name."""

    CLASS_LEVEL = ("char_class_level",)
    RACE = ("char_race",)
    BACKGROUND = ("char_background",)
    ALIGNMENT = ("char_alignment",)
    PLAYER_NAME = ("player_name",)
    HIT_DICE_TOTAL = ("hit_dice", "total")
    ATTACK1_NAME = ("attacks", 0, "name")
    ATTACK2_NAME = ("attacks", 1, "name")
    ATTACK3_NAME = ("attacks", 2, "name")
    ATTACK1_DAMAGE_TYPE = ("attacks", 0, "damage_type")
    ATTACK2_DAMAGE_TYPE = ("attacks", 1, "damage_type")
    ATTACK3_DAMAGE_TYPE = ("attacks", 2, "damage_type")
    OTHER_PROF_AND_LANGUAGES = ("other_prof_and_languages",)
    OTHER_ATTACKS_SPELLCASTS = ("other_attacks_spellcasts",)
    EQUIPMENT = ("equipment",)
    PERSONAL_TRAITS = ("personal_traits",)
    IDEALS = ("ideals",)
    BONDS = ("bonds",)
    FLAWS = ("flaws",)
    FEATURES_TRAITS = ("features_traits",)

    def value_of(self, data: CharacterData) -> str:
        """The text currently stored for this field."""
        return _read(data, self.value)

    def store(self, data: CharacterData, text: str) -> None:
        """Store text in this field."""
        _write(data, self.value, text)


class NumberField(Enum):
    """Whole-number fields of the sheet that hold a plain value."""

    EXP_POINTS = ("exp_points",)
    INSPIRATION = ("inspiration",)
    PASSIVE_WISDOM = ("passive_wisdom",)
    STRENGTH = ("abilities", Ability.STRENGTH, "value")
    DEXTERITY = ("abilities", Ability.DEXTERITY, "value")
    CONSTITUTION = ("abilities", Ability.CONSTITUTION, "value")
    INTELLIGENCE = ("abilities", Ability.INTELLIGENCE, "value")
    WISDOM = ("abilities", Ability.WISDOM, "value")
    CHARISMA = ("abilities", Ability.CHARISMA, "value")
    HIT_POINTS_MAX = ("hit_points", "maximum")
    HIT_POINTS_CURRENT = ("hit_points", "current")
    HIT_POINTS_TEMPORARY = ("hit_points", "temporary")
    HIT_DICE_CURRENT = ("hit_dice", "current")
    ARMOR_CLASS = ("armor_class",)
    INITIATIVE = ("initiative",)
    SPEED = ("speed", "value")
    COPPER = ("coins", "copper")
    SILVER = ("coins", "silver")
    ELECTRUM = ("coins", "electrum")
    GOLD = ("coins", "gold")
    PLATINUM = ("coins", "platinum")

    def value_of(self, data: CharacterData) -> int:
        """The number currently stored for this field."""
        return _read(data, self.value)

    def store(self, data: CharacterData, value: int) -> None:
        """Store a number in this field."""
        _write(data, self.value, value)


def apply_name(data: CharacterData, text: str) -> bool:
    """Store a new character name unless it is empty.

    Returns whether the name was stored.
    """
    if text == "":
        return False
    data.char_name = text
    return True


def apply_text(data: CharacterData, field: TextField, text: str) -> None:
    """Store edited text in a text field."""
    field.store(data, text)


def apply_number_text(data: CharacterData, field: NumberField, text: str) -> int:
    """Store the number typed into a field; text that is not a number stores 0.

    Returns the stored value.
    """
    try:
        value = parse_int(text)
    except ValueError:
        value = 0
    field.store(data, value)
    return value