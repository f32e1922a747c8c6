"""Character data for a fifth-edition character sheet and its JSON form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class Ability(Enum):
    """The six base abilities; the value is the key used in JSON sub-objects."""

    STRENGTH = "Strength"
    DEXTERITY = "Dexterity"
    CONSTITUTION = "Constitution"
    INTELLIGENCE = "Intelligence"
    WISDOM = "Wisdom"
    CHARISMA = "Charisma"

    @property
    def json_key(self) -> str:
        """Top-level key under which the ability score is stored."""
        return self.value.lower()


class Skill(Enum):
    """Skills with the ability each one is based on."""

    ACROBATICS = ("Acrobatics", Ability.DEXTERITY)
    ANIMAL_HANDLING = ("AnimalHandling", Ability.WISDOM)
    ARCANA = ("Arcana", Ability.INTELLIGENCE)
    ATHLETICS = ("Athletics", Ability.STRENGTH)
    DECEPTION = ("Deception", Ability.CHARISMA)
    HISTORY = ("History", Ability.INTELLIGENCE)
    INSIGHT = ("Insight", Ability.WISDOM)
    INTIMIDATION = ("Intimidation", Ability.CHARISMA)
    INVESTIGATION = ("Investigation", Ability.INTELLIGENCE)
    MEDICINE = ("Medicine", Ability.WISDOM)
    NATURE = ("Nature", Ability.INTELLIGENCE)
    PERCEPTION = ("Perception", Ability.WISDOM)
    PERFORMANCE = ("Performance", Ability.CHARISMA)
    PERSUASION = ("Persuasion", Ability.CHARISMA)
    RELIGION = ("Religion", Ability.INTELLIGENCE)
    SLEIGHT_OF_HAND = ("SleightOfHand", Ability.DEXTERITY)
    STEALTH = ("Stealth", Ability.DEXTERITY)
    SURVIVAL = ("Survival", Ability.WISDOM)

    @property
    def key(self) -> str:
        """Key used in JSON sub-objects."""
        return self.value[0]

    @property
    def ability(self) -> Ability:
        """The base ability of the skill."""
        return self.value[1]


ProficiencyTarget = Union[Ability, Skill]


def _target_key(target: ProficiencyTarget) -> str:
    return target.value if isinstance(target, Ability) else target.key


@dataclass
class AbilityScore:
    value: int = 0
    modifier: int = 0


@dataclass
class Speed:
    value: int = 0
    units: str = "фт"


@dataclass
class HitPoints:
    maximum: int = 0
    current: int = 0
    temporary: int = 0


@dataclass
class HitDice:
    current: int = 0
    total: str = "0"


@dataclass
class DeathSaves:
    successes: int = 0
    failures: int = 0


@dataclass
class Attack:
    name: str = ""
    bonus: int = 0
    damage_type: str = ""


_COIN_KEYS = {
    "copper": "CopperPieces",
    "silver": "SilverPieces",
    "electrum": "ElectrumPieces",
    "gold": "GoldPieces",
    "platinum": "PlatinumPieces",
}


@dataclass
class Coins:
    copper: int = 0
    silver: int = 0
    electrum: int = 0
    gold: int = 0
    platinum: int = 0


_TEXT_KEYS = {
    "char_name": "charName",
    "char_class_level": "charClassLevel",
    "char_race": "charRace",
    "char_background": "charBackground",
    "char_alignment": "charAlignment",
    "player_name": "playerName",
    "other_prof_and_languages": "otherProfAndLanguages",
    "other_attacks_spellcasts": "otherAttacksSpellcasts",
    "personal_traits": "personalTraits",
    "ideals": "ideals",
    "bonds": "bonds",
    "flaws": "flaws",
    "equipment": "equipment",
    "features_traits": "featuresTraits",
}

_NUMBER_KEYS = {
    "exp_points": "expPoints",
    "inspiration": "inspiration",
    "prof_bonus": "profBonus",
    "passive_wisdom": "passiveWisdom",
    "armor_class": "armorClass",
    "initiative": "initiative",
}


def _all_targets() -> list[ProficiencyTarget]:
    return [*Ability, *Skill]


@dataclass
class CharacterData:
    """Everything written on one character sheet."""

    char_name: str = "New character"
    char_class_level: str = ""
    char_race: str = ""
    char_background: str = ""
    char_alignment: str = ""
    player_name: str = ""
    exp_points: int = 0
    abilities: dict[Ability, AbilityScore] = field(
        default_factory=lambda: {a: AbilityScore() for a in Ability}
    )
    inspiration: int = 0
    prof_bonus: int = 0
    proficiencies: dict[ProficiencyTarget, bool] = field(
        default_factory=lambda: {t: False for t in _all_targets()}
    )
    saving_throws: dict[Ability, int] = field(
        default_factory=lambda: {a: 0 for a in Ability}
    )
    skills: dict[Skill, int] = field(default_factory=lambda: {s: 0 for s in Skill})
    passive_wisdom: int = 0
    other_prof_and_languages: str = ""
    armor_class: int = 0
    initiative: int = 0
    speed: Speed = field(default_factory=Speed)
    hit_points: HitPoints = field(default_factory=HitPoints)
    hit_dice: HitDice = field(default_factory=HitDice)
    death_saves: DeathSaves = field(default_factory=DeathSaves)
    attacks: list[Attack] = field(default_factory=lambda: [Attack() for _ in range(3)])
    other_attacks_spellcasts: str = ""
    personal_traits: str = ""
    ideals: str = ""
    bonds: str = ""
    flaws: str = ""
    equipment: str = ""
    coins: Coins = field(default_factory=Coins)
    features_traits: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> CharacterData:
        """Build a character from a decoded JSON object.

        Missing or mistyped values fall back to empty strings, zeros and
        ``False``; the speed units are not read and keep their default.
        """
        if not isinstance(obj, Mapping):
            raise TypeError("character JSON must be an object")
        data = cls()
        for attr, key in _TEXT_KEYS.items():
            setattr(data, attr, _str(obj.get(key)))
        for attr, key in _NUMBER_KEYS.items():
            setattr(data, attr, _int(obj.get(key)))

        for ability in Ability:
            sub = _obj(obj.get(ability.json_key))
            data.abilities[ability] = AbilityScore(
                _int(sub.get("Value")), _int(sub.get("Modifier"))
            )

        prof = _obj(obj.get("profBonusSet"))
        for target in _all_targets():
            data.proficiencies[target] = _bool(prof.get(_target_key(target)))

        saves = _obj(obj.get("savingThrows"))
        for ability in Ability:
            data.saving_throws[ability] = _int(saves.get(ability.value))

        skills = _obj(obj.get("skills"))
        for skill in Skill:
            data.skills[skill] = _int(skills.get(skill.key))

        data.speed.value = _int(_obj(obj.get("speed")).get("Value"))

        hp = _obj(obj.get("hitPoints"))
        data.hit_points = HitPoints(
            _int(hp.get("Maximum")), _int(hp.get("Current")), _int(hp.get("Temporary"))
        )

        hd = _obj(obj.get("hitDice"))
        data.hit_dice = HitDice(_int(hd.get("Current")), _str(hd.get("Total")))

        ds = _obj(obj.get("deathSaves"))
        data.death_saves = DeathSaves(_int(ds.get("Successes")), _int(ds.get("Failures")))

        data.attacks = []
        for number in range(1, 4):
            sub = _obj(obj.get(f"attack{number}"))
            data.attacks.append(
                Attack(
                    _str(sub.get("AttackName")),
                    _int(sub.get("AttackBonus")),
                    _str(sub.get("DamageType")),
                )
            )

        coins = _obj(obj.get("coins"))
        data.coins = Coins(**{attr: _int(coins.get(key)) for attr, key in _COIN_KEYS.items()})
        return data

    def to_json(self) -> dict[str, Any]:
        """Return the character as a JSON-ready dictionary."""
        result: dict[str, Any] = {}
        for attr, key in _TEXT_KEYS.items():
            result[key] = getattr(self, attr)
        for attr, key in _NUMBER_KEYS.items():
            result[key] = getattr(self, attr)
        for ability, score in self.abilities.items():
            result[ability.json_key] = {"Value": score.value, "Modifier": score.modifier}
        result["profBonusSet"] = {
            _target_key(t): bool(self.proficiencies.get(t, False)) for t in _all_targets()
        }
        result["savingThrows"] = {a.value: self.saving_throws.get(a, 0) for a in Ability}
        result["skills"] = {s.key: self.skills.get(s, 0) for s in Skill}
        result["speed"] = {"Value": self.speed.value, "Units": self.speed.units}
        result["hitPoints"] = {
            "Maximum": self.hit_points.maximum,
            "Current": self.hit_points.current,
            "Temporary": self.hit_points.temporary,
        }
        result["hitDice"] = {"Current": self.hit_dice.current, "Total": self.hit_dice.total}
        result["deathSaves"] = {
            "Successes": self.death_saves.successes,
            "Failures": self.death_saves.failures,
        }
        for number, attack in enumerate(self.attacks, start=1):
            result[f"attack{number}"] = {
                "AttackName": attack.name,
                "AttackBonus": attack.bonus,
                "DamageType": attack.damage_type,
            }
        result["coins"] = {key: getattr(self.coins, attr) for attr, key in _COIN_KEYS.items()}
        return result


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if _INT_MIN <= value <= _INT_MAX else 0
    if isinstance(value, float) and value.is_integer() and _INT_MIN <= value <= _INT_MAX:
        return int(value)
    return 0


def _bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _obj(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}