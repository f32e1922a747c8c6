"""Proficiency bonus handling for saving throws and skills."""

from __future__ import annotations

from dndsheet.character import Ability, CharacterData, ProficiencyTarget, Skill


def _check_target(target: object) -> None:
    if not isinstance(target, (Ability, Skill)):
        raise TypeError(f"not an ability or skill: {target!r}")


def _bonus_of(data: CharacterData, target: ProficiencyTarget) -> int:
    if isinstance(target, Ability):
        return data.saving_throws[target]
    return data.skills[target]


def _set_bonus(data: CharacterData, target: ProficiencyTarget, value: int) -> None:
    if isinstance(target, Ability):
        data.saving_throws[target] = value
    else:
        data.skills[target] = value


def proficient_targets(data: CharacterData) -> list[ProficiencyTarget]:
    """Saving throws and skills marked as proficient, abilities first."""
    return [
        target
        for target in (*Ability, *Skill)
        if data.proficiencies.get(target, False)
    ]


def toggle_proficiency(
    data: CharacterData, target: ProficiencyTarget, checked: bool
) -> int:
    """Mark or unmark proficiency in a saving throw or skill.

    Marking adds the current proficiency bonus to the value, unmarking
    subtracts it. Returns the new value of the saving throw or skill.
    """
    _check_target(target)
    current = _bonus_of(data, target)
    new_value = current + data.prof_bonus if checked else current - data.prof_bonus
    _set_bonus(data, target, new_value)
    data.proficiencies[target] = bool(checked)
    return new_value


def change_prof_bonus(data: CharacterData, value: int) -> list[ProficiencyTarget]:
    """Set a new proficiency bonus and adjust every proficient value.

    Each proficient saving throw and skill loses the old bonus and gains the
    new one. Setting the bonus it already has changes nothing. Returns the
    adjusted targets.
    """
    if value == data.prof_bonus:
        return []
    adjusted = proficient_targets(data)
    for target in adjusted:
        _set_bonus(data, target, _bonus_of(data, target) - data.prof_bonus + value)
    data.prof_bonus = value
    return adjusted