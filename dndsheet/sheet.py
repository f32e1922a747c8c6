"""An editable character sheet bound to one character's data."""

from __future__ import annotations

from dndsheet.character import Ability, CharacterData, ProficiencyTarget, Skill
from dndsheet.fields import (
    NumberField,
    TextField,
    apply_name,
    apply_number_text,
    apply_text,
    signed_prefix,
)
from dndsheet.proficiency import change_prof_bonus, toggle_proficiency

PAGE_COUNT = 3
DEATH_SAVE_SLOTS = 3


class CharacterSheet:
    """Edits made on a sheet, applied to the character data it shows.

    Setters for signed bonuses return the prefix the sheet shows before
    the value ("+" for positive values).
    """

    def __init__(self, data: CharacterData) -> None:
        self.data = data
        self.page = 0
        self.page_count = PAGE_COUNT

    @property
    def speed_suffix(self) -> str:
        """Suffix shown after the speed value."""
        return " " + self.data.speed.units

    def set_name(self, text: str) -> bool:
        """Rename the character; an empty name is ignored.

        Returns whether the name changed, meaning the tab title needs updating.
        """
        return apply_name(self.data, text)

    def set_text(self, field: TextField, text: str) -> None:
        """Store finished text in a text field."""
        apply_text(self.data, field, text)

    def set_number_text(self, field: NumberField, text: str) -> int:
        """Store typed text as a number, 0 if it is not one; returns the value."""
        return apply_number_text(self.data, field, text)

    def set_modifier(self, ability: Ability, value: int) -> str:
        """Set an ability modifier."""
        _require(ability, Ability)
        self.data.abilities[ability].modifier = value
        return signed_prefix(value)

    def set_saving_throw(self, ability: Ability, value: int) -> str:
        """Set a saving throw bonus."""
        _require(ability, Ability)
        self.data.saving_throws[ability] = value
        return signed_prefix(value)

    def set_skill(self, skill: Skill, value: int) -> str:
        """Set a skill bonus."""
        _require(skill, Skill)
        self.data.skills[skill] = value
        return signed_prefix(value)

    def set_attack_bonus(self, number: int, value: int) -> str:
        """Set the bonus of attack 1, 2 or 3."""
        if not 1 <= number <= len(self.data.attacks):
            raise ValueError(f"no attack number {number}")
        self.data.attacks[number - 1].bonus = value
        return signed_prefix(value)

    def set_prof_bonus(self, value: int) -> list[ProficiencyTarget]:
        """Change the proficiency bonus; returns the adjusted throws and skills."""
        return change_prof_bonus(self.data, value)

    def set_proficiency(self, target: ProficiencyTarget, checked: bool) -> int:
        """Mark or unmark proficiency; returns the new bonus of the target."""
        return toggle_proficiency(self.data, target, checked)

    def mark_death_save(self, success: bool, checked: bool) -> int:
        """Check or uncheck one death save mark; returns the new count."""
        saves = self.data.death_saves
        current = saves.successes if success else saves.failures
        new_count = current + 1 if checked else current - 1
        if not 0 <= new_count <= DEATH_SAVE_SLOTS:
            raise ValueError(f"death save count out of range: {new_count}")
        if success:
            saves.successes = new_count
        else:
            saves.failures = new_count
        return new_count

    def death_save_marks(self) -> tuple[tuple[bool, ...], tuple[bool, ...]]:
        """Checked state of the success and failure marks.

        A count outside 1 to 3 leaves every mark of its row unchecked.
        """
        return (
            _marks(self.data.death_saves.successes),
            _marks(self.data.death_saves.failures),
        )

    def next_page(self) -> int:
        """Go to the next page, wrapping around; returns the page index."""
        self.page = (self.page + 1) % self.page_count
        return self.page

    def previous_page(self) -> int:
        """Go to the previous page, wrapping around; returns the page index."""
        self.page = self.page - 1 if self.page > 0 else self.page_count - 1
        return self.page


def _require(value: object, kind: type) -> None:
    if not isinstance(value, kind):
        raise TypeError(f"expected {kind.__name__}, got {value!r}")


def _marks(count: int) -> tuple[bool, ...]:
    filled = count if 1 <= count <= DEATH_SAVE_SLOTS else 0
    return tuple(slot < filled for slot in range(DEATH_SAVE_SLOTS))