# dndsheet

Keep tabletop role-playing character sheets in a JSON catalog and roll the
usual polyhedral dice.

A catalog is a JSON array of character objects. Each character holds the
header lines (name, class and level, race, background, alignment, player,
experience points), the six abilities with their modifiers, saving throws and
skills with proficiency marks, the proficiency bonus, inspiration, passive
wisdom, armor class, initiative, speed, hit points, hit dice, death saves,
three attacks, coins and free-text notes. Catalogs are written as indented
UTF-8 JSON.

## Install

```
pip install .
```

## Command line

The `dndsheet` command works on catalog files:

```
dndsheet new party.json             # catalog with one blank character
dndsheet add party.json --name Aria # add a named character (blank without --name)
dndsheet list party.json            # "0: New character 0", "1: Aria", ...
dndsheet show party.json 1          # print one character as JSON
dndsheet delete party.json 0        # remove a character
dndsheet roll d20                   # roll a die
dndsheet roll d100 --seed 7         # seeded roll
```

Dice are `d4`, `d6`, `d8`, `d10`, `d12`, `d20` and `d100`; the names
`actionD4` ... `actionD100` are accepted too. A d100 roll gives a multiple of
ten from 10 to 90; the other dice give 1 up to their number of sides.

Titles in `list` are kept unique: a character whose name is already taken is
listed as `Name_1`, `Name_2` and so on. A file that is not a JSON array loads
as an empty catalog. On a missing file, a bad index or an unknown die the
command prints `error: ...` to standard error and exits with status 1.

## Library use

```python
from dndsheet.catalog import Catalog
from dndsheet.sheet import CharacterSheet
from dndsheet.character import Ability, Skill
from dndsheet.fields import NumberField, TextField

catalog = Catalog()                      # starts with one new character
sheet = CharacterSheet(catalog[0])
sheet.set_name("Aria")                   # empty names are ignored
catalog.rename(0)                        # retitle after the name, kept unique
sheet.set_text(TextField.RACE, "Elf")
sheet.set_number_text(NumberField.STRENGTH, "14")   # non-numbers store 0
sheet.set_modifier(Ability.STRENGTH, 2)  # returns "+"
sheet.set_prof_bonus(2)
sheet.set_proficiency(Skill.STEALTH, True)   # adds the bonus to the skill
sheet.set_prof_bonus(3)                  # proficient values follow the change
catalog.save("MyCharacters.json")

loaded = Catalog()
loaded.load("MyCharacters.json")
print(loaded.titles)
```

`CharacterData.from_json` and `CharacterData.to_json` convert a single
character; `Catalog.to_json` gives the whole catalog as a list.

Rolling a die:

```python
import random
from dndsheet.dice import Die, roll

print(roll(Die.D20, random.Random()))
```

## What it does not do

There is no graphical sheet or interactive editor. The command line creates,
lists, shows and deletes characters and rolls dice; filling in a sheet's
fields is done through `CharacterSheet` in Python or by editing the JSON file.

## Tests

```
pip install .[test]
pytest
```