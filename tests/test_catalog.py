import json

import pytest

from dndsheet.catalog import Catalog
from dndsheet.character import CharacterData


def test_fresh_catalog_has_one_new_character():
    catalog = Catalog()
    assert catalog.titles == ["New character 0"]
    assert catalog[0].char_name == "New character"
    assert catalog.current == 0
    assert catalog.filename is None


def test_new_characters_are_numbered_by_index():
    catalog = Catalog()
    assert catalog.add_new_character() == 1
    assert catalog.add_new_character() == 2
    assert catalog.titles == ["New character 0", "New character 1", "New character 2"]
    assert catalog.current == 2


def test_duplicate_name_gets_suffix():
    catalog = Catalog()
    catalog.clear()
    catalog.add_character(CharacterData(char_name="Aria"))
    catalog.add_character(CharacterData(char_name="Bran"))
    index = catalog.add_character(CharacterData(char_name="Aria"))
    assert catalog.titles[index] == "Aria_1"
    index = catalog.add_character(CharacterData(char_name="Aria"))
    assert catalog.titles[index] == "Aria_2"


def test_titles_not_compared_with_single_entry():
    catalog = Catalog()
    catalog.clear()
    catalog.add_character(CharacterData(char_name="Aria"))
    catalog.add_character(CharacterData(char_name="Aria"))
    assert catalog.titles == ["Aria", "Aria"]


def test_unique_title_skips_taken_suffixes():
    catalog = Catalog()
    catalog.clear()
    for name in ("X", "X_1", "Y"):
        catalog.add_character(CharacterData(char_name=name))
    assert catalog.unique_title(3, "X") == "X_2"
    assert catalog.unique_title(0, "X") == "X"
    assert catalog.unique_title(3, "Z") == "Z"


def test_rename_uses_character_name_and_stays_unique():
    catalog = Catalog()
    catalog.add_new_character()
    catalog[1].char_name = "New character 0"
    title = catalog.rename(1)
    assert title == "New character 0_1"
    assert catalog.titles[1] == title
    assert len(set(catalog.titles)) == len(catalog)


def test_rename_keeps_own_title():
    catalog = Catalog()
    catalog.add_new_character()
    catalog[0].char_name = "Aria"
    assert catalog.rename(0) == "Aria"


def test_delete_character():
    catalog = Catalog()
    catalog.add_new_character()
    removed = catalog.delete_character(0)
    assert removed.char_name == "New character"
    assert catalog.titles == ["New character 1"]
    assert catalog.current == 0


def test_delete_from_empty_catalog_raises():
    catalog = Catalog()
    catalog.clear()
    with pytest.raises(IndexError):
        catalog.delete_character(0)


def test_delete_out_of_range_raises():
    catalog = Catalog()
    with pytest.raises(IndexError):
        catalog.delete_character(5)
    assert len(catalog) == 1


def test_clear_empties_catalog():
    catalog = Catalog()
    catalog.add_new_character()
    catalog.clear()
    assert len(catalog) == 0
    assert catalog.current == -1


def test_to_json_lists_every_character():
    catalog = Catalog()
    catalog.add_new_character()
    assert catalog.to_json() == [c.to_json() for c in catalog.characters]


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "MyCharacters.json"
    catalog = Catalog()
    catalog[0].char_name = "Aria"
    catalog[0].exp_points = 300
    catalog.add_character(CharacterData(char_name="Bran"))
    catalog.save(path)
    assert catalog.filename == str(path)

    loaded = Catalog()
    assert loaded.load(path) == 2
    assert loaded.to_json() == catalog.to_json()
    assert loaded.titles == ["Aria", "Bran"]
    assert loaded.filename == str(path)


def test_saved_file_is_indented_json_array(tmp_path):
    path = tmp_path / "cat.json"
    catalog = Catalog()
    catalog.save(path)
    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == catalog.to_json()
    assert '\n    {' in text
    assert "фт" in text


def test_load_invalid_json_gives_empty_catalog(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("not json", encoding="utf-8")
    catalog = Catalog()
    assert catalog.load(path) == 0
    assert len(catalog) == 0


def test_load_non_array_gives_empty_catalog(tmp_path):
    path = tmp_path / "obj.json"
    path.write_text('{"charName": "Aria"}', encoding="utf-8")
    catalog = Catalog()
    assert catalog.load(path) == 0


def test_load_non_object_item_gives_default_character(tmp_path):
    path = tmp_path / "items.json"
    path.write_text('[1, {"charName": "Aria"}]', encoding="utf-8")
    catalog = Catalog()
    catalog.load(path)
    assert [c.char_name for c in catalog] == ["", "Aria"]


def test_load_missing_file_raises(tmp_path):
    catalog = Catalog()
    with pytest.raises(OSError):
        catalog.load(tmp_path / "missing.json")