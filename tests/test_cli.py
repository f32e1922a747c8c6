import json

from dndsheet.catalog import Catalog
from dndsheet.cli import main


def test_new_creates_catalog_file(tmp_path):
    path = tmp_path / "cat.json"
    assert main(["new", str(path)]) == 0
    catalog = Catalog()
    catalog.load(path)
    assert catalog.titles == ["New character"]


def test_list_prints_titles(tmp_path, capsys):
    path = tmp_path / "cat.json"
    main(["new", str(path)])
    main(["add", str(path), "--name", "Aria"])
    capsys.readouterr()
    assert main(["list", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["0: New character", "1: Aria"]


def test_add_without_name_adds_blank_character(tmp_path):
    path = tmp_path / "cat.json"
    main(["new", str(path)])
    assert main(["add", str(path)]) == 0
    catalog = Catalog()
    catalog.load(path)
    assert len(catalog) == 2
    assert all(c.char_name == "New character" for c in catalog)


def test_delete_removes_character(tmp_path):
    path = tmp_path / "cat.json"
    main(["new", str(path)])
    main(["add", str(path), "--name", "Aria"])
    assert main(["delete", str(path), "0"]) == 0
    catalog = Catalog()
    catalog.load(path)
    assert [c.char_name for c in catalog] == ["Aria"]


def test_delete_out_of_range_fails(tmp_path, capsys):
    path = tmp_path / "cat.json"
    main(["new", str(path)])
    assert main(["delete", str(path), "7"]) == 1
    assert "error" in capsys.readouterr().err


def test_show_prints_character_json(tmp_path, capsys):
    path = tmp_path / "cat.json"
    main(["new", str(path)])
    main(["add", str(path), "--name", "Aria"])
    capsys.readouterr()
    assert main(["show", str(path), "1"]) == 0
    shown = json.loads(capsys.readouterr().out)
    assert shown["charName"] == "Aria"


def test_missing_file_fails(tmp_path):
    assert main(["list", str(tmp_path / "missing.json")]) == 1


def test_roll_in_range(capsys):
    assert main(["roll", "d6", "--seed", "5"]) == 0
    title, value = capsys.readouterr().out.strip().split(": ")
    assert title == "d6"
    assert 1 <= int(value) <= 6


def test_roll_accepts_action_name(capsys):
    assert main(["roll", "actionD100", "--seed", "1"]) == 0
    title, value = capsys.readouterr().out.strip().split(": ")
    assert title == "d100"
    assert int(value) % 10 == 0


def test_roll_unknown_die_fails(capsys):
    assert main(["roll", "d7"]) == 1
    assert "error" in capsys.readouterr().err