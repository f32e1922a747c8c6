"""Command line for managing character catalogs and rolling dice."""

from __future__ import annotations

import argparse
import json
import random
import sys
from typing import Sequence

from dndsheet.catalog import Catalog
from dndsheet.character import CharacterData
from dndsheet.dice import Die, die_from_action, roll


def _parse_die(text: str) -> Die:
    try:
        return Die(text.lower())
    except ValueError:
        return die_from_action(text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dndsheet",
        description="Create and keep character sheets for a tabletop role-playing game.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="create a catalog with one new character")
    new.add_argument("file")

    listing = commands.add_parser("list", help="list the characters of a catalog")
    listing.add_argument("file")

    add = commands.add_parser("add", help="add a character to a catalog")
    add.add_argument("file")
    add.add_argument("--name", help="name of the character")

    delete = commands.add_parser("delete", help="delete a character from a catalog")
    delete.add_argument("file")
    delete.add_argument("index", type=int)

    show = commands.add_parser("show", help="print one character as JSON")
    show.add_argument("file")
    show.add_argument("index", type=int)

    dice = commands.add_parser("roll", help="roll a die (d4, d6, d8, d10, d12, d20, d100)")
    dice.add_argument("die")
    dice.add_argument("--seed", type=int)
    return parser


def _load(path: str) -> Catalog:
    catalog = Catalog()
    catalog.load(path)
    return catalog


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "new":
            Catalog().save(args.file)
        elif args.command == "list":
            for index, title in enumerate(_load(args.file).titles):
                print(f"{index}: {title}")
        elif args.command == "add":
            catalog = _load(args.file)
            if args.name:
                index = catalog.add_character(CharacterData(char_name=args.name))
            else:
                index = catalog.add_new_character()
            catalog.save(args.file)
            print(f"{index}: {catalog.titles[index]}")
        elif args.command == "delete":
            catalog = _load(args.file)
            title = catalog.titles[args.index] if 0 <= args.index < len(catalog) else None
            catalog.delete_character(args.index)
            catalog.save(args.file)
            print(f"Deleted {title}")
        elif args.command == "show":
            catalog = _load(args.file)
            if not 0 <= args.index < len(catalog):
                raise IndexError(f"no character at index {args.index}")
            print(json.dumps(catalog[args.index].to_json(), indent=4, ensure_ascii=False))
        elif args.command == "roll":
            die = _parse_die(args.die)
            rng = random.Random(args.seed) if args.seed is not None else None
            print(f"{die.title}: {roll(die, rng)}")
    except (OSError, IndexError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())