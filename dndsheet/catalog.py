"""A catalog of character sheets kept together in one JSON file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Union

from dndsheet.character import CharacterData

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class _Entry:
    title: str
    data: CharacterData


class Catalog:
    """Characters of one catalog, each shown under a unique title.

    A fresh catalog holds one new character, as an empty sheet is always
    offered for filling in.
    """

    def __init__(self) -> None:
        self._entries: list[_Entry] = []
        self.current = -1
        self.filename: str | None = None
        self.add_new_character()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharacterData]:
        return (entry.data for entry in self._entries)

    def __getitem__(self, index: int) -> CharacterData:
        return self._entries[index].data

    @property
    def titles(self) -> list[str]:
        """Titles of the characters, in catalog order."""
        return [entry.title for entry in self._entries]

    @property
    def characters(self) -> list[CharacterData]:
        """The characters, in catalog order."""
        return [entry.data for entry in self._entries]

    def unique_title(self, index: int, offered: str) -> str:
        """Make a title that no other entry than ``index`` already uses.

        Clashes get ``_1``, ``_2`` and so on appended. Titles are only
        compared once the catalog holds more than one character.
        """
        titles = self.titles
        if len(titles) <= 1:
            return offered
        candidate = offered
        count = 0
        while any(i != index and title == candidate for i, title in enumerate(titles)):
            count += 1
            candidate = f"{offered}_{count}"
        return candidate

    def add_new_character(self) -> int:
        """Add a blank character; returns its index."""
        index = len(self._entries)
        title = self.unique_title(index, f"New character {index}")
        return self._append(title, CharacterData())

    def add_character(self, data: CharacterData) -> int:
        """Add a character titled by its name; returns its index."""
        index = len(self._entries)
        title = self.unique_title(index, data.char_name)
        return self._append(title, data)

    def _append(self, title: str, data: CharacterData) -> int:
        self._entries.append(_Entry(title, data))
        self.current = len(self._entries) - 1
        return self.current

    def delete_character(self, index: int) -> CharacterData:
        """Remove the character at ``index`` and return it."""
        if not self._entries:
            raise IndexError("There is no characters!")
        if not 0 <= index < len(self._entries):
            raise IndexError(f"no character at index {index}")
        entry = self._entries.pop(index)
        self.current = min(index, len(self._entries) - 1)
        return entry.data

    def clear(self) -> None:
        """Remove every character."""
        self._entries.clear()
        self.current = -1

    def rename(self, index: int) -> str:
        """Retitle an entry after its character's name; returns the title."""
        entry = self._entries[index]
        entry.title = self.unique_title(index, entry.data.char_name)
        return entry.title

    def to_json(self) -> list[dict[str, Any]]:
        """The catalog as a JSON-ready list of character objects."""
        return [entry.data.to_json() for entry in self._entries]

    def save(self, path: PathLike) -> None:
        """Write the catalog to ``path`` and remember it as the current file."""
        self.filename = os.fspath(path)
        text = json.dumps(self.to_json(), indent=4, ensure_ascii=False) + "\n"
        Path(path).write_bytes(text.encode("utf-8"))

    def load(self, path: PathLike) -> int:
        """Replace the catalog with the characters stored in ``path``.

        Content that is not a JSON array loads as no characters; array items
        that are not objects load as characters with default values.
        Returns the number of characters loaded.
        """
        self.filename = os.fspath(path)
        self.clear()
        raw = Path(path).read_bytes()
        try:
            document = json.loads(raw)
        except ValueError:
            document = []
        if not isinstance(document, list):
            document = []
        for item in document:
            self.add_character(CharacterData.from_json(item if isinstance(item, dict) else {}))
        return len(self._entries)