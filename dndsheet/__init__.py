"""Tabletop role-playing character sheets kept in JSON catalogs, with dice rolls."""

__version__ = "1.0.0"