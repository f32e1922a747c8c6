[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dndsheet"
version = "1.0.0"
description = "Keep tabletop role-playing character sheets in JSON catalogs and roll polyhedral dice"
requires-python = ">=3.10"
dependencies = []
keywords = ["dnd", "character-sheet", "role-playing", "dice", "tabletop", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dndsheet = "dndsheet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dndsheet"]

[tool.pytest.ini_options]
addopts = "-ra"
