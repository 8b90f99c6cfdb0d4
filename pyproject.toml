[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigames"
version = "0.1.0"
description = "Game logic for small games: a 15 puzzle, a clicker and the building blocks of a space shooter"
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "15-puzzle", "clicker", "shooter", "ecs", "game-logic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minigames"]

[tool.hatch.build.targets.sdist]
include = ["minigames", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
