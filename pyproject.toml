[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpgutils"
version = "0.1.0"
description = "Game-loop utilities for a 2D role-playing game: clock, day-night cycle, events, frame timer, text wrapping, noise and sprite animation"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["rpg", "game", "animation", "noise", "opensimplex", "events", "day-night"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rpgutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
