[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonescape"
version = "1.0.0"
description = "A small text-mode dungeon escape role-playing game with rooms, monsters, skills and an inventory."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text adventure", "dungeon", "rpg", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
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
dungeonescape = "dungeonescape.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonescape"]

[tool.pytest.ini_options]
addopts = "-ra"
