[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigames"
version = "0.1.0"
description = "Terminal mini games: hangman, snakes and ladders, and rock-paper-scissors"
requires-python = ">=3.10"
keywords = ["games", "terminal", "hangman", "snakes-and-ladders", "rock-paper-scissors"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minigames-hangman = "minigames.hangman:main"
minigames-snakes = "minigames.snakes:main"
minigames-rps = "minigames.rps:main"

[tool.hatch.build.targets.wheel]
packages = ["minigames"]

[tool.pytest.ini_options]
addopts = "-ra"
