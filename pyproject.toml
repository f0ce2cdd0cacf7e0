[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reversigame"
version = "0.1.0"
description = "Two-player Reversi (Othello) with a pygame window, turn timer, move hints and a save file."
requires-python = ">=3.10"
keywords = ["reversi", "othello", "board game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
reversigame = "reversigame.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["reversigame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
