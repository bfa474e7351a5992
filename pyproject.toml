[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bogglegame"
version = "1.0.0"
description = "Play Boggle in the terminal against a computer that finds every word you missed."
requires-python = ">=3.10"
dependencies = []
keywords = ["boggle", "word game", "puzzle", "lexicon", "terminal game"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bogglegame = "bogglegame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["bogglegame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
