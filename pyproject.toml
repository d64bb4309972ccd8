[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrs"
version = "0.1.0"
description = "A small falling-blocks puzzle game for the terminal"
requires-python = ">=3.10"
keywords = ["tetris", "game", "terminal", "curses", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tetrs = "tetrs.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tetrs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
