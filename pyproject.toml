[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boxpusher"
version = "0.1.0"
description = "Tile model for a box-pushing puzzle: tile attributes, shifted glyphs, deadlock detection, joystick decoding, playfield buffers and menu state"
requires-python = ">=3.10"
dependencies = []
keywords = ["sokoban", "puzzle", "game", "tiles", "playfield", "deadlock", "retro"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["boxpusher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
