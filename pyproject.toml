[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bombprop"
version = "0.1.0"
description = "Game logic for an airsoft bomb prop: a code-armed countdown bomb and a two-team control clock"
requires-python = ">=3.10"
dependencies = []
keywords = ["airsoft", "prop", "bomb", "countdown", "chess-clock", "game"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bombprop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
