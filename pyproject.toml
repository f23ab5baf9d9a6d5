[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amazed"
version = "1.0.0"
description = "Read a maze of rooms and tunnels on standard input and move numbered robots from the start room to the exit, one turn per line."
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "pathfinding", "robots", "simulation", "graph"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
amazed = "amazed.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["amazed"]

[tool.pytest.ini_options]
addopts = "-ra"
