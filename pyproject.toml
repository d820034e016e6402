[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hockeysim"
version = "0.1.0"
description = "Data model for a hockey league simulation: players, teams, staff, contracts, stats and a simple calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["hockey", "simulation", "sports", "game", "league"]
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
packages = ["hockeysim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
