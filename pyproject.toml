[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacworld"
version = "0.2.0"
description = "A small top-down arcade game: collect pellets, dodge hazards and a network-driven chaser"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "entity-component", "pac"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pacworld = "pacworld.world:main"

[tool.hatch.build.targets.wheel]
packages = ["pacworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
