[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vampire_hunters"
version = "0.1.0"
description = "Rules for a top-down survival arcade game: geometry, collisions, weapons, level-up tables and player statistics."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "survival", "collision", "weapons"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vampire_hunters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
