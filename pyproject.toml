[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrobag"
version = "0.1.0"
description = "A turn-based tetromino placement puzzle for the terminal, with a bag, a reserve, effect cards and a deepest-fit experiment"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetromino", "puzzle", "game", "terminal", "deepest-fit"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
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
tetrobag = "tetrobag.game:main"
tetrobag-experiment = "tetrobag.experiments:main"

[tool.hatch.build.targets.wheel]
packages = ["tetrobag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
