[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolve"
version = "0.1.0"
description = "Solvers for a season of daily programming puzzles: dials, ID ranges, grids, beams, circuits and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "union-find", "graph", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
aocsolve-day01 = "aocsolve.day01:main"
aocsolve-day02 = "aocsolve.day02:main"
aocsolve-day03 = "aocsolve.day03:main"
aocsolve-day04 = "aocsolve.day04:main"
aocsolve-day05 = "aocsolve.day05:main"
aocsolve-day06 = "aocsolve.day06:main"
aocsolve-day07 = "aocsolve.day07:main"
aocsolve-day08 = "aocsolve.day08:main"
aocsolve-day09 = "aocsolve.day09:main"
aocsolve-day11 = "aocsolve.day11:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
