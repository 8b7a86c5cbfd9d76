[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicekit"
version = "0.1.0"
description = "Small programming exercises: array and string puzzles, number helpers, text patterns, a bank account and an employee register, with a command to run some of them interactively."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "algorithms", "practice", "patterns", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
practicekit = "practicekit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["practicekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
