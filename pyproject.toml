[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodojo"
version = "0.1.0"
description = "Classic algorithm and data-structure exercises: linked lists, array problems, bounded containers and a tic-tac-toe game"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "linked-list", "stack", "queue", "sorting", "tic-tac-toe"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algodojo-tictactoe = "algodojo.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["algodojo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
