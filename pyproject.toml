[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "salvo"
version = "0.1.0"
description = "Two-player Battleship: game rules, a computer opponent, a line-based wire protocol and session state"
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "game", "board game", "multiplayer", "protocol"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["salvo*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
