[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flipturn"
version = "0.1.0"
description = "Reversi with energy-powered skills, corner bonuses and a minimax opponent"
requires-python = ">=3.10"
keywords = ["reversi", "othello", "board game", "minimax", "alpha-beta", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
flipturn = "flipturn.app:main"

[tool.hatch.build.targets.wheel]
packages = ["flipturn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
