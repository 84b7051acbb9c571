[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dominoes"
version = "0.1.0"
description = "Dominoes against a computer opponent in a pygame window, with a kept score record"
requires-python = ">=3.10"
keywords = ["dominoes", "game", "board game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
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
dominoes = "dominoes.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dominoes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
