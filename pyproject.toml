[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "undercover"
version = "0.1.0"
description = "A pass-and-play hidden-word party game played from a text console."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "party game", "undercover", "word game", "pass and play"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
undercover = "undercover.app:main"

[tool.hatch.build.targets.wheel]
packages = ["undercover"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
