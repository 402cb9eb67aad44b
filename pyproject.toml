[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storypath"
version = "0.1.0"
description = "A console text adventure that walks a binary tree of story events loaded from a delimited file."
requires-python = ">=3.10"
dependencies = []
keywords = ["adventure", "text-game", "binary-tree", "interactive-fiction"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
storypath = "storypath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["storypath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
