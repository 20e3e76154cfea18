[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazerunner"
version = "0.1.0"
description = "Generate, validate, build and solve block mazes in a Minecraft world"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "minecraft", "puzzle", "recursive-backtracking", "wall-follower", "bfs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
mazerunner = "mazerunner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mazerunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
