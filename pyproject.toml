[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solong"
version = "1.0.0"
description = "A small top-down 2D tile game: collect every coin, then reach the exit, on maps read from .ber files."
requires-python = ">=3.10"
keywords = ["game", "2d", "puzzle", "tile-map", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
solong = "solong.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["solong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
