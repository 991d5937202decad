[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "desertrun"
version = "0.1.0"
description = "A small top-down puzzle game: collect every gold nugget, then ride off on the horse."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "pygame", "tile map", "xpm"]
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
desertrun = "desertrun.app:main"

[tool.hatch.build.targets.wheel]
packages = ["desertrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
