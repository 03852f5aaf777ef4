[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilerunner"
version = "0.1.0"
description = "A small tile-based side-scrolling platformer built on pygame"
requires-python = ">=3.10"
keywords = ["game", "platformer", "pygame", "tilemap", "side-scroller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
tilerunner = "tilerunner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tilerunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
