[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kenjiman"
version = "0.1.0"
description = "Rules and drawing for a two-player maze pellet game, with the small 2D drawing toolkit they are built on"
requires-python = ">=3.10"
keywords = ["game", "arcade", "maze", "pygame", "2d", "transitions", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["kenjiman"]

[tool.pytest.ini_options]
addopts = "-ra"
