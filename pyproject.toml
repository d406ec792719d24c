[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelarcade"
version = "0.1.0"
description = "A small collection of arcade games: Space Invaders and a networked Pong lobby"
requires-python = ">=3.10"
keywords = ["arcade", "game", "space invaders", "pong", "pygame"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelarcade = "pixelarcade.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelarcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
