[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nyanburger"
version = "0.1.0"
description = "A terminal arcade game: steer a cheeseburger past falling Nyan Cats, collecting power-ups and friends."
requires-python = ">=3.10"
keywords = ["game", "arcade", "terminal", "console", "nyan-cat"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
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
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nyanburger = "nyanburger.game:main"

[tool.hatch.build.targets.wheel]
packages = ["nyanburger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
