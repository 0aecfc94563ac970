[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "galaxyguard"
version = "1.0.0"
description = "A small space-invaders style arcade game for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "terminal", "ansi", "shooter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
galaxyguard = "galaxyguard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["galaxyguard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
