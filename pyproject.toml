[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "overengineered"
version = "0.1.0"
description = "Terminal engine for a side-scrolling arcade game: colours, tiles, a box-based text UI, a menu base class, a curses screen and looping audio playback"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "curses", "tui", "arcade", "side-scroller"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["overengineered"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
