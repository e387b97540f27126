[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eventboard"
version = "0.1.0"
description = "A small Tk event board: a table of outings with a details dialog, a context menu and an exit confirmation."
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "table", "desktop", "events", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eventboard = "eventboard.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["eventboard"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
