[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glyphscreen"
version = "0.1.0"
description = "A character-cell screen buffer for terminals: glyph widths, colors, styles and box-drawing merging."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "tui", "ansi", "unicode", "box-drawing", "screen"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glyphscreen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
