[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inputbind"
version = "0.1.0"
description = "Describe keyboard, mouse and gamepad button bindings, chords and virtual pads, and decompose them into raw inputs"
requires-python = ">=3.10"
dependencies = []
keywords = ["input", "bindings", "keyboard", "gamepad", "mouse", "scan-codes", "games"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["inputbind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
