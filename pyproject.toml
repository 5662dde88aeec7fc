[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "checkpointer"
version = "3.7.5"
description = "Save-backup manager core: selection cursors, cheat file handling, UTF-8 and text layout utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["backup", "save data", "cheats", "text layout", "utf-8", "word wrap"]
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
    "Topic :: System :: Archiving :: Backup",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["checkpointer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
