[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nebula4x"
version = "0.1.0"
description = "Game-state data model, JSON handling, safe file writes and event-log export for a turn-based space strategy game"
requires-python = ">=3.10"
dependencies = []
keywords = ["strategy", "simulation", "4x", "space", "json", "csv", "jsonl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nebula4x"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
