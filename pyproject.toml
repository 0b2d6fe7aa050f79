[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goforth"
version = "0.1.0"
description = "A small engine for text adventure games: rooms, objects, a player and a command loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "interactive fiction", "game engine", "mud"]
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
    "Topic :: Games/Entertainment :: Multi-User Dungeons (MUD)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
goforth-demo = "goforth.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["goforth"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
