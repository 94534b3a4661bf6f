[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rootdefence"
version = "0.1.0"
description = "Game logic for a tower defence game: waves, towers, enemies, tile maps and saved player progress."
requires-python = ">=3.10"
dependencies = []
keywords = ["tower defence", "game", "waves", "tilemap", "tmx", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rootdefence"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
