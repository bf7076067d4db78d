[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wolfcast"
version = "0.1.0"
description = "A small raycasting first-person shooter with levels loaded from a plain text file"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "first-person", "pygame", "fps"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wolfcast = "wolfcast.game:main"

[tool.hatch.build.targets.wheel]
packages = ["wolfcast"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
