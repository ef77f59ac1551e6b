[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forestfire"
version = "0.1.0"
description = "Terminal forest fire simulator: lightning strikes a random forest and fire spreads tree by tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "forest fire", "cellular automaton", "terminal", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
forestfire = "forestfire.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["forestfire"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
