[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astrocelerate"
version = "0.1.0"
description = "Core engine layer of an orbital mechanics simulator: entity-component system, event dispatching, logging, cleanup stack and physics data types."
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "orbital-mechanics", "simulation", "events", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["astrocelerate"]

[tool.pytest.ini_options]
addopts = "-ra"
