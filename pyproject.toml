[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trispace"
version = "0.1.0"
description = "Game logic for a small space trading and combat simulation: vector math, quaternions, cargo trading, equipment, comms, effects, particles, input and save files."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "space", "trading", "simulation", "quaternion"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trispace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
