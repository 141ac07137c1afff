[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acequia"
version = "0.1.0"
description = "An hour-by-hour water management simulation of regions, water sources and the canals between them"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "water", "acequia", "canal", "irrigation", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
acequia-simulate = "acequia.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["acequia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
