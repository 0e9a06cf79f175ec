[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tsplibreader"
version = "0.1.0"
description = "Read TSPLIB travelling salesman instances and build their distance matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["tsp", "tsplib", "travelling salesman", "distance matrix", "optimization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tsplibreader = "tsplibreader.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tsplibreader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
