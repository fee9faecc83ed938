[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "easylocal"
version = "0.1.0"
description = "Building blocks for local search and enumeration solvers: cost structures, state and output managers, interactive testers and incrementally evaluated expression nodes."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "local search",
    "optimization",
    "metaheuristics",
    "combinatorial optimization",
    "enumeration",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["easylocal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
