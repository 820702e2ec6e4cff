[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpsolutions"
version = "0.1.0"
description = "Solutions to classic competitive-programming problems as plain Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "competitive-programming", "binary-tree", "sieve", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpsolutions-sieve = "cpsolutions.sieve:main"

[tool.hatch.build.targets.wheel]
packages = ["cpsolutions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
