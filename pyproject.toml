[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algozoo"
version = "0.1.0"
description = "A small collection of classic algorithms: sorting, searching, graphs, dynamic programming, number theory, textbook RSA and numerical methods."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "searching",
    "dynamic-programming",
    "graphs",
    "numerical-methods",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algozoo = "algozoo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algozoo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
