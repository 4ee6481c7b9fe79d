[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eddycore"
version = "0.1.0"
description = "Parameters, field layout, grid, initial winds and state diagnostics for a compressible large-eddy simulation model"
requires-python = ">=3.10"
keywords = ["atmosphere", "les", "boundary-layer", "meteorology", "diagnostics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["eddycore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
