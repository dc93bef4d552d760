[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compsparse"
version = "0.1.0"
description = "Compressed sparse matrices and vectors: products, triangular solves and related graph utilities"
requires-python = ">=3.10"
keywords = ["sparse", "matrix", "csr", "csc", "linear algebra", "triangular solve", "matrix product"]
classifiers = [
    "Development Status :: 4 - Beta",
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
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["compsparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
