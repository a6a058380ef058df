[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modmath"
version = "0.1.0"
description = "Number theory and combinatorics routines: modular arithmetic, divisors, primes and expected inversions."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "modular arithmetic",
    "binomial coefficients",
    "divisors",
    "primes",
    "inclusion-exclusion",
    "combinatorics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
modmath = "modmath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["modmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
