[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vanetrep"
version = "0.1.0"
description = "Reputation-based message validation for vehicular networks, with Sybil attack simulation and decision metrics"
requires-python = ">=3.10"
dependencies = []
keywords = ["vanet", "reputation", "sybil", "denm", "v2x", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vanetrep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
