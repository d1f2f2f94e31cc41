[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quantumpoint"
version = "0.0.1"
description = "Domain model, IR interpreter and project path helpers for visual node graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["visual-programming", "node-graph", "interpreter", "ir", "no-code"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quantumpoint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
