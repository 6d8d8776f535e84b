[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkwork"
version = "0.1.0"
description = "Classic singly linked list algorithms: traversal, loops, arithmetic, deletion, rearranging and sorting."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "algorithms", "data structures", "education"]
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
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["linkwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
