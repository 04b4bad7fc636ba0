[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinystl"
version = "0.1.0"
description = "Small container toolkit: a pooled allocator, a mutable string with positional search, a reverse iterator, pairs and queue/stack adapters."
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "string", "allocator", "iterator", "queue", "stack", "pair"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["tinystl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
