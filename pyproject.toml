[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinykit"
version = "0.1.0"
description = "Small building blocks: numeric argument parsing, bit helpers, a bitmap, a block memory pool, a leveled logger, linked list nodes and a byte ring buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["ring buffer", "bitmap", "bit manipulation", "memory pool", "logger", "linked list", "number parsing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tinykit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
