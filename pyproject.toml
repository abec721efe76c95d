[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "benchsort"
version = "0.1.0"
description = "Quicksort and radix sort over a fixed 2048-element integer dataset"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "sorting", "quicksort", "radix sort"]
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
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["benchsort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
