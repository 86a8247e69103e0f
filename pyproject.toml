[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortlab"
version = "0.1.0"
description = "Classic sorting algorithms, a max-heap and an indexed max-heap, with helpers for timing and comparing them"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "algorithms", "heap", "merge sort", "quick sort", "heap sort", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sortlab = "sortlab.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["sortlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
