[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsabasics"
version = "0.1.0"
description = "Small, readable implementations of classic beginner algorithms: arrays, number theory, hashing, text patterns, recursion and sorting."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "sorting", "recursion", "patterns", "education"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsabasics"]

[tool.pytest.ini_options]
addopts = "-ra"
