[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "interviewkit"
version = "0.1.0"
description = "Classic coding-interview algorithms and data structures: arrays, strings, linked lists, trees and number puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "interview", "linked-list", "binary-tree", "dynamic-programming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["interviewkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
