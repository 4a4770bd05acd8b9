[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weiss"
version = "0.0.1"
description = "Exercises on data structures and algorithm analysis: collections, linked lists, stacks, expression parsing and timing helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "linked list",
    "stack",
    "postfix",
    "benchmark",
    "exercises",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.scripts]
weiss-count-ones = "weiss.algorithms:main"
weiss-include = "weiss.include:main"
weiss-permutation = "weiss.permutation:main"
weiss-loop = "weiss.benchmarks:loop_main"
weiss-selection-time = "weiss.benchmarks:selection_time_main"
weiss-josephus = "weiss.benchmarks:josephus_main"
weiss-min-stack = "weiss.benchmarks:min_stack_main"
weiss-two-lists = "weiss.benchmarks:two_lists_main"

[tool.hatch.build.targets.wheel]
packages = ["weiss"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
