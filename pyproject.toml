[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "twothree"
version = "0.1.0"
description = "A 2-3 search tree of integer keys with insert, search and delete, plus a block-timing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["2-3 tree", "search tree", "balanced tree", "data structures", "benchmark"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
twothree-benchmark = "twothree.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["twothree"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
