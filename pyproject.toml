[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arbor"
version = "0.1.0"
description = "Linked binary tree nodes with traversals, shape metrics and an ASCII renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "data structures", "traversal", "tree", "ascii"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arbor-demo = "arbor.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["arbor"]

[tool.pytest.ini_options]
addopts = "-ra"
