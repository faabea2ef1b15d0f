[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cminus"
version = "0.1.0"
description = "Semantic checker, tree printer and tree-walking interpreter for a small C-like language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "c-minus", "ast", "semantic-analysis", "symbol-table", "type-checking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cminus"]

[tool.hatch.build.targets.sdist]
include = ["cminus", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
