[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpsapi"
version = "0.1.0"
description = "Request/response messages for reading an indexed execution state, with a client-backed index reader and a server adapter."
requires-python = ">=3.10"
dependencies = []
keywords = ["index", "blockchain", "execution state", "api", "ledger"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dpsapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
