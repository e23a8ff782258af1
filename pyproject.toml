[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tikvkit"
version = "0.1.0"
description = "Building blocks for a TiKV-style key-value store client: keys, key ranges, memcomparable encoding, retry backoff, configuration and a fixed-answer placement driver stand-in."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tikv",
    "key-value",
    "memcomparable",
    "key-range",
    "backoff",
    "jitter",
    "placement-driver",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["tikvkit"]

[tool.hatch.build.targets.sdist]
include = [
    "tikvkit",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
check_untyped_defs = true
