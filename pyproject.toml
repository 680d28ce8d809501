[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clust"
version = "0.9.0"
description = "Building blocks for the Claude Messages API: models, errors, JSON codecs, streamed event decoding and tool schemas from plain functions."
requires-python = ">=3.10"
dependencies = []
keywords = ["claude", "anthropic", "api", "llm", "tool-use", "json-schema", "server-sent-events"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["clust"]

[tool.hatch.build.targets.sdist]
include = ["clust", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
