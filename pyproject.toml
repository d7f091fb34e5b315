[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ycsbkit"
version = "0.1.0"
description = "Building blocks for key-value benchmark harnesses: dynamic strings, hashed string keys and tail-latency reporting"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "ycsb", "latency", "sdbm", "dynamic-string"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ycsbkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
