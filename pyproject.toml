[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diligent"
version = "0.1.0"
description = "Reproducible test-data generation, SQL statement building and metrics for database benchmarking"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "benchmark", "sql", "data-generation", "prometheus", "metrics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["diligent"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
