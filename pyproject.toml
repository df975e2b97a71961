[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "interbank"
version = "0.1.0"
description = "Load interbank transactions from CSV, report balances and look up records by ID"
requires-python = ">=3.10"
dependencies = []
keywords = ["transactions", "csv", "report", "cuckoo hashing", "accounting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
interbank = "interbank.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["interbank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
