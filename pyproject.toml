[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlswrite"
version = "0.1.0"
description = "Building blocks for legacy Excel (.xls, BIFF8) output: record builders and a shared string table"
requires-python = ">=3.10"
dependencies = []
keywords = ["xls", "excel", "biff8", "spreadsheet", "binary", "records"]
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
    "Topic :: Office/Business :: Financial :: Spreadsheet",
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xlswrite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
