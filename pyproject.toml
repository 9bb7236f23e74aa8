[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "processos"
version = "0.1.0"
description = "Read, sort and summarise court case records stored in CSV files"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "court cases", "records", "sorting", "analysis", "linked list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
processos = "processos.cli:main"

[tool.setuptools.packages.find]
include = ["processos*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
