[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordgrid"
version = "0.1.0"
description = "Boggle-style word search on letter grids, a polynomial string hash and an open-addressing hash table"
requires-python = ">=3.10"
dependencies = []
keywords = ["boggle", "word search", "hash table", "double hashing", "string hash", "mersenne twister"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordgrid-boggle = "wordgrid.boggle:main"
wordgrid-strhash = "wordgrid.strhash_cli:main"
wordgrid-ht-demo = "wordgrid.ht_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["wordgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
