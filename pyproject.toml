[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "contestsolvers"
version = "0.1.0"
description = "Solvers for a collection of combinatorics, tree and greedy contest problems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "combinatorics",
    "algorithms",
    "trees",
    "modular-arithmetic",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zero-one-tree = "contestsolvers.zero_one_tree:main"
three-letter = "contestsolvers.three_letter:main"
forty-two = "contestsolvers.forty_two:main"
bishtar-as-k = "contestsolvers.bishtar_as_k:main"
go-home = "contestsolvers.go_home:main"
modulo-pairing = "contestsolvers.modulo_pairing:main"
blue-red-tree = "contestsolvers.blue_red_tree:main"
cigar-box = "contestsolvers.cigar_box:main"
abc-strings = "contestsolvers.abc_strings:main"

[tool.setuptools]
packages = ["contestsolvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
