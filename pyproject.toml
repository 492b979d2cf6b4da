[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "chainreact"
version = "0.1.0"
description = "A terminal chain-reaction board game for two to six players"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "chain reaction", "board game", "multiplayer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chainreact = "chainreact.cli:main"

[tool.setuptools.packages.find]
include = ["chainreact*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
