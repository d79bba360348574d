[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ffge"
version = "0.1.0"
description = "Free Fighting Game Engine: a small two-player fighting game skeleton with patrolling enemies and an entity editor"
requires-python = ">=3.10"
keywords = ["game", "engine", "fighting", "pygame", "editor"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ffge = "ffge.main:main"

[tool.hatch.build.targets.wheel]
packages = ["ffge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
