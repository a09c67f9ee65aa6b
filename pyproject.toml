[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simple2d"
version = "0.1.0"
description = "A small Processing-style 2D drawing and game framework built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["2d", "graphics", "games", "drawing", "pygame", "creative-coding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
simple2d-pong = "simple2d.examples.pong:main"
simple2d-constellations = "simple2d.examples.constellations:main"
simple2d-template = "simple2d.examples.template:main"
simple2d-image = "simple2d.examples.image_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["simple2d"]

[tool.hatch.build.targets.sdist]
include = ["simple2d", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
