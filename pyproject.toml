[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilemosaic"
version = "0.1.0"
description = "Tiling window layouts rendered as absolutely positioned HTML"
requires-python = ">=3.10"
dependencies = []
keywords = ["tiling", "window manager", "layout", "html", "mosaic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tilemosaic-demo = "tilemosaic.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["tilemosaic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
