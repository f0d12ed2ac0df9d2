[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rucoymap"
version = "0.1.0"
description = "Readers for old Rucoy Online map, tile and texture files, with a PNG map renderer"
requires-python = ">=3.10"
keywords = ["rucoy", "map", "tiles", "parser", "png", "game-data"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rucoymap = "rucoymap.render:main"

[tool.hatch.build.targets.wheel]
packages = ["rucoymap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
