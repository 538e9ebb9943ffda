[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geoos"
version = "0.1.0"
description = "Planar geometry overlay, relate, line merging, snapping and a spherical K-D tree"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "gis",
    "overlay",
    "polygon",
    "de-9im",
    "relate",
    "snapping",
    "kd-tree",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["geoos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
