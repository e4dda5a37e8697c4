[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paintkit"
version = "0.4.0"
description = "Raster image editing core for a simple paint program: flood fill, flips, rotations, masks, unit conversion, file formats and document state"
requires-python = ">=3.10"
keywords = ["paint", "raster", "image", "flood-fill", "pillow"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["paintkit"]

[tool.pytest.ini_options]
addopts = "-ra"
