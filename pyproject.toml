[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelgrid"
version = "0.1.0"
description = "A small raster editor for exploring line, circle, star and fill algorithms on a pixel grid"
requires-python = ">=3.10"
keywords = ["raster", "bresenham", "dda", "flood fill", "pixel", "graphics", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: X11 Applications",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Education",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelgrid = "pixelgrid.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelgrid"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
