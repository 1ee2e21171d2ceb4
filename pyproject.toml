[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spriteforge"
version = "0.1.0"
description = "A small pixel-art sprite editor with multi-frame animation and a JSON-based .ssp file format"
requires-python = ">=3.10"
dependencies = []
keywords = ["sprite", "pixel-art", "editor", "animation", "frames", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spriteforge = "spriteforge.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spriteforge"]

[tool.hatch.build.targets.sdist]
include = ["spriteforge", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
