[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "sketchpad"
version = "1.0.0"
description = "A small vector drawing editor with shapes, freehand scribbles, layering and a colour picker"
requires-python = ">=3.10"
dependencies = []
keywords = ["drawing", "vector", "shapes", "sketch", "editor", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sketchpad = "sketchpad.gui:main"

[tool.setuptools.packages.find]
include = ["sketchpad*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
