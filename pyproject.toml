[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "houseplanner"
version = "0.1.0"
description = "Floor-plan model for laying out walls and furniture, with undo/redo and a binary project format"
requires-python = ">=3.10"
dependencies = []
keywords = ["floor plan", "house", "furniture", "layout", "undo", "editor"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["houseplanner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
