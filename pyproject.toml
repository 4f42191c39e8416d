[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "visualmath"
version = "0.1.0"
description = "Transform point-defined functions, measure distances and undo changes from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["plotting", "functions", "graph", "geometry", "transformations", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
visualmath = "visualmath.app:main"

[tool.hatch.build.targets.wheel]
packages = ["visualmath"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
