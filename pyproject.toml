[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Small numerical tools: least-squares line fitting, polynomial root finding, IEEE float inspection and CPU timers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "least squares",
    "linear regression",
    "polynomial",
    "roots",
    "laguerre",
    "horner",
    "ieee 754",
    "machine epsilon",
    "timing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numlab-matrix = "numlab.matrix:main"
numlab-linefit = "numlab.linefit:main"
numlab-unrolled = "numlab.unrolled:main"
numlab-roots = "numlab.polycli:main"
numlab-floats = "numlab.floats:main"
numlab-demos = "numlab.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.hatch.build.targets.sdist]
include = ["numlab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
