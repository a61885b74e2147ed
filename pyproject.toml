[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maths2"
version = "0.1.0"
description = "Small maths toolkit: scalar helpers, easing curves, a seeded xoshiro256** RNG, 2D/3D vectors and simple geometry tests."
requires-python = ">=3.10"
dependencies = []
keywords = ["maths", "vectors", "geometry", "easing", "rng", "xoshiro", "collision"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["maths2"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
