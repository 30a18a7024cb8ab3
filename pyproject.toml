[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eqmaptools"
version = "0.1.0"
description = "Zone map data structures, binary readers, spatial queries and a volume region editor model."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "zone",
    "map",
    "volumes",
    "bounding-box",
    "triangle-mesh",
    "s3d",
    "eqg",
    "geometry",
    "camera",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eqmaptools"]

[tool.hatch.build.targets.sdist]
include = ["eqmaptools", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
