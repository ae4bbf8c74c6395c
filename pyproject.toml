[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "machkit"
version = "0.1.0"
description = "Fixed-point parameter lists, axis points, ring queues and arc stepping for machine controllers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cnc", "embedded", "fixed-point", "ring-buffer", "interpolation", "parameters"]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["machkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
