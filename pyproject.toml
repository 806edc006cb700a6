[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadmpc"
version = "0.1.0"
description = "Polynomial real-root finding, bound-constrained QP building blocks and quadrotor MPC reference helpers"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "polynomial",
    "roots",
    "sturm",
    "quartic",
    "quadratic programming",
    "cholesky",
    "givens",
    "mpc",
    "quadrotor",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadmpc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
