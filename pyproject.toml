[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bearingtrack"
version = "0.1.0"
description = "Bearing-only target tracking: a radar bearing simulator and an extended Kalman filter that follows its output"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["kalman", "ekf", "bearing-only", "tracking", "gauss-newton", "simulation", "triangulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bearingtrack-simulate = "bearingtrack.writer:main"
bearingtrack-filter = "bearingtrack.tracker:main"

[tool.hatch.build.targets.wheel]
packages = ["bearingtrack"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
