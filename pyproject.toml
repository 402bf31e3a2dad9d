[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "usblview"
version = "0.1.0"
description = "Decode USBL positioning recordings, plot the track and stream trajectories over UDP"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["usbl", "underwater", "positioning", "trajectory", "udp", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
usblview = "usblview.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["usblview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
