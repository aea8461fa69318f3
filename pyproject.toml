[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airsig"
version = "0.1.0"
description = "Indoor air-quality monitoring with baseline spike detection and pollution signature matching"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "air quality",
    "iaq",
    "voc",
    "co2",
    "pm2.5",
    "pollution",
    "spike detection",
    "environmental monitoring",
]
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
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
airsig = "airsig.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["airsig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
