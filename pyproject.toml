[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trafficlight"
version = "0.1.0"
description = "Simulated two-way traffic light controller with a seven-segment countdown and button-driven duration editing"
requires-python = ">=3.10"
dependencies = []
keywords = ["traffic light", "finite state machine", "seven segment", "simulation", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trafficlight = "trafficlight.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["trafficlight"]

[tool.pytest.ini_options]
addopts = "-ra"
