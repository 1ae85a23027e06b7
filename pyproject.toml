[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flatsim"
version = "0.1.0"
description = "Data model, machine definitions, tank and power models and sensor data records for a flat-world agricultural robot simulator"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "robotics", "agriculture", "vehicles", "sensors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flatsim"]

[tool.pytest.ini_options]
addopts = "-ra"
