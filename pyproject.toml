[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskapps"
version = "0.1.0"
description = "Small interactive console applications: bank accounts, library lending, car parking, employees and tasks."
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "bank", "library", "parking", "employees", "tasks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deskapps-bank = "deskapps.bank:main"
deskapps-library = "deskapps.library:main"
deskapps-parking = "deskapps.parking:main"
deskapps-employees = "deskapps.employees:main"
deskapps-tasks = "deskapps.tasks:main"

[tool.hatch.build.targets.wheel]
packages = ["deskapps"]

[tool.pytest.ini_options]
addopts = "-ra"
