[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jujuhooks"
version = "0.1.0"
description = "Helpers for calling Juju hook tools through a supplied runner: unit and application status, storage, and unit addresses."
requires-python = ">=3.10"
dependencies = []
keywords = ["juju", "charm", "hook-tools", "status", "storage"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jujuhooks"]

[tool.pytest.ini_options]
addopts = "-ra"
