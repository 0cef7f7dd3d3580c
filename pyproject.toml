[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "irsolcam"
version = "1.0.0"
description = "String, byte, identifier and time-formatting helpers for camera control services"
requires-python = ">=3.10"
dependencies = []
keywords = ["uuid", "strings", "duration", "timestamp", "formatting", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["irsolcam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
