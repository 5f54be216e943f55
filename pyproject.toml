[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studentroster"
version = "1.0.0"
description = "Interactive student record manager kept sorted by student ID"
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "roster", "gpa", "records", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studentroster = "studentroster.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["studentroster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
