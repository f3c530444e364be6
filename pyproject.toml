[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "excursions"
version = "0.1.0"
description = "Console application for managing club excursions stored in a plain text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["excursions", "scheduling", "club", "console", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
excursions = "excursions.console:main"

[tool.hatch.build.targets.wheel]
packages = ["excursions"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
