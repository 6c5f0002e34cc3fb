[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "campuscravings"
version = "0.1.0"
description = "Terminal food ordering system for a campus canteen, with buyer ordering and seller management."
requires-python = ">=3.10"
dependencies = []
keywords = ["canteen", "food ordering", "point of sale", "terminal", "menu"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
campuscravings = "campuscravings.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["campuscravings"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
