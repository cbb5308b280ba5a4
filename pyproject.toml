[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifemanager"
version = "0.1.0"
description = "Household organiser models and view logic: pick-up packages, watchlist, notifications and cycle tracking with phase insights"
requires-python = ">=3.10"
dependencies = []
keywords = ["parcels", "watchlist", "cycle-tracker", "mood", "productivity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lifemanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
