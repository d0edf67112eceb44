[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "videoteca"
version = "0.1.0"
description = "Interactive catalogue of movies and series loaded from CSV, with ratings and filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "catalog", "movies", "series", "csv", "ratings"]
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
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
videoteca = "videoteca.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["videoteca"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
