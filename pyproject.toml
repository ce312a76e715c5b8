[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortviz"
version = "1.0.0"
description = "Watch classic sorting algorithms work, one bar at a time, in an animated pygame window."
requires-python = ">=3.10"
keywords = ["sorting", "algorithms", "visualization", "education", "pygame"]
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
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sortviz = "sortviz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sortviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
