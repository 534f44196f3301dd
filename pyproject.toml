[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aiko"
version = "0.1.0"
description = "Callbacks, a millisecond clock and a periodic/one-shot event scheduler for loop-driven applications"
requires-python = ">=3.10"
dependencies = []
keywords = ["events", "scheduler", "embedded", "timing", "callbacks", "main loop"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aiko"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
