[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mfqsched"
version = "0.1.0"
description = "Multilevel feedback queue CPU scheduling simulator with Gantt chart and turnaround statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "mfq", "multilevel feedback queue", "operating systems", "gantt", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
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
mfqsched = "mfqsched.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mfqsched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
