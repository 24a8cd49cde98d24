[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fluxtune"
version = "0.1.0"
description = "Clock, timer, Morse timing, settings, panel LED and speaker models for a small VFO tuner device"
requires-python = ">=3.10"
dependencies = []
keywords = ["ham radio", "morse", "led", "clock", "timer"]
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
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fluxtune"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
