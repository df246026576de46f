[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "binauralpan"
version = "0.1.0"
description = "Binaural spatializer demo: place a mono sound in front of the listener with delay, gain and low-pass filtering"
requires-python = ">=3.10"
keywords = ["binaural", "spatial audio", "panner", "dsp", "headphones"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
binauralpan = "binauralpan.app:main"

[tool.hatch.build.targets.wheel]
packages = ["binauralpan"]

[tool.pytest.ini_options]
addopts = "-ra"
