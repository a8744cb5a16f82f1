[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchmotion"
version = "0.1.0"
description = "Small interactive 2D motion sketches: bouncing balls, collisions, orbits, particles and a snake game"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "animation",
    "physics",
    "simulation",
    "pygame",
    "snake",
    "particles",
    "orbits",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sketchmotion = "sketchmotion.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sketchmotion"]

[tool.pytest.ini_options]
addopts = "-ra"
