[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polybow"
version = "0.1.0"
description = "A small top-down arcade shooter: fight polygon enemies with a bow and collect experience orbs."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "shooter", "pygame", "polygons"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
polybow = "polybow.game:main"

[tool.hatch.build.targets.wheel]
packages = ["polybow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
