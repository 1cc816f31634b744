[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arachisya"
version = "0.1.0"
description = "A top-down action game: a knight roams a desert map and cuts down goblins, slimes and intellect devourers."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "action", "rpg", "top-down"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arachisya = "arachisya.game:main"

[tool.hatch.build.targets.wheel]
packages = ["arachisya"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
