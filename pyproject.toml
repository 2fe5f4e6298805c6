[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridsnake"
version = "0.1.0"
description = "A classic grid-based snake game with wrap-around edges, played in a pygame window."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["snake", "game", "arcade", "pygame", "grid"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridsnake = "gridsnake.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gridsnake"]

[tool.pytest.ini_options]
addopts = "-ra"
