[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chessgame"
version = "1.0.0"
description = "A two-player chess board in a pygame window with move validation and check detection"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["chess", "board game", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chessgame = "chessgame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["chessgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
