[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slingbird"
version = "0.1.0"
description = "A slingshot physics arcade game: fling a bird at block towers across four levels."
requires-python = ">=3.10"
keywords = ["game", "arcade", "physics", "slingshot", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slingbird = "slingbird.app:main"

[tool.hatch.build.targets.wheel]
packages = ["slingbird"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
