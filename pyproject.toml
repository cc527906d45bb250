[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cartared"
version = "0.1.0"
description = "Two-player card game played in the terminal between a server and a client over TCP."
requires-python = ">=3.10"
dependencies = []
keywords = ["card game", "two player", "tcp", "socket", "terminal game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
cartared-server = "cartared.server:main"
cartared-client = "cartared.client:main"

[tool.hatch.build.targets.wheel]
packages = ["cartared"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
