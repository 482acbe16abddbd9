[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockernuke"
version = "0.1.0"
description = "Stop and remove Docker containers, images, volumes and networks in one command"
requires-python = ">=3.10"
dependencies = []
keywords = ["docker", "cleanup", "containers", "images", "volumes", "networks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
docker-nuke = "dockernuke.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dockernuke"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
