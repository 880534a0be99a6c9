[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "udprouter"
version = "0.1.0"
description = "A UDP router node that reads its links and neighbours from config files and sends text messages to them"
requires-python = ">=3.10"
dependencies = []
keywords = ["udp", "router", "networking", "sockets", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
udprouter = "udprouter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["udprouter"]

[tool.pytest.ini_options]
addopts = "-ra"
