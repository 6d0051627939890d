[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledgenet"
version = "0.1.0"
description = "A small networked side-scrolling platformer: UDP game server, pygame client and shared game core"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "multiplayer", "udp", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ledgenet-server = "ledgenet.server.serve:main"
ledgenet-client = "ledgenet.client.play:main"

[tool.hatch.build.targets.wheel]
packages = ["ledgenet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
