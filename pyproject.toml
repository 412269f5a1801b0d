[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sidescroll"
version = "0.1.0"
description = "A side-scrolling terminal shooter with a world built from a chunked seed map"
requires-python = ">=3.10"
keywords = ["game", "terminal", "side-scroller", "shooter", "ascii"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sidescroll = "sidescroll.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sidescroll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
