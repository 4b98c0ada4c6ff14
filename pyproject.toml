[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "faxicui"
version = "0.1.0"
description = "A small frame-buffer drawing toolkit for embedded displays, with a pygame desktop simulator"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["embedded", "display", "framebuffer", "oled", "drawing", "simulator", "lines"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["faxicui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
