[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixeldemo"
version = "0.1.0"
description = "A small software renderer and demoscene effects for a 192x192 pixel frame"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "demoscene",
    "rasterizer",
    "software-rendering",
    "effects",
    "pixel-art",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Artistic Software",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pixeldemo"]

[tool.pytest.ini_options]
addopts = "-ra"
