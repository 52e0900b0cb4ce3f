[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadengine"
version = "0.1.0"
description = "A small modular 2D engine with renderers loaded by name and an OpenGL quad renderer"
requires-python = ">=3.10"
keywords = ["2d", "engine", "opengl", "renderer", "pyglet", "quad"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
quadengine = "quadengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["quadengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
