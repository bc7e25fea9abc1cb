[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noether"
version = "0.1.0"
description = "The core of a small 3D rendering engine: vector and matrix maths, meshes, shapes, shaders, materials, events and an application loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "rendering", "engine", "graphics", "linear-algebra", "mesh"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["noether"]

[tool.pytest.ini_options]
addopts = "-ra"
