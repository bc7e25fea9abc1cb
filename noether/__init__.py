"""Core of a small 3D rendering engine: vector and matrix maths, meshes, shapes, shaders, materials, events and the application loop."""

__version__ = "0.1.0"