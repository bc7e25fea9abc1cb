"""Procedurally generated meshes for common primitive shapes."""

from __future__ import annotations

import math

from noether.matrix import Mat4
from noether.mesh import Mesh, Vertex
from noether.vector import Vec2, Vec3

_CUBE_FACES = (
    # front
    (
        Vec3(0.0, 0.0, 1.0),
        ((-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1)),
    ),
    # right
    (
        Vec3(1.0, 0.0, 0.0),
        ((1, -1, 1), (1, -1, -1), (1, 1, -1), (1, 1, 1)),
    ),
    # left
    (
        Vec3(-1.0, 0.0, 0.0),
        ((-1, -1, -1), (-1, -1, 1), (-1, 1, 1), (-1, 1, -1)),
    ),
    # back (its normal points along +z, as in the reference geometry)
    (
        Vec3(0.0, 0.0, 1.0),
        ((1, -1, -1), (-1, -1, -1), (-1, 1, -1), (1, 1, -1)),
    ),
    # top
    (
        Vec3(0.0, 1.0, 0.0),
        ((-1, 1, 1), (1, 1, 1), (1, 1, -1), (-1, 1, -1)),
    ),
    # bottom
    (
        Vec3(0.0, -1.0, 0.0),
        ((-1, -1, -1), (1, -1, -1), (1, -1, 1), (-1, -1, 1)),
    ),
)

_FACE_TEX_COORDS = (Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(1.0, 1.0), Vec2(0.0, 1.0))
_FACE_INDICES = (0, 1, 2, 2, 3, 0)


def create_sphere(radius: float = 1.0, sectors: int = 36, stacks: int = 18) -> Mesh:
    """A UV sphere centred on the origin.

    Rings run from the south pole (stack 0) to the north pole; each ring has
    sectors + 1 vertices so the texture seam is duplicated.
    """
    if radius == 0:
        raise ValueError("sphere radius must be non-zero")
    if sectors <= 0 or stacks <= 0:
        raise ValueError(f"sectors and stacks must be positive, got {sectors} and {stacks}")

    sector_step = 2.0 * math.pi / sectors
    stack_step = math.pi / stacks
    inv_radius = 1.0 / radius

    vertices = []
    for i in range(stacks + 1):
        phi = -(math.pi / 2.0) + i * stack_step
        rho = radius * math.cos(phi)
        y = radius * math.sin(phi)
        for j in range(sectors + 1):
            theta = j * sector_step
            position = Vec3(rho * math.cos(theta), y, rho * math.sin(theta))
            vertices.append(
                Vertex(
                    position=position,
                    normal=position * inv_radius,
                    tex_coord=Vec2(1.0 - j / sectors, i / stacks),
                )
            )

    indices = []
    ring = sectors + 1
    for i in range(stacks):
        for j in range(sectors):
            k1 = i * ring + j
            k2 = k1 + ring
            if i != 0:
                indices.extend((k1, k2, k1 + 1))
            if i != stacks - 1:
                indices.extend((k1 + 1, k2, k2 + 1))

    return Mesh.create(vertices, indices, Mat4.identity())


def create_cube(side: float = 1.0) -> Mesh:
    """An axis-aligned cube centred on the origin with four vertices per face."""
    half = 0.5 * side
    vertices = []
    indices = []
    for face_number, (normal, corners) in enumerate(_CUBE_FACES):
        base = face_number * 4
        for (sx, sy, sz), tex_coord in zip(corners, _FACE_TEX_COORDS):
            vertices.append(
                Vertex(
                    position=Vec3(sx * half, sy * half, sz * half),
                    normal=normal,
                    tex_coord=tex_coord,
                )
            )
        indices.extend(base + offset for offset in _FACE_INDICES)
    return Mesh.create(vertices, indices, Mat4.identity())