"""Triangle meshes made of vertices, indices and sub-meshes."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from typing import Iterable, Optional, Sequence, Tuple

from noether.buffers import (
    BufferElementType,
    BufferLayout,
    IndexBuffer,
    VertexArray,
    VertexBuffer,
)
from noether.matrix import Mat4
from noether.vector import Vec2, Vec3


@dataclass(frozen=True)
class Vertex:
    position: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    tex_coord: Vec2 = field(default_factory=Vec2)

    @classmethod
    def buffer_layout(cls) -> BufferLayout:
        return BufferLayout(
            [
                (BufferElementType.FLOAT3, "a_Position"),
                (BufferElementType.FLOAT3, "a_Normal"),
                (BufferElementType.FLOAT2, "a_TexCoord"),
            ]
        )


@dataclass(frozen=True)
class SubMesh:
    vertex_base: int
    vertex_count: int
    index_base: int
    index_count: int
    world_transform: Mat4
    local_transform: Mat4


class Mesh:
    """Vertices and indices uploaded as one vertex array, split into sub-meshes."""

    def __init__(
        self,
        vertices: Iterable[Vertex],
        indices: Iterable[int],
        sub_meshes: Iterable[SubMesh],
    ) -> None:
        self.vertices: Tuple[Vertex, ...] = tuple(vertices)
        self.indices: Tuple[int, ...] = tuple(indices)
        self.sub_meshes: Tuple[SubMesh, ...] = tuple(sub_meshes)
        floats = chain.from_iterable(
            (*v.position, *v.normal, *v.tex_coord) for v in self.vertices
        )
        self.vertex_buffer = VertexBuffer(list(floats))
        self.index_buffer = IndexBuffer(self.indices)
        self.vertex_array = VertexArray(
            self.vertex_buffer, self.index_buffer, Vertex.buffer_layout()
        )

    @classmethod
    def create(
        cls,
        vertices: Sequence[Vertex],
        indices: Sequence[int],
        transform: Optional[Mat4] = None,
    ) -> "Mesh":
        """A mesh with one sub-mesh covering all vertices and indices."""
        vertices = tuple(vertices)
        indices = tuple(indices)
        if transform is None:
            transform = Mat4.identity()
        sub_mesh = SubMesh(
            vertex_base=0,
            vertex_count=len(vertices),
            index_base=0,
            index_count=len(indices),
            world_transform=transform,
            local_transform=Mat4.identity(),
        )
        return cls(vertices, indices, [sub_mesh])

    def vertex_count(self) -> int:
        return len(self.vertices)

    def index_count(self) -> int:
        return len(self.indices)