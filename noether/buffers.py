"""Vertex and index buffers and the layouts that describe vertex data."""

from __future__ import annotations

import struct
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterable, Iterator, Optional, Tuple, Union

_MAX_INDEX = 0xFFFFFFFF

BufferData = Union[bytes, bytearray, memoryview, Iterable[float]]


class BufferElementType(Enum):
    NONE = auto()
    INT = auto()
    INT2 = auto()
    INT3 = auto()
    INT4 = auto()
    FLOAT = auto()
    FLOAT2 = auto()
    FLOAT3 = auto()
    FLOAT4 = auto()
    MAT2 = auto()
    MAT3 = auto()
    MAT4 = auto()
    BOOL = auto()


_SIZES = {
    BufferElementType.INT: 4,
    BufferElementType.INT2: 8,
    BufferElementType.INT3: 12,
    BufferElementType.INT4: 16,
    BufferElementType.FLOAT: 4,
    BufferElementType.FLOAT2: 8,
    BufferElementType.FLOAT3: 12,
    BufferElementType.FLOAT4: 16,
    BufferElementType.MAT2: 16,
    BufferElementType.MAT3: 36,
    BufferElementType.MAT4: 64,
    BufferElementType.BOOL: 4,
}

_COMPONENTS = {
    BufferElementType.INT: 1,
    BufferElementType.INT2: 2,
    BufferElementType.INT3: 3,
    BufferElementType.INT4: 4,
    BufferElementType.FLOAT: 1,
    BufferElementType.FLOAT2: 2,
    BufferElementType.FLOAT3: 3,
    BufferElementType.FLOAT4: 4,
    BufferElementType.MAT2: 4,
    BufferElementType.MAT3: 9,
    BufferElementType.MAT4: 16,
    BufferElementType.BOOL: 1,
}


def element_size(element_type: BufferElementType) -> int:
    """Size in bytes of one element of the given type; 0 for NONE."""
    return _SIZES.get(BufferElementType(element_type), 0)


def component_count(element_type: BufferElementType) -> int:
    """Number of scalar components in one element of the given type; 0 for NONE."""
    return _COMPONENTS.get(BufferElementType(element_type), 0)


@dataclass(frozen=True)
class BufferElement:
    """One named attribute inside a vertex."""

    type: BufferElementType
    name: str
    normalised: bool = False
    offset: int = 0

    @property
    def size(self) -> int:
        return element_size(self.type)

    @property
    def component_count(self) -> int:
        return component_count(self.type)


ElementSpec = Union[BufferElement, Tuple]


class BufferLayout:
    """An ordered list of vertex attributes with their byte offsets."""

    def __init__(self, elements: Iterable[ElementSpec] = ()) -> None:
        placed = []
        offset = 0
        for item in elements:
            element = item if isinstance(item, BufferElement) else BufferElement(*item)
            element = replace(element, offset=offset)
            placed.append(element)
            offset += element.size
        self._elements: Tuple[BufferElement, ...] = tuple(placed)
        self._stride = offset

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> BufferElement:
        return self._elements[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BufferLayout):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        return f"BufferLayout({list(self._elements)!r})"

    def stride(self) -> int:
        """Bytes from the start of one vertex to the start of the next."""
        return self._stride


def _as_bytes(data: BufferData) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    values = [float(v) for v in data]
    return struct.pack(f"<{len(values)}f", *values)


class VertexBuffer:
    """A fixed-size block of vertex data.

    Data may be raw bytes or a sequence of floats, packed as little-endian
    32-bit floats.
    """

    def __init__(self, data: Optional[BufferData] = None, size: Optional[int] = None) -> None:
        if data is None:
            if size is None:
                raise TypeError("a vertex buffer needs data or a size")
            if size < 0:
                raise ValueError(f"negative buffer size: {size}")
            self._data = bytearray(size)
            return
        raw = _as_bytes(data)
        if size is None:
            size = len(raw)
        if size < 0 or size > len(raw):
            raise ValueError(f"size {size} does not fit data of {len(raw)} bytes")
        self._data = bytearray(raw[:size])

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    def set_data(self, data: BufferData, size: Optional[int] = None) -> None:
        """Overwrite the start of the buffer with size bytes of data."""
        raw = _as_bytes(data)
        if size is None:
            size = len(raw)
        if size < 0 or size > len(raw):
            raise ValueError(f"size {size} does not fit data of {len(raw)} bytes")
        if size > len(self._data):
            raise ValueError(f"{size} bytes do not fit a buffer of {len(self._data)} bytes")
        self._data[:size] = raw[:size]


class IndexBuffer:
    """A sequence of unsigned 32-bit vertex indices."""

    def __init__(self, indices: Iterable[int]) -> None:
        values = tuple(int(i) for i in indices)
        for value in values:
            if not 0 <= value <= _MAX_INDEX:
                raise ValueError(f"index out of the unsigned 32-bit range: {value}")
        self._indices = values

    @property
    def indices(self) -> Tuple[int, ...]:
        return self._indices

    def __len__(self) -> int:
        return len(self._indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self._indices)


@dataclass(frozen=True)
class VertexArray:
    """Vertex data, its indices and the layout that describes each vertex."""

    vertex_buffer: VertexBuffer
    index_buffer: IndexBuffer
    layout: BufferLayout

    def index_count(self) -> int:
        return len(self.index_buffer)