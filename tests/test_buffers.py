import struct

import pytest

from noether.buffers import (
    BufferElement,
    BufferElementType,
    BufferLayout,
    IndexBuffer,
    VertexArray,
    VertexBuffer,
    component_count,
    element_size,
)


def test_element_sizes_from_source_table():
    assert element_size(BufferElementType.MAT4) == 64
    assert element_size(BufferElementType.MAT3) == 36
    assert element_size(BufferElementType.NONE) == 0


@pytest.mark.parametrize("element_type", list(BufferElementType))
def test_size_is_four_bytes_per_component(element_type):
    assert element_size(element_type) == 4 * component_count(element_type)


def test_component_count_for_none_is_zero():
    assert component_count(BufferElementType.NONE) == 0


def test_layout_offsets_are_running_sums():
    types = [BufferElementType.FLOAT3, BufferElementType.INT, BufferElementType.MAT2]
    layout = BufferLayout((t, f"a_{i}") for i, t in enumerate(types))
    running = 0
    for element, t in zip(layout, types):
        assert element.offset == running
        assert element.size == element_size(t)
        running += element_size(t)
    assert layout.stride() == running
    assert len(layout) == len(types)


def test_layout_accepts_elements_and_tuples_alike():
    a = BufferLayout([(BufferElementType.FLOAT2, "a_Position", True)])
    b = BufferLayout([BufferElement(BufferElementType.FLOAT2, "a_Position", True)])
    assert a == b
    assert a[0].normalised is True
    assert a[0].name == "a_Position"


def test_quad_layout_stride_matches_quad_vertex_size():
    layout = BufferLayout(
        [(BufferElementType.FLOAT2, "a_Position"), (BufferElementType.FLOAT2, "a_TexCoord")]
    )
    quad = [-1.0, -1.0, 0.0, 0.0, 1.0, -1.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, -1.0, 1.0, 0.0, 1.0]
    buffer = VertexBuffer(quad)
    assert buffer.size == 4 * layout.stride()
    assert layout[1].offset == layout[0].size


def test_empty_layout_has_zero_stride():
    assert BufferLayout().stride() == 0


def test_vertex_buffer_packs_floats_little_endian():
    values = [1.5, -2.0, 0.25]
    buffer = VertexBuffer(values)
    assert buffer.data == struct.pack("<3f", *values)


def test_vertex_buffer_bytes_round_trip():
    raw = b"\x01\x02\x03\x04"
    assert VertexBuffer(raw).data == raw


def test_vertex_buffer_of_size_is_zeroed():
    buffer = VertexBuffer(size=12)
    assert buffer.data == bytes(12)


def test_vertex_buffer_size_truncates_data():
    assert VertexBuffer(b"abcdef", size=3).data == b"abc"


def test_vertex_buffer_size_larger_than_data_raises():
    with pytest.raises(ValueError):
        VertexBuffer(b"ab", size=3)


def test_vertex_buffer_needs_data_or_size():
    with pytest.raises(TypeError):
        VertexBuffer()


def test_set_data_overwrites_start():
    buffer = VertexBuffer(b"abcdef")
    buffer.set_data(b"XY")
    assert buffer.data == b"XYcdef"


def test_set_data_too_large_raises():
    buffer = VertexBuffer(size=2)
    with pytest.raises(ValueError):
        buffer.set_data(b"abc")


def test_index_buffer_round_trip():
    indices = [0, 1, 2, 2, 3, 0]
    buffer = IndexBuffer(indices)
    assert list(buffer) == indices
    assert len(buffer) == len(indices)


@pytest.mark.parametrize("bad", [-1, 2**32])
def test_index_buffer_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        IndexBuffer([0, bad])


def test_vertex_array_index_count():
    indices = list(range(36))
    layout = BufferLayout([(BufferElementType.FLOAT3, "a_Position")])
    va = VertexArray(VertexBuffer(size=36 * layout.stride()), IndexBuffer(indices), layout)
    assert va.index_count() == len(indices)
    assert va.layout is layout