import numpy as np
import pytest

from zengine import maths
from zengine.vertex import ElementLayout, GraphicVertex


def test_layout_names_and_counts():
    assert [(e.count, e.name) for e in GraphicVertex.LAYOUT] == [
        (3, "position"),
        (3, "normal"),
        (2, "texture_coord"),
    ]
    assert GraphicVertex.STRIDE == 8
    vertex = GraphicVertex()
    assert len(vertex.buffer) == sum(e.count for e in GraphicVertex.LAYOUT)


def test_element_layout_rejects_non_positive_count():
    with pytest.raises(ValueError):
        ElementLayout(0, "empty")


def test_default_vertex_is_zero():
    vertex = GraphicVertex()
    assert np.array_equal(vertex.buffer, np.zeros(8, dtype=np.float32))


def test_buffer_holds_components_in_layout_order():
    vertex = GraphicVertex((-0.75, -0.5, 1.0), (0.0, 0.0, 1.0), (1.0, 1.0))
    assert vertex.buffer.tolist() == [-0.75, -0.5, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0]


def test_setters_update_buffer():
    vertex = GraphicVertex()
    vertex.position = (1.0, 2.0, 3.0)
    vertex.normal = (4.0, 5.0, 6.0)
    vertex.texture_coord = (7.0, 8.0)
    assert vertex.buffer.tolist() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    assert vertex.position.tolist() == [1.0, 2.0, 3.0]
    assert vertex.texture_coord.tolist() == [7.0, 8.0]


def test_returned_arrays_are_copies():
    vertex = GraphicVertex((1.0, 2.0, 3.0))
    position = vertex.position
    position[0] = 99.0
    assert vertex.position.tolist() == [1.0, 2.0, 3.0]


def test_wrong_component_size_raises():
    with pytest.raises(ValueError):
        GraphicVertex(position=(1.0, 2.0))
    vertex = GraphicVertex()
    with pytest.raises(ValueError):
        vertex.texture_coord = (1.0, 2.0, 3.0)


def test_transform_position_translates_only_position():
    vertex = GraphicVertex((1.0, 2.0, 3.0), (0.0, 1.0, 0.0), (0.5, 0.25))
    vertex.transform_position(maths.translate(np.identity(4), (1.0, 1.0, 1.0)))
    assert vertex.position.tolist() == [2.0, 3.0, 4.0]
    assert vertex.normal.tolist() == [0.0, 1.0, 0.0]
    assert vertex.texture_coord.tolist() == [0.5, 0.25]


def test_transform_identity_leaves_vertex_unchanged():
    vertex = GraphicVertex((0.75, 0.5, 1.0), (0.0, 0.0, 0.0), (1.0, 1.0))
    before = vertex.buffer
    vertex.transform_position(np.identity(4))
    assert np.array_equal(vertex.buffer, before)


def test_transform_rejects_bad_matrix():
    with pytest.raises(ValueError):
        GraphicVertex().transform_position(np.identity(3))


def test_equality_follows_buffer():
    a = GraphicVertex((1.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, 1.0))
    b = GraphicVertex((1.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, 1.0))
    assert a == b
    b.texture_coord = (1.0, 1.0)
    assert not a == b