import pytest

from zengine.layers import Layer, LayerStack


@pytest.fixture
def trio():
    return Layer("a"), Layer("b"), Layer("c")


def test_push_layer_inserts_at_insertion_point(trio):
    a, b, c = trio
    stack = LayerStack()
    for layer in trio:
        stack.push_layer(layer)
    assert stack.layers == (c, b, a)
    assert stack.current_index == 0


def test_overlay_stays_on_top(trio):
    a, b, overlay = trio
    stack = LayerStack()
    stack.push_layer(a)
    stack.push_overlay_layer(overlay)
    stack.push_layer(b)
    assert stack.layers == (b, a, overlay)


def test_first_overlay_sets_insertion_point(trio):
    a, b, _ = trio
    stack = LayerStack()
    stack.push_overlay_layer(a)
    stack.push_layer(b)
    assert stack.layers == (b, a)


def test_pop_layer_moves_insertion_point(trio):
    a, b, c = trio
    stack = LayerStack()
    for layer in trio:
        stack.push_layer(layer)
    stack.pop_layer(b)
    assert stack.layers == (c, a)
    assert stack.current_index == 1
    d = Layer("d")
    stack.push_layer(d)
    assert stack.layers == (c, d, a)


def test_pop_layer_without_argument_removes_first(trio):
    a, b, _ = trio
    stack = LayerStack()
    stack.push_overlay_layer(a)
    stack.push_overlay_layer(b)
    stack.pop_layer()
    assert stack.layers == (b,)


def test_pop_overlay_layer_without_argument_removes_last(trio):
    a, b, _ = trio
    stack = LayerStack()
    stack.push_overlay_layer(a)
    stack.push_overlay_layer(b)
    stack.pop_overlay_layer()
    assert stack.layers == (a,)


def test_pop_overlay_layer_by_identity(trio):
    a, b, c = trio
    stack = LayerStack()
    for layer in trio:
        stack.push_overlay_layer(layer)
    stack.pop_overlay_layer(b)
    assert stack.layers == (a, c)
    assert b not in stack


def test_pop_missing_layer_is_ignored(trio):
    a, b, _ = trio
    stack = LayerStack()
    stack.push_layer(a)
    stack.pop_layer(b)
    stack.pop_overlay_layer(b)
    assert stack.layers == (a,)


def test_pop_on_empty_stack_leaves_it_empty():
    stack = LayerStack()
    stack.pop_layer()
    stack.pop_overlay_layer()
    assert len(stack) == 0
    assert list(stack) == []


def test_layers_are_matched_by_identity():
    first = Layer("same")
    second = Layer("same")
    stack = LayerStack()
    stack.push_layer(first)
    stack.pop_layer(second)
    assert stack.layers == (first,)