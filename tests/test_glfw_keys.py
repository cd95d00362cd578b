import pytest

from zengine.glfw_keys import GLFW_KEY_MAP, glfw_engine_key
from zengine.keycodes import GlfwKeyCode


def test_full_name_resolves():
    assert glfw_engine_key("ZENGINE_KEY_A") is GlfwKeyCode.KEY_A
    assert glfw_engine_key("ZENGINE_KEY_A") == 65


def test_short_forms_resolve():
    assert glfw_engine_key("left") is GlfwKeyCode.KEY_LEFT
    assert glfw_engine_key("KEY_LEFT") is GlfwKeyCode.KEY_LEFT
    assert glfw_engine_key("  escape ") is GlfwKeyCode.KEY_ESCAPE


def test_mouse_names():
    assert glfw_engine_key("ZENGINE_KEY_MOUSE_LEFT") is GlfwKeyCode.MOUSE_BUTTON_LEFT
    assert glfw_engine_key("ZENGINE_KEY_MOUSE_RIGHT") is GlfwKeyCode.MOUSE_BUTTON_RIGHT
    assert glfw_engine_key("mouse_middle") is GlfwKeyCode.MOUSE_BUTTON_MIDDLE
    assert glfw_engine_key("ZENGINE_MOUSE_BUTTON_4") is GlfwKeyCode.MOUSE_BUTTON_4
    assert glfw_engine_key("mouse_button_8") is GlfwKeyCode.MOUSE_BUTTON_8


def test_unknown_key_name():
    assert glfw_engine_key("ZENGINE_KEY_UNKNOWN") is GlfwKeyCode.KEY_UNKNOWN


def test_every_code_has_exactly_one_name():
    assert len(GLFW_KEY_MAP) == len(GlfwKeyCode)
    assert set(GLFW_KEY_MAP.values()) == set(GlfwKeyCode)


@pytest.mark.parametrize("name", ["ZENGINE_KEY_RETURN", "NOPE", "ZENGINE_KEY_MOUSE_BUTTON_4"])
def test_missing_name_raises(name):
    with pytest.raises(KeyError):
        glfw_engine_key(name)


def test_map_is_read_only():
    with pytest.raises(TypeError):
        GLFW_KEY_MAP["ZENGINE_KEY_A"] = GlfwKeyCode.KEY_B  # type: ignore[index]
    assert glfw_engine_key("ZENGINE_KEY_A") is GlfwKeyCode.KEY_A
    assert GLFW_KEY_MAP["ZENGINE_KEY_A"] is GlfwKeyCode.KEY_A