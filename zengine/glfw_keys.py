"""Engine key names resolved against the GLFW key-code mapping."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from zengine.keycodes import GlfwKeyCode

__all__ = ["GLFW_KEY_PREFIX", "GLFW_KEY_MAP", "glfw_engine_key"]

GLFW_KEY_PREFIX = "ZENGINE_KEY_"
_ENGINE_PREFIX = "ZENGINE_"

_MOUSE_NAMES = {
    GlfwKeyCode.MOUSE_BUTTON_LEFT: "ZENGINE_KEY_MOUSE_LEFT",
    GlfwKeyCode.MOUSE_BUTTON_RIGHT: "ZENGINE_KEY_MOUSE_RIGHT",
    GlfwKeyCode.MOUSE_BUTTON_MIDDLE: "ZENGINE_KEY_MOUSE_MIDDLE",
    GlfwKeyCode.MOUSE_BUTTON_4: "ZENGINE_MOUSE_BUTTON_4",
    GlfwKeyCode.MOUSE_BUTTON_5: "ZENGINE_MOUSE_BUTTON_5",
    GlfwKeyCode.MOUSE_BUTTON_6: "ZENGINE_MOUSE_BUTTON_6",
    GlfwKeyCode.MOUSE_BUTTON_7: "ZENGINE_MOUSE_BUTTON_7",
    GlfwKeyCode.MOUSE_BUTTON_8: "ZENGINE_MOUSE_BUTTON_8",
}


def _engine_name(code: GlfwKeyCode) -> str:
    if code in _MOUSE_NAMES:
        return _MOUSE_NAMES[code]
    return _ENGINE_PREFIX + code.name


GLFW_KEY_MAP: Mapping[str, GlfwKeyCode] = MappingProxyType(
    {_engine_name(code): code for code in GlfwKeyCode}
)


def glfw_engine_key(name: str) -> GlfwKeyCode:
    """Return the GLFW key code for an engine key name.

    Accepts the full engine name (``"ZENGINE_KEY_A"``, ``"ZENGINE_MOUSE_BUTTON_4"``)
    or a short form without the prefix (``"A"``, ``"KEY_A"``, ``"mouse_left"``),
    in any letter case.
    """
    key = name.strip().upper()
    if key.startswith(_ENGINE_PREFIX):
        candidates = [key]
    else:
        candidates = [GLFW_KEY_PREFIX + key, _ENGINE_PREFIX + key]
    for candidate in candidates:
        code = GLFW_KEY_MAP.get(candidate)
        if code is not None:
            return code
    raise KeyError(f"no GLFW key is defined for {name!r}")