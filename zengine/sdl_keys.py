"""Engine key names resolved against the SDL key-code mapping."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from zengine.keycodes import KeyCode

__all__ = ["SDL_KEY_PREFIX", "SDL_KEY_MAP", "sdl_engine_key"]

SDL_KEY_PREFIX = "ZENGINE_KEY_"

SDL_KEY_MAP: Mapping[str, KeyCode] = MappingProxyType(
    {f"{SDL_KEY_PREFIX}{code.name}": code for code in KeyCode}
)


def sdl_engine_key(name: str) -> KeyCode:
    """Return the SDL key code for an engine key name.

    The name may be given with or without the ``ZENGINE_KEY_`` prefix and in
    any letter case, e.g. ``"ZENGINE_KEY_A"``, ``"A"`` or ``"mouse_left"``.
    """
    key = name.strip().upper()
    if not key.startswith(SDL_KEY_PREFIX):
        key = SDL_KEY_PREFIX + key
    try:
        return SDL_KEY_MAP[key]
    except KeyError:
        raise KeyError(f"no SDL key is defined for {name!r}") from None