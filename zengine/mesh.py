"""Meshes pair a geometry with a material; lights are meshes with colours."""

from __future__ import annotations

from typing import Any, ClassVar, Sequence

import numpy as np

__all__ = ["Mesh", "Light"]


def _color(values: Sequence[float] | np.ndarray, name: str) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"{name} needs 3 components, got shape {arr.shape}")
    return arr


class Mesh:
    """A geometry and the material it is drawn with."""

    _IS_LIGHT: ClassVar[bool] = False

    def __init__(self, geometry: Any = None, material: Any = None) -> None:
        self.geometry = geometry
        self.material = material
        self._unique_identifier = 0

    @property
    def unique_identifier(self) -> int:
        return self._unique_identifier

    @unique_identifier.setter
    def unique_identifier(self, value: int) -> None:
        value = int(value)
        if value < 0:
            raise ValueError(f"unique identifier must not be negative, got {value}")
        self._unique_identifier = value

    @property
    def is_light(self) -> bool:
        return self._IS_LIGHT

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._unique_identifier}, "
            f"geometry={self.geometry!r}, material={self.material!r})"
        )


class Light(Mesh):
    """A mesh that emits light with ambient, diffuse and specular colours."""

    _IS_LIGHT: ClassVar[bool] = True

    def __init__(self, geometry: Any = None, material: Any = None) -> None:
        super().__init__(geometry, material)
        self._ambient_color = np.zeros(3)
        self._diffuse_color = np.zeros(3)
        self._specular_color = np.zeros(3)

    @property
    def ambient_color(self) -> np.ndarray:
        return self._ambient_color.copy()

    @ambient_color.setter
    def ambient_color(self, value: Sequence[float] | np.ndarray) -> None:
        self._ambient_color = _color(value, "ambient_color")

    @property
    def diffuse_color(self) -> np.ndarray:
        return self._diffuse_color.copy()

    @diffuse_color.setter
    def diffuse_color(self, value: Sequence[float] | np.ndarray) -> None:
        self._diffuse_color = _color(value, "diffuse_color")

    @property
    def specular_color(self) -> np.ndarray:
        return self._specular_color.copy()

    @specular_color.setter
    def specular_color(self, value: Sequence[float] | np.ndarray) -> None:
        self._specular_color = _color(value, "specular_color")