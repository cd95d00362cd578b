"""Interleaved vertex storage: position, normal and texture coordinate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

import numpy as np

__all__ = ["ElementLayout", "GraphicVertex"]


@dataclass(frozen=True)
class ElementLayout:
    """One attribute of a vertex layout: a number of floats and a name."""

    count: int
    name: str

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError(f"element {self.name!r} must have a positive count")


def _component(values: Sequence[float] | np.ndarray, size: int, name: str) -> np.ndarray:
    arr = np.array(values, dtype=np.float32)
    if arr.shape != (size,):
        raise ValueError(f"{name} needs {size} components, got shape {arr.shape}")
    return arr


class GraphicVertex:
    """A vertex whose attributes are also kept as one flat float buffer."""

    LAYOUT: ClassVar[tuple[ElementLayout, ...]] = (
        ElementLayout(3, "position"),
        ElementLayout(3, "normal"),
        ElementLayout(2, "texture_coord"),
    )
    STRIDE: ClassVar[int] = sum(element.count for element in LAYOUT)

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        normal: Sequence[float] = (0.0, 0.0, 0.0),
        texture_coord: Sequence[float] = (0.0, 0.0),
    ) -> None:
        self._buffer = np.zeros(self.STRIDE, dtype=np.float32)
        self.position = position
        self.normal = normal
        self.texture_coord = texture_coord

    @property
    def position(self) -> np.ndarray:
        return self._buffer[0:3].copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._buffer[0:3] = _component(value, 3, "position")

    @property
    def normal(self) -> np.ndarray:
        return self._buffer[3:6].copy()

    @normal.setter
    def normal(self, value: Sequence[float]) -> None:
        self._buffer[3:6] = _component(value, 3, "normal")

    @property
    def texture_coord(self) -> np.ndarray:
        return self._buffer[6:8].copy()

    @texture_coord.setter
    def texture_coord(self, value: Sequence[float]) -> None:
        self._buffer[6:8] = _component(value, 2, "texture_coord")

    @property
    def buffer(self) -> np.ndarray:
        """The eight floats of this vertex in layout order."""
        return self._buffer.copy()

    def transform_position(self, matrix: Sequence[Sequence[float]] | np.ndarray) -> None:
        """Replace the position by its image under a 4x4 transform."""
        mat = np.asarray(matrix, dtype=float)
        if mat.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {mat.shape}")
        homogeneous = mat @ np.append(self._buffer[0:3].astype(float), 1.0)
        self.position = homogeneous[:3]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphicVertex):
            return NotImplemented
        return bool(np.array_equal(self._buffer, other._buffer))

    def __repr__(self) -> str:
        return (
            f"GraphicVertex(position={self.position.tolist()}, "
            f"normal={self.normal.tolist()}, texture_coord={self.texture_coord.tolist()})"
        )