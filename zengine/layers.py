"""Ordered stack of layers with a separate overlay region at the top."""

from __future__ import annotations

from typing import Iterator

__all__ = ["Layer", "LayerStack"]


class Layer:
    """A named slice of the application that is updated and drawn in order."""

    def __init__(self, name: str = "default_layer") -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class LayerStack:
    """Layers in drawing order.

    Regular layers are inserted at the current insertion point; overlay
    layers are always appended at the end. Layers are matched by identity.
    """

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._current = 0

    @property
    def layers(self) -> tuple[Layer, ...]:
        return tuple(self._layers)

    @property
    def current_index(self) -> int:
        """Position at which the next regular layer will be inserted."""
        return self._current

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(tuple(self._layers))

    def __contains__(self, layer: object) -> bool:
        return any(item is layer for item in self._layers)

    def _index_of(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def _clamp_current(self) -> None:
        self._current = min(self._current, len(self._layers))

    def push_layer(self, layer: Layer) -> None:
        """Insert ``layer`` at the insertion point, which then points at it."""
        if not self._layers:
            self._layers.append(layer)
            self._current = 0
        else:
            self._layers.insert(self._current, layer)

    def push_overlay_layer(self, layer: Layer) -> None:
        """Append ``layer`` on top of every other layer."""
        self._layers.append(layer)
        if len(self._layers) == 1:
            self._current = 0

    def pop_layer(self, layer: Layer | None = None) -> None:
        """Remove ``layer``, or the first layer when none is given.

        The insertion point moves to where the removed layer was.
        """
        index = 0 if layer is None else self._index_of(layer)
        if index is None or index >= len(self._layers):
            return
        del self._layers[index]
        self._current = index

    def pop_overlay_layer(self, layer: Layer | None = None) -> None:
        """Remove ``layer``, or the last layer when none is given."""
        if layer is None:
            if self._layers:
                self._layers.pop()
        else:
            index = self._index_of(layer)
            if index is None:
                return
            del self._layers[index]
        self._clamp_current()