"""Input devices: per-type singletons that track pressed keys and buttons."""

from __future__ import annotations

from typing import ClassVar, TypeVar

__all__ = ["Device", "Keyboard", "Mouse"]

_D = TypeVar("_D", bound="Device")


class Device:
    """Base of all input devices; one shared instance per concrete type."""

    DEFAULT_NAME: ClassVar[str] = "abstract_device"
    _devices: ClassVar[dict[type, "Device"]] = {}

    def __init__(self, name: str | None = None) -> None:
        self.name = self.DEFAULT_NAME if name is None else name
        self._pressed: set[int] = set()

    @classmethod
    def get(cls: type[_D]) -> _D:
        """Return the shared instance of this device type, creating it on first use."""
        if cls is Device:
            raise TypeError("Device is abstract; ask for a concrete device type")
        device = Device._devices.get(cls)
        if device is None:
            device = cls()
            Device._devices[cls] = device
        return device  # type: ignore[return-value]

    def press(self, key: int) -> None:
        """Record ``key`` as held down."""
        self._pressed.add(int(key))

    def release(self, key: int) -> None:
        """Record ``key`` as no longer held down."""
        self._pressed.discard(int(key))

    def is_key_pressed(self, key: int) -> bool:
        return int(key) in self._pressed

    def is_key_released(self, key: int) -> bool:
        return not self.is_key_pressed(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Keyboard(Device):
    """The keyboard."""

    DEFAULT_NAME: ClassVar[str] = "keyboard_device"


class Mouse(Device):
    """The mouse: buttons and the cursor position."""

    DEFAULT_NAME: ClassVar[str] = "mouse_device"

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name)
        self._position = (0.0, 0.0)

    @property
    def position(self) -> tuple[float, float]:
        """The last cursor position, as ``(x, y)``."""
        return self._position

    def move_to(self, x: float, y: float) -> None:
        """Record a new cursor position."""
        self._position = (float(x), float(y))