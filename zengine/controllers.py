"""Camera controllers driven by keyboard and mouse input."""

from __future__ import annotations

import math
import sys
from typing import Sequence

import numpy as np

from zengine.cameras import Camera, OrbitCamera, OrthographicCamera, PerspectiveCamera
from zengine.devices import Keyboard, Mouse
from zengine.glfw_keys import glfw_engine_key
from zengine.maths import ortho, perspective
from zengine.sdl_keys import sdl_engine_key

__all__ = [
    "KEY_LEFT",
    "KEY_RIGHT",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_Q",
    "KEY_D",
    "KEY_MOUSE_RIGHT",
    "OrthographicCameraController",
    "PerspectiveCameraController",
    "OrbitCameraController",
]

# The SDL key mapping is used on Linux, the GLFW one elsewhere.
_USES_SDL = sys.platform.startswith("linux")
_engine_key = sdl_engine_key if _USES_SDL else glfw_engine_key

KEY_LEFT = _engine_key("LEFT")
KEY_RIGHT = _engine_key("RIGHT")
KEY_UP = _engine_key("UP")
KEY_DOWN = _engine_key("DOWN")
KEY_Q = _engine_key("Q")
KEY_D = _engine_key("D")
KEY_MOUSE_RIGHT = _engine_key("MOUSE_RIGHT")

_ORBIT_MOVE_SPEED, _ORBIT_ROTATION_SPEED = (0.85, 0.005) if _USES_SDL else (1.0, 0.2)

Vector = Sequence[float] | np.ndarray


class _CameraController:
    """State shared by every camera controller."""

    def __init__(self, aspect_ratio: float, keyboard: Keyboard | None, mouse: Mouse | None) -> None:
        self.aspect_ratio = float(aspect_ratio)
        self.move_speed = 1.0
        self.rotation_speed = 1.0
        self.keyboard = keyboard if keyboard is not None else Keyboard.get()
        self.mouse = mouse if mouse is not None else Mouse.get()
        self._camera: Camera

    @property
    def camera(self) -> Camera:
        return self._camera

    @property
    def position(self) -> np.ndarray:
        """The camera's position."""
        return self._camera.position

    @position.setter
    def position(self, value: Vector) -> None:
        self._camera.position = value


class OrthographicCameraController(_CameraController):
    """Pans, zooms and optionally rotates an orthographic camera."""

    def __init__(
        self,
        aspect_ratio: float = 1.0,
        can_rotate: bool = False,
        *,
        keyboard: Keyboard | None = None,
        mouse: Mouse | None = None,
    ) -> None:
        super().__init__(aspect_ratio, keyboard, mouse)
        self.can_rotate = can_rotate
        self.zoom_factor = 1.0
        self.rotation_angle = 0.0
        self._position = np.zeros(3)
        extent = self.aspect_ratio * self.zoom_factor
        self._camera = OrthographicCamera(-extent, extent, -self.zoom_factor, self.zoom_factor)

    def initialize(self) -> None:
        """Push the controller's position and rotation to the camera."""
        self._camera.position = self._position
        self._camera.rotation = self.rotation_angle

    def update(self, dt: float) -> None:
        """Move the camera with the arrow keys; rotate with Q and D when allowed."""
        step = self.move_speed * dt
        if self.keyboard.is_key_pressed(KEY_LEFT):
            self._position[0] -= step
            self._camera.position = self._position
        if self.keyboard.is_key_pressed(KEY_RIGHT):
            self._position[0] += step
            self._camera.position = self._position
        if self.keyboard.is_key_pressed(KEY_UP):
            self._position[1] += step
            self._camera.position = self._position
        if self.keyboard.is_key_pressed(KEY_DOWN):
            self._position[1] -= step
            self._camera.position = self._position

        if self.can_rotate:
            if self.keyboard.is_key_pressed(KEY_Q):
                self.rotation_angle += self.rotation_speed * dt
            if self.keyboard.is_key_pressed(KEY_D):
                self.rotation_angle -= self.rotation_speed * dt
            self._camera.rotation = self.rotation_angle

    def update_projection_matrix(self) -> None:
        """Rebuild the projection from the aspect ratio and zoom factor."""
        extent = self.aspect_ratio * self.zoom_factor
        self._camera.projection_matrix = ortho(-extent, extent, -self.zoom_factor, self.zoom_factor)

    def on_mouse_wheel(self, offset_y: float) -> bool:
        """Zoom in or out; the event is not consumed."""
        self.zoom_factor -= self.move_speed * float(offset_y)
        self.update_projection_matrix()
        return False


class PerspectiveCameraController(_CameraController):
    """Moves a perspective camera and its target with the arrow keys."""

    DEFAULT_FIELD_OF_VIEW = math.radians(45.0)
    DEFAULT_NEAR = 0.1
    DEFAULT_FAR = 1000.0
    DEFAULT_POSITION = (0.0, 0.0, 10.0)

    def __init__(
        self,
        aspect_ratio: float = 1.0,
        *,
        keyboard: Keyboard | None = None,
        mouse: Mouse | None = None,
    ) -> None:
        super().__init__(aspect_ratio, keyboard, mouse)
        self.camera_fov = self.DEFAULT_FIELD_OF_VIEW
        self.camera_near = self.DEFAULT_NEAR
        self.camera_far = self.DEFAULT_FAR
        self.zoom_factor = self.camera_fov
        self._position = np.array(self.DEFAULT_POSITION, dtype=float)
        self.camera_target = np.zeros(3)
        self._camera = self._make_camera()

    def _make_camera(self) -> PerspectiveCamera:
        return PerspectiveCamera(
            self.camera_fov, self.aspect_ratio, self.camera_near, self.camera_far,
            self._position, self.camera_target,
        )

    def initialize(self) -> None:
        """Push the controller's target and position to the camera."""
        self._camera.target = self.camera_target
        self._camera.position = self._position

    def update(self, dt: float) -> None:
        """Left/right move the target along x; up/down move the camera along z."""
        step = self.move_speed * dt
        if self.keyboard.is_key_pressed(KEY_LEFT):
            self.camera_target[0] -= step
            self._camera.target = self.camera_target
        if self.keyboard.is_key_pressed(KEY_RIGHT):
            self.camera_target[0] += step
            self._camera.target = self.camera_target
        if self.keyboard.is_key_pressed(KEY_UP):
            self._position[2] -= step
            self._camera.position = self._position
        if self.keyboard.is_key_pressed(KEY_DOWN):
            self._position[2] += step
            self._camera.position = self._position

    def update_projection_matrix(self) -> None:
        """Rebuild the projection from the field of view and aspect ratio."""
        self._camera.projection_matrix = perspective(
            self.camera_fov, self.aspect_ratio, self.camera_near, self.camera_far
        )

    def on_mouse_wheel(self, offset_y: float, dt: float) -> bool:
        """Narrow or widen the field of view; the event is not consumed."""
        self.zoom_factor -= self.move_speed * float(offset_y) * dt
        self.camera_fov = self.zoom_factor
        self.update_projection_matrix()
        return False


class OrbitCameraController(PerspectiveCameraController):
    """Orbits the camera around its target while the right mouse button is held."""

    def __init__(
        self,
        aspect_ratio: float = 1.0,
        *,
        keyboard: Keyboard | None = None,
        mouse: Mouse | None = None,
    ) -> None:
        super().__init__(aspect_ratio, keyboard=keyboard, mouse=mouse)
        self._mouse_cursor = np.zeros(2)
        self._last_mouse_cursor = np.zeros(2)

    def _make_camera(self) -> OrbitCamera:
        return OrbitCamera(
            self.camera_fov, self.aspect_ratio, self.camera_near, self.camera_far,
            position=self._position, target=self.camera_target,
        )

    @property
    def mouse_cursor(self) -> tuple[float, float]:
        return float(self._mouse_cursor[0]), float(self._mouse_cursor[1])

    def initialize(self) -> None:
        """Set up the camera and the platform's orbit speeds."""
        super().initialize()
        self.move_speed = _ORBIT_MOVE_SPEED
        self.rotation_speed = _ORBIT_ROTATION_SPEED

    def update(self, dt: float) -> None:
        """Orbit by the cursor movement since the last update while right-dragging."""
        if self.mouse.is_key_pressed(KEY_MOUSE_RIGHT):
            delta = (self._mouse_cursor - self._last_mouse_cursor) * self.rotation_speed * dt
            self._camera.orbit(float(delta[0]), float(delta[1]))
        self._last_mouse_cursor = self._mouse_cursor.copy()

    def on_mouse_moved(self, x: float, y: float) -> bool:
        """Record the cursor position; the event is not consumed."""
        self._mouse_cursor = np.array([float(x), float(y)])
        return False

    def on_mouse_wheel(self, offset_y: float, dt: float) -> bool:
        """Move the camera closer to or further from its target."""
        camera: OrbitCamera = self._camera  # type: ignore[assignment]
        camera.radius = camera.radius + float(offset_y) * self.move_speed * dt
        return False