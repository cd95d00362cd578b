"""Orthographic, perspective and orbit cameras."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from zengine.maths import (
    angle_axis,
    clamp,
    look_at,
    normalize,
    ortho,
    perspective,
    quat_multiply,
    quat_rotate,
    radians,
    rotate,
    translate,
)

__all__ = ["Camera", "OrthographicCamera", "PerspectiveCamera", "OrbitCamera"]

Vector = Sequence[float] | np.ndarray

_MIN_ORBIT_RADIUS = 1.5
_MAX_ORBIT_RADIUS = 300.0
_PITCH_MARGIN = 0.1


def _vec3(values: Vector, name: str) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"{name} needs 3 components, got shape {arr.shape}")
    return arr


def _mat4(values: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return arr


class Camera:
    """Position, target and the projection and view matrices derived from them."""

    def __init__(self, position: Vector = (0.0, 0.0, 0.0), target: Vector = (0.0, 0.0, 0.0)) -> None:
        self._position = _vec3(position, "position")
        self._target = _vec3(target, "target")
        self._world_up = np.array([0.0, 1.0, 0.0])
        self._forward = np.array([0.0, 0.0, 1.0])
        self._right = np.array([1.0, 0.0, 0.0])
        self._up = np.array([0.0, 1.0, 0.0])
        self._projection = np.identity(4)
        self._view_matrix = np.identity(4)
        self._view_projection = np.identity(4)

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Vector) -> None:
        self._position = _vec3(value, "position")
        self._position_changed()

    @property
    def target(self) -> np.ndarray:
        return self._target.copy()

    @target.setter
    def target(self, value: Vector) -> None:
        self._target = _vec3(value, "target")
        self._target_changed()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @projection_matrix.setter
    def projection_matrix(self, value: Sequence[Sequence[float]] | np.ndarray) -> None:
        self._projection = _mat4(value)
        self._projection_changed()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view_matrix.copy()

    @property
    def view_projection(self) -> np.ndarray:
        return self._view_projection.copy()

    @property
    def world_up(self) -> np.ndarray:
        return self._world_up.copy()

    @property
    def forward(self) -> np.ndarray:
        return self._forward.copy()

    @property
    def right(self) -> np.ndarray:
        return self._right.copy()

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    def _position_changed(self) -> None:
        """Hook run after the position is replaced."""

    def _target_changed(self) -> None:
        """Hook run after the target is replaced."""

    def _projection_changed(self) -> None:
        """Hook run after the projection matrix is replaced."""


class OrthographicCamera(Camera):
    """2D camera with an orthographic projection and a rotation about z."""

    def __init__(self, left: float, right: float, bottom: float, top: float, degree_angle: float = 0.0) -> None:
        super().__init__()
        self._projection = ortho(left, right, bottom, top, -1.0, 1.0)
        self._angle = radians(degree_angle)
        self.update_view_matrix()

    @property
    def rotation(self) -> float:
        """Rotation about the z axis, in radians."""
        return self._angle

    @rotation.setter
    def rotation(self, radian_angle: float) -> None:
        self._angle = float(radian_angle)
        self.update_view_matrix()

    def _position_changed(self) -> None:
        self.update_view_matrix()

    def _projection_changed(self) -> None:
        self.update_view_matrix()

    def update_view_matrix(self) -> None:
        """Recompute the view as the inverse of the camera transform."""
        transform = translate(np.identity(4), self._position) @ rotate(
            np.identity(4), self._angle, (0.0, 0.0, 1.0)
        )
        self._view_matrix = np.linalg.inv(transform)
        self._view_projection = self._projection @ self._view_matrix


class PerspectiveCamera(Camera):
    """3D camera with a perspective projection looking at a target."""

    def __init__(
        self,
        field_of_view: float,
        aspect_ratio: float,
        near: float,
        far: float,
        position: Vector = (0.0, 0.0, 1.0),
        target: Vector = (0.0, 0.0, 0.0),
    ) -> None:
        super().__init__(position, target)
        self._field_of_view = float(field_of_view)
        self._yaw_angle = 0.0
        self._pitch_angle = 0.0
        self._radius = 0.0
        self._projection = perspective(field_of_view, aspect_ratio, near, far)
        self.update_coordinate_vectors()
        self.update_view_matrix()

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @field_of_view.setter
    def field_of_view(self, rad_angle: float) -> None:
        self._field_of_view = float(rad_angle)
        self.update_coordinate_vectors()
        self.update_view_matrix()

    def _position_changed(self) -> None:
        self.update_coordinate_vectors()
        self.update_view_matrix()

    def _target_changed(self) -> None:
        self.update_coordinate_vectors()
        self.update_view_matrix()

    def _projection_changed(self) -> None:
        self.update_coordinate_vectors()
        self.update_view_matrix()

    def update_coordinate_vectors(self) -> None:
        """Rebuild the forward, right and up axes from position and target."""
        self._forward = normalize(self._position - self._target)
        self._right = normalize(np.cross(self._world_up, self._forward))
        self._up = np.cross(self._forward, self._right)

    def update_view_matrix(self) -> None:
        """Recompute the view and view-projection matrices."""
        self._view_matrix = look_at(self._position, self._target, self._up)
        self._view_projection = self._projection @ self._view_matrix


class OrbitCamera(PerspectiveCamera):
    """Perspective camera that moves on a sphere around its target."""

    def __init__(
        self,
        field_of_view: float,
        aspect_ratio: float,
        near: float,
        far: float,
        yaw_rad: float = 0.0,
        pitch_rad: float = 0.0,
        position: Vector = (0.0, 0.0, 1.0),
        target: Vector = (0.0, 0.0, 0.0),
    ) -> None:
        super().__init__(field_of_view, aspect_ratio, near, far, position, target)
        self._yaw_angle = float(yaw_rad)
        self._pitch_angle = float(pitch_rad)

    @property
    def yaw_angle(self) -> float:
        """Yaw in radians."""
        return self._yaw_angle

    @property
    def pitch_angle(self) -> float:
        """Pitch in radians."""
        return self._pitch_angle

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = clamp(float(value), _MIN_ORBIT_RADIUS, _MAX_ORBIT_RADIUS)
        self._position = self._target + self._radius * self._forward
        self.update_view_matrix()

    def set_yaw_angle(self, degree: float) -> None:
        """Set the yaw from an angle in degrees."""
        self._yaw_angle = radians(degree)

    def set_pitch_angle(self, degree: float) -> None:
        """Set the pitch from an angle in degrees, kept short of straight up or down."""
        limit = math.pi / 2.0 - _PITCH_MARGIN
        self._pitch_angle = clamp(radians(degree), -limit, limit)

    def _target_changed(self) -> None:
        super()._target_changed()
        self._radius = float(np.linalg.norm(self._position - self._target))

    def _position_changed(self) -> None:
        offset = self._position - self._target
        self._radius = float(np.linalg.norm(offset))

        around_y = angle_axis(self._yaw_angle, (0.0, 1.0, 0.0))
        around_x = angle_axis(self._pitch_angle, (1.0, 0.0, 0.0))
        rotation = normalize(quat_multiply(around_y, around_x))

        direction = quat_rotate(rotation, normalize(offset))
        self._position = self._target + self._radius * direction
        self._forward = normalize(self._position - self._target)

        self.update_coordinate_vectors()
        self.update_view_matrix()

    def orbit(self, yaw_degree: float, pitch_degree: float) -> None:
        """Turn the camera around its target by the given angles in degrees."""
        around_y = angle_axis(radians(yaw_degree), self._up)
        around_x = angle_axis(radians(pitch_degree), self._right)
        rotation = normalize(quat_multiply(around_y, around_x))

        self._forward = quat_rotate(rotation, self._forward)
        self._position = self._target + self._radius * self._forward

        self.update_coordinate_vectors()
        self.update_view_matrix()