"""Look-at camera with a perspective projection."""

from __future__ import annotations

import math

from orbitgl.matrix4 import Matrix4
from orbitgl.vector3 import Vector3


class Camera:
    """A camera positioned in space, looking at a target point."""

    def __init__(
        self,
        position: Vector3 = Vector3(0.0, 0.0, 5.0),
        target: Vector3 = Vector3(),
        up: Vector3 = Vector3(0.0, 1.0, 0.0),
    ) -> None:
        self._position = position
        self._target = target
        self._up = up
        self._fov = math.radians(45.0)
        self._aspect_ratio = 16.0 / 9.0
        self._near_plane = 0.1
        self._far_plane = 100.0
        self._view: Matrix4 | None = None
        self._projection: Matrix4 | None = None

    @property
    def position(self) -> Vector3:
        return self._position

    @position.setter
    def position(self, value: Vector3) -> None:
        self._position = value
        self._view = None

    @property
    def target(self) -> Vector3:
        return self._target

    @target.setter
    def target(self, value: Vector3) -> None:
        self._target = value
        self._view = None

    @property
    def up(self) -> Vector3:
        return self._up

    @up.setter
    def up(self, value: Vector3) -> None:
        self._up = value
        self._view = None

    @property
    def fov(self) -> float:
        return self._fov

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def near_plane(self) -> float:
        return self._near_plane

    @property
    def far_plane(self) -> float:
        return self._far_plane

    def look_at(self, target: Vector3) -> None:
        self.target = target

    def move(self, offset: Vector3) -> None:
        """Translate both the position and the target."""
        self._position = self._position + offset
        self._target = self._target + offset
        self._view = None

    def rotate(self, yaw: float, pitch: float) -> None:
        """Turn the view direction by ``yaw`` about Y and ``pitch`` about the right axis."""
        forward = self.forward()
        right = forward.cross(self._up).normalized()
        forward = Matrix4.rotation_y(yaw).transform_vector(forward)
        forward = Matrix4.rotation(right, pitch).transform_vector(forward)
        self._target = self._position + forward
        self._view = None

    def view_matrix(self) -> Matrix4:
        if self._view is None:
            self._view = Matrix4.look_at(self._position, self._target, self._up)
        return self._view

    def projection_matrix(self) -> Matrix4:
        if self._projection is None:
            self._projection = Matrix4.perspective(
                self._fov, self._aspect_ratio, self._near_plane, self._far_plane
            )
        return self._projection

    def view_projection_matrix(self) -> Matrix4:
        return self.projection_matrix() * self.view_matrix()

    def set_perspective(self, fov: float, aspect: float, near: float, far: float) -> None:
        self._fov = fov
        self._aspect_ratio = aspect
        self._near_plane = near
        self._far_plane = far
        self._projection = None

    def set_orthographic(
        self, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> None:
        """Update the clip planes; the projection itself stays perspective."""
        self._near_plane = near
        self._far_plane = far
        self._projection = None

    def forward(self) -> Vector3:
        return (self._target - self._position).normalized()

    def right(self) -> Vector3:
        return self.forward().cross(self._up).normalized()