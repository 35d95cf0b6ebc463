"""A camera that orbits, pans and zooms around a target point."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .camera import Camera, InputState
from .common import MATH_PI, look_at, max_float, normalize, perspective, rotation

_Y_AXIS = np.array([0.0, 1.0, 0.0])
_X_AXIS = np.array([1.0, 0.0, 0.0])


class OrbitCamera(Camera):
    """Left mouse button rotates, middle button pans, scroll zooms."""

    def __init__(self, inputs: InputState) -> None:
        self.fov = math.radians(45.0)
        self.near = 0.1
        self.far = 1000.0
        self.rot_x = 0.0
        self.rot_y = 0.0
        self.distance = 100.0
        self.offset = np.zeros(3)
        self.position = np.zeros(3)
        self.target = np.zeros(3)
        self.focus_min = np.zeros(3)
        self.focus_max = np.zeros(3)
        self.lock_mouse = True
        self.last_mouse_pos = np.asarray(inputs.mouse_pos, dtype=float)

    def update(self, dt: float, inputs: InputState) -> None:
        mouse_pos = np.asarray(inputs.mouse_pos, dtype=float)

        if inputs.left_button:
            self._rotate(mouse_pos - self.last_mouse_pos)
        elif inputs.middle_button:
            self._pan(mouse_pos - self.last_mouse_pos)

        scroll_y = inputs.mouse_scroll[1]
        if scroll_y > 0:
            self.distance -= self.distance / 5.0
        elif scroll_y < 0:
            self.distance += self.distance / 5.0

        self.distance = max_float(10.0, self.distance)
        self.far = max_float(150.0, self.distance * 2.0)
        self.near = self.distance / 10.0

        self.last_mouse_pos = mouse_pos

    def _orientation(self) -> np.ndarray:
        return rotation(self.rot_y, _Y_AXIS) @ rotation(self.rot_x, _X_AXIS)

    def get_view_matrix(self) -> np.ndarray:
        m = self._orientation()
        self.position = (m @ np.array([0.0, 0.0, self.distance, 1.0]))[:3]
        up = (m @ np.array([0.0, 1.0, 0.0, 1.0]))[:3]
        eye = self.position + self.offset
        target = self.target + self.offset
        return look_at(eye, target, up)

    def get_proj_matrix(self, width: int, height: int) -> np.ndarray:
        return perspective(self.fov, float(width) / float(height), self.near, self.far)

    def focus_on(self, low: Sequence[float], high: Sequence[float]) -> None:
        """Aim at the centre of the box [low, high] and back off to fit it."""
        self.focus_min = np.asarray(low, dtype=float)
        self.focus_max = np.asarray(high, dtype=float)
        self.offset = np.zeros(3)
        self.rot_x = -MATH_PI / 4.0
        self.rot_y = MATH_PI / 4.0
        self.target = self.focus_min + (self.focus_max - self.focus_min) * 0.5
        self.distance = self._required_distance()

    def _rotate(self, mouse_movement: np.ndarray) -> None:
        self.rot_x -= mouse_movement[1] * 0.003
        self.rot_y -= mouse_movement[0] * 0.003

    def _camera_side(self) -> np.ndarray:
        direction = self.target - self.position
        return normalize(np.cross(direction, _Y_AXIS))

    def _camera_up(self) -> np.ndarray:
        direction = self.target - self.position
        return normalize(np.cross(direction, self._camera_side()))

    def _pan(self, mouse_movement: np.ndarray) -> None:
        scale = 0.007 * (self.distance / 5.0)
        side = self._camera_side() * -mouse_movement[0] * scale
        up = self._camera_up() * -mouse_movement[1] * scale
        self.offset = self.offset + side + up

    def _required_distance(self) -> float:
        center = self.focus_min + (self.focus_max - self.focus_min) * 0.5
        r = max_float(
            float(np.linalg.norm(center - self.focus_min)),
            float(np.linalg.norm(center - self.focus_max)),
        )
        return (r * 2.0) / math.tan(self.fov / 1.5)

    def view_direction(self) -> np.ndarray:
        """Unit vector from the camera position towards the target."""
        return normalize(self.target - self.position)

    def view_position(self) -> np.ndarray:
        """Camera position as last computed by get_view_matrix."""
        return self.position