"""A free-flying first-person camera driven by keyboard and mouse."""

from __future__ import annotations

import math

import numpy as np

from .camera import Camera, InputState
from .common import look_at, normalize, perspective


class FirstPersonCamera(Camera):
    """WASD plus mouse-look camera with sprint and optional Y inversion."""

    def __init__(self, inputs: InputState) -> None:
        self.position = np.zeros(3)
        self.direction = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.yaw = -90.0
        self.pitch = 0.0
        self.movement_speed = 2.0
        self.mouse_sensitivity = 0.1
        self.invert_y = False
        self.normal_speed = 2.0
        self.sprint_speed = 4.0
        self.lock_mouse = True
        self.fov = math.radians(5000.0)
        self.near = 0.1
        self.far = 80.0
        self.last_mouse_pos = np.asarray(inputs.mouse_pos, dtype=float)
        inputs.cursor_locked = True

    def update(self, dt: float, inputs: InputState) -> None:
        multiplier = self.sprint_speed if inputs.is_down("LEFT_SHIFT") else self.normal_speed
        speed = self.movement_speed * multiplier

        right = normalize(np.cross(self.direction, self.up))
        forward = normalize(self.direction)
        moves = (
            ("W", forward),
            ("S", -forward),
            ("A", -right),
            ("D", right),
            ("SPACE", self.up),
            ("LEFT_CONTROL", -self.up),
        )
        movement = np.zeros(3)
        for key, step in moves:
            if inputs.is_down(key):
                movement += step
        self.position = self.position + movement * (speed * dt)

        if inputs.just_pressed("Y"):
            self.invert_y = not self.invert_y

        if inputs.just_pressed("TAB"):
            self.lock_mouse = not self.lock_mouse
            inputs.cursor_locked = self.lock_mouse
            self.last_mouse_pos = np.asarray(inputs.mouse_pos, dtype=float)

        current = np.asarray(inputs.mouse_pos, dtype=float)
        self._update_orientation(current - self.last_mouse_pos)

        if self.lock_mouse:
            width, height = inputs.window_size
            center = (width / 2.0, height / 2.0)
            inputs.mouse_pos = center
            self.last_mouse_pos = np.array(center, dtype=float)
        else:
            self.last_mouse_pos = current

    def _update_orientation(self, mouse_movement: np.ndarray) -> None:
        dx, dy = mouse_movement
        self.yaw += dx * self.mouse_sensitivity
        y_movement = dy if self.invert_y else -dy
        self.pitch += y_movement * self.mouse_sensitivity
        self.pitch = min(max(self.pitch, -89.0), 89.0)

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.direction = normalize(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )

    def get_view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.position + self.direction, self.up)

    def get_proj_matrix(self, width: int, height: int) -> np.ndarray:
        aspect = float(width) / float(height)
        return perspective(math.radians(self.fov), aspect, self.near, self.far)