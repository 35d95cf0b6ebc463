"""Camera base class and the input state cameras read each frame."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np

PLANE_NAMES = ("left", "right", "bottom", "top", "near", "far")


@dataclass
class InputState:
    """Keyboard, mouse and window state for one frame.

    Key names are compared case-insensitively, e.g. "W", "SPACE",
    "LEFT_SHIFT", "LEFT_CONTROL", "TAB".
    """

    keys_down: set = field(default_factory=set)
    keys_pressed: set = field(default_factory=set)
    mouse_pos: tuple = (0.0, 0.0)
    mouse_scroll: tuple = (0.0, 0.0)
    left_button: bool = False
    middle_button: bool = False
    window_size: tuple = (800, 600)
    cursor_locked: bool = False

    def is_down(self, key: str) -> bool:
        """Whether the key is held this frame."""
        wanted = key.upper()
        return any(k.upper() == wanted for k in self.keys_down)

    def just_pressed(self, key: str) -> bool:
        """Whether the key went down this frame."""
        wanted = key.upper()
        return any(k.upper() == wanted for k in self.keys_pressed)


class Camera(ABC):
    """A camera producing view and projection matrices."""

    @abstractmethod
    def update(self, dt: float, inputs: InputState) -> None:
        """Advance the camera by dt seconds using the given input."""

    @abstractmethod
    def get_view_matrix(self) -> np.ndarray:
        """The 4x4 view matrix."""

    @abstractmethod
    def get_proj_matrix(self, width: int, height: int) -> np.ndarray:
        """The 4x4 projection matrix for a viewport of the given size."""

    def get_frustum(self, width: int, height: int) -> np.ndarray:
        """Frustum planes as a (6, 4) array ordered as PLANE_NAMES.

        Each plane (a, b, c, d) holds a point p inside when
        a*x + b*y + c*z + d >= 0; normals are unit length.
        """
        clip = self.get_proj_matrix(width, height) @ self.get_view_matrix()
        row0, row1, row2, row3 = clip
        planes = np.array(
            [
                row3 + row0,
                row3 - row0,
                row3 + row1,
                row3 - row1,
                row2,
                row3 - row2,
            ],
            dtype=float,
        )
        for plane in planes:
            length = float(np.linalg.norm(plane[:3]))
            if length > 0.00001:
                plane /= length
        return planes