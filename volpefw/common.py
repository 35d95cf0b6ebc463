"""Shared math helpers, rendering enums and small value types."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Sequence

import numpy as np

MATH_PI = 3.141592654
PI = 3.141592653589793238


def min_float(a: float, b: float) -> float:
    """Return the smaller of two values."""
    return a if a < b else b


def max_float(a: float, b: float) -> float:
    """Return the larger of two values."""
    return a if a > b else b


def rand_float(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random float in the closed range [low, high]."""
    return low + (high - low) * random.random()


def deg_to_rad(d: float) -> float:
    """Convert degrees to radians."""
    return (d / 180.0) * PI


class Attribute(IntEnum):
    """Vertex attribute slots."""

    POSITION = 0
    COLOR = 1
    TEX_COORD1 = 2
    TEX_COORD2 = 3
    TEX_COORD3 = 4
    TEX_COORD4 = 5
    TEX_COORD5 = 6
    TEX_COORD6 = 7
    TEX_COORD7 = 8
    TEX_COORD8 = 9
    NORMAL = 10
    TANGENT = 11
    BI_TANGENT = 12
    BONE_INDICES = 13
    BONE_WEIGHTS = 14


class ComponentType(IntEnum):
    """Component types of vertex attributes."""

    FLOAT = 0
    INT = 1
    UINT = 2
    BYTE = 3
    UBYTE = 4
    UBYTE4 = 5
    BYTE_NORM = 6
    UBYTE_NORM = 7
    SHORT = 8
    USHORT = 9
    SHORT_NORM = 10
    USHORT_NORM = 11
    INVALID = 13


class DepthFunc(IntEnum):
    """Depth comparison functions."""

    NEVER = 0
    LESS = 1
    LESS_EQUAL = 2
    EQUAL = 3
    GREATER = 4
    GREATER_EQUAL = 5
    NOT_EQUAL = 6
    ALWAYS = 7


class StencilFunc(IntEnum):
    """Stencil comparison functions."""

    NEVER = 0
    LESS = 1
    LESS_EQUAL = 2
    EQUAL = 3
    GREATER = 4
    GREATER_EQUAL = 5
    NOT_EQUAL = 6
    ALWAYS = 7


class StencilOp(IntEnum):
    """Stencil buffer operations."""

    KEEP = 0
    ZERO = 1
    REPLACE = 2
    INCREMENT = 3
    DECREMENT = 4
    INVERT = 5


class BlendMode(IntEnum):
    """Blend factors."""

    SRC_ALPHA = 0
    ONE = 1
    SRC_COLOR = 2
    ONE_MINUS_SRC_COLOR = 3
    ONE_MINUS_SRC_ALPHA = 4
    DST_ALPHA = 5
    ONE_MINUS_DST_ALPHA = 6
    DST_COLOR = 7
    ONE_MINUS_DST_COLOR = 8
    ZERO = 9


class BlendEquation(IntEnum):
    """Blend equations."""

    ADD = 0
    SUBTRACT = 1
    REVERSE_SUBTRACT = 2


@dataclass(frozen=True)
class Color4:
    """An RGBA colour with float channels."""

    r: float
    g: float
    b: float
    a: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b, self.a))


def _vec3(v: Sequence[float]) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


def normalize(v: Sequence[float]) -> np.ndarray:
    """Return v scaled to unit length; a zero vector raises ValueError."""
    arr = np.asarray(v, dtype=float)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from eye towards center."""
    eye_v = _vec3(eye)
    f = normalize(_vec3(center) - eye_v)
    s = normalize(np.cross(f, _vec3(up)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye_v)
    m[1, 3] = -np.dot(u, eye_v)
    m[2, 3] = np.dot(f, eye_v)
    return m


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


def rotation(angle: float, axis: Sequence[float]) -> np.ndarray:
    """Rotation by angle radians about axis."""
    a = normalize(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    skew = np.array(
        [
            [0.0, -a[2], a[1]],
            [a[2], 0.0, -a[0]],
            [-a[1], a[0], 0.0],
        ]
    )
    m = np.identity(4)
    m[:3, :3] = c * np.identity(3) + s * skew + (1.0 - c) * np.outer(a, a)
    return m


def translation(v: Sequence[float]) -> np.ndarray:
    """Translation matrix by v."""
    m = np.identity(4)
    m[:3, 3] = _vec3(v)
    return m


def scaling(v: Sequence[float]) -> np.ndarray:
    """Non-uniform scale matrix by v."""
    m = np.identity(4)
    m[0, 0], m[1, 1], m[2, 2] = _vec3(v)
    return m