from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
import math

import numpy as np


@dataclass
class Rational:
    num: int
    denom: int

    def to_float(self) -> float | None:
        if self.denom == 0:
            return None
        return self.num / self.denom

    def to_fraction(self) -> Fraction | None:
        if self.denom == 0:
            return None
        return Fraction(self.num, self.denom)


@dataclass
class Dimensions:
    width: float | int
    height: float | int


@dataclass
class Timestamp:
    seconds: int
    nanoseconds: int
    attoseconds: int | None = None


@dataclass
class TimecodeFormat:
    frame_rate: Rational
    drop_frame: bool | None = None
    odd_field: bool | None = None


@dataclass
class Timecode:
    hours: int
    minutes: int
    seconds: int
    frames: int
    format: TimecodeFormat


@dataclass
class Vector3:
    x: float
    y: float
    z: float


@dataclass
class Rotation:
    """Pan, tilt and roll in degrees."""

    pan: float
    tilt: float
    roll: float


def _rotation_matrix(rotation: Rotation) -> np.ndarray:
    # Z-up: pan about Z, tilt about X, roll about Y, applied in that order.
    p, t, r = (math.radians(v) for v in (rotation.pan, rotation.tilt, rotation.roll))
    rz = np.array([[math.cos(p), -math.sin(p), 0.0], [math.sin(p), math.cos(p), 0.0], [0.0, 0.0, 1.0]])
    rx = np.array([[1.0, 0.0, 0.0], [0.0, math.cos(t), -math.sin(t)], [0.0, math.sin(t), math.cos(t)]])
    ry = np.array([[math.cos(r), 0.0, math.sin(r)], [0.0, 1.0, 0.0], [-math.sin(r), 0.0, math.cos(r)]])
    return rz @ rx @ ry


@dataclass
class Transform:
    translation: Vector3
    rotation: Rotation
    scale: Vector3 | None = None
    transform_id: str | None = None
    parent_transform_id: str | None = None

    def to_matrix(self) -> np.ndarray:
        """4x4 homogeneous matrix T @ R @ S for this transform."""

        m = np.eye(4, dtype=np.float64)
        rot = _rotation_matrix(self.rotation)
        if self.scale is not None:
            rot = rot @ np.diag([self.scale.x, self.scale.y, self.scale.z])
        m[:3, :3] = rot
        m[:3, 3] = [self.translation.x, self.translation.y, self.translation.z]
        return m
