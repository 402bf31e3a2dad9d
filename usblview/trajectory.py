"""Trajectory points for the visualisation engine and their wire messages."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Iterable, Protocol

GUIDE_CENTER = 23915
GUIDE_SCALE = 35
TWO_PI = 2 * 3.1415926


class _Position(Protocol):
    x: float
    y: float
    z: float

    @property
    def valid(self) -> bool: ...


@dataclass(frozen=True)
class Point3:
    """An integer point in the engine's coordinate frame."""

    x: int
    y: int
    z: int

    def to_message(self) -> str:
        """The 'x+y#z*' text sent to the engine for this point."""
        return f"{self.x}+{self.y}#{self.z}*"


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def trajectory_from_fixes(fixes: Iterable[_Position]) -> list[Point3]:
    """Scale the valid fixes by 35 and shift them to the guide centre."""
    return [
        Point3(
            int(fix.x * GUIDE_SCALE + GUIDE_CENTER),
            int(fix.y * GUIDE_SCALE + GUIDE_CENTER),
            int(fix.z * GUIDE_SCALE),
        )
        for fix in fixes
        if fix.valid
    ]


def circle_trajectory() -> list[Point3]:
    """A single descending circle of radius 3000 around (4390, -7390)."""
    radius, center_x, center_y, z_step = 3000, 4390, -7390, -20
    z = 830
    points: list[Point3] = []
    theta = _f32(0.0)
    while theta < TWO_PI:
        cos_t = _f32(math.cos(theta))
        sin_t = _f32(math.sin(theta))
        x = int(_f32(center_x + _f32(radius * cos_t)))
        y = int(_f32(center_y + _f32(radius * sin_t)))
        z += z_step
        points.append(Point3(x, y, z))
        theta = _f32(theta + 0.1)
    return points


def recycle_trajectory() -> list[Point3]:
    """Advance along x, sink along z, then advance along x again."""
    first = [Point3(x, 5940, 2430) for x in range(-4820, 9001, 50)]
    sink = [Point3(9000, 5940, z) for z in range(2430, -2001, -50)]
    last = [Point3(x, 5940, -2000) for x in range(9000, 15221, 50)]
    return first + sink + last


def guide_trajectory() -> list[Point3]:
    """Spiral descent, a straight run along x, then a spiral ascent."""
    radius = 3000
    points: list[Point3] = []

    center_x, center_y, z_step = 6000, 11070, -30
    z = 15610
    theta = 0.0
    while True:
        theta = theta + 0.05 if theta < TWO_PI else 0.0
        x = int(center_x + radius * math.cos(theta))
        y = int(center_y + radius * math.sin(theta))
        z += z_step
        if z <= -2060:
            break
        points.append(Point3(x, y, z))

    points.extend(Point3(x, 8799, -2030) for x in range(6000, 20001, 100))

    center_x, center_y, z_step = 20000 - radius, 8799, 30
    z = -2030
    theta = 0.0
    while True:
        x = int(center_x + radius * math.cos(theta))
        y = int(center_y + radius * math.sin(theta))
        z += z_step
        if z >= 15610:
            break
        points.append(Point3(x, y, z))
        theta = theta + 0.05 if theta < TWO_PI else 0.0

    return points