"""Axial hex coordinates and pixel conversion for a pointy-top grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

SQRT3 = math.sqrt(3.0)

# Centre of the default 800x600 viewport; hex (0, 0) is drawn here.
DEFAULT_OFFSET: Tuple[float, float] = (400.0, 300.0)


@dataclass(frozen=True)
class HexCoordinate:
    """A tile address in axial coordinates. s = -q - r is derived, never stored."""
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: HexCoordinate) -> HexCoordinate:
        return HexCoordinate(self.q + other.q, self.r + other.r)

    def __sub__(self, other: HexCoordinate) -> HexCoordinate:
        return HexCoordinate(self.q - other.q, self.r - other.r)

    def __repr__(self):
        return f"({self.q},{self.r})"


ORIGIN = HexCoordinate(0, 0)


def hex_to_pixel(pos: HexCoordinate, size: float, offset: Tuple[float, float] = DEFAULT_OFFSET) -> Tuple[float, float]:
    """Return the pixel centre of ``pos`` for hexes of radius ``size``."""
    x = size * (SQRT3 * pos.q + (SQRT3 / 2.0) * pos.r)
    y = size * (1.5 * pos.r)
    return x + offset[0], y + offset[1]


def pixel_to_hex(point: Tuple[float, float], size: float, offset: Tuple[float, float] = DEFAULT_OFFSET) -> HexCoordinate:
    """Return the hex containing ``point``.

    Inverse of :func:`hex_to_pixel`. Any point maps to some hex, whether or
    not that hex is on the board.
    """
    px = point[0] - offset[0]
    py = point[1] - offset[1]

    q = (SQRT3 / 3.0 * px - 1.0 / 3.0 * py) / size
    r = (2.0 / 3.0 * py) / size

    return axial_round(q, r)


def _round_half_away(value: float) -> float:
    # round() in Python rounds halves to even; clicks expect 0.5 -> 1, -0.5 -> -1
    whole = math.floor(abs(value))
    if abs(value) - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value)


def axial_round(qf: float, rf: float) -> HexCoordinate:
    """Round fractional axial coordinates to the nearest hex.

    q, r and s are rounded separately and the component with the largest
    rounding error is rebuilt from the other two so that q + r + s == 0.
    On exact ties q is checked first, then r, then s.
    """
    sf = -qf - rf
    q = _round_half_away(qf)
    r = _round_half_away(rf)
    s = _round_half_away(sf)

    dq = abs(q - qf)
    dr = abs(r - rf)
    ds = abs(s - sf)

    if dq > dr and dq > ds:
        q = -r - s
    elif dr > ds:
        r = -q - s

    return HexCoordinate(int(q), int(r))


def hex_corners(center: Tuple[float, float], size: float) -> List[Tuple[float, float]]:
    """Return the 6 (x, y) vertices of a pointy-top hex centred at ``center``.

    The first vertex is at 30 degrees, below-right of the centre.
    """
    cx, cy = center
    points = []
    for i in range(6):
        angle_rad = math.pi / 3.0 * (i + 0.5)
        x = cx + size * math.cos(angle_rad)
        y = cy + size * math.sin(angle_rad)
        points.append((x, y))
    return points
