"""Board package.

Groups the hex-grid modules (axial coordinates, pixel transforms, tile set).
"""

from .board import Board
from .hex import HexCoordinate, ORIGIN, hex_to_pixel, pixel_to_hex

__all__ = ["Board", "HexCoordinate", "ORIGIN", "hex_to_pixel", "pixel_to_hex"]
