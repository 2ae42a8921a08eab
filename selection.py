"""Pending click target waiting for the movement step."""

from typing import Optional

from board.hex import HexCoordinate


class SelectedHex:
    """Holds at most one selected hex until the next movement step takes it."""
    def __init__(self):
        self.pending: Optional[HexCoordinate] = None

    def select(self, pos: HexCoordinate):
        # a newer click replaces one that has not been resolved yet
        self.pending = pos

    def take(self) -> Optional[HexCoordinate]:
        """Return the pending hex and clear it."""
        pos, self.pending = self.pending, None
        return pos

    def clear(self):
        self.pending = None

    @property
    def is_empty(self) -> bool:
        return self.pending is None
