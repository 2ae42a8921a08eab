from .hex import HexCoordinate

from typing import Iterable, List, Optional, Set


class Board:
    """The set of tiles a unit may be ordered onto."""
    def __init__(self, available: Optional[Iterable[HexCoordinate]] = None):
        self.available: Set[HexCoordinate] = set(available or ())

    @classmethod
    def parallelogram(cls, radius: int = 2) -> "Board":
        """Every (q, r) with q and r in [-radius, radius].

        This is a square in axial space (a parallelogram on screen), not a
        hex-distance disk.
        """
        return cls(
            HexCoordinate(q, r)
            for q in range(-radius, radius + 1)
            for r in range(-radius, radius + 1)
        )

    def is_available(self, pos: HexCoordinate) -> bool:
        return pos in self.available

    def __contains__(self, pos: HexCoordinate) -> bool:
        return self.is_available(pos)

    def __len__(self) -> int:
        return len(self.available)

    # --- Tile management ---
    def add_tile(self, pos: HexCoordinate):
        self.available.add(pos)

    def remove_tile(self, pos: HexCoordinate):
        self.available.discard(pos)

    def tiles(self) -> List[HexCoordinate]:
        """Return all available tiles ordered row by row (r, then q)."""
        return sorted(self.available, key=lambda h: (h.r, h.q))
