from typing import Iterable, List, Optional, Tuple

from board import Board, HexCoordinate, hex_to_pixel, pixel_to_hex
from board.hex import DEFAULT_OFFSET, ORIGIN
from selection import SelectedHex
from settings import DisplaySettings
from unit import Unit


def resolve_player_movement(selected: SelectedHex, board: Board, units: Iterable[Unit]) -> bool:
    """Move every movable unit onto the selected hex if the board allows it.

    The selection is always cleared once a pending hex was seen, so a
    rejected target is not retried on the next tick. Returns True when
    units were moved.
    """
    if selected.is_empty:
        return False
    target = selected.take()
    if not board.is_available(target):
        return False
    for unit in units:
        if unit.movable:
            unit.move(target)
    return True


class TurnManager:
    """Owns the board, the selection and the units, and runs one update per frame."""
    def __init__(self, board: Board, units: List[Unit], selected: Optional[SelectedHex] = None,
                 hex_size: float = 30.0, offset: Tuple[float, float] = DEFAULT_OFFSET):
        self.board = board
        self.units = units
        self.selected = selected if selected is not None else SelectedHex()
        self.hex_size = hex_size
        self.offset = offset

    def movable_units(self) -> List[Unit]:
        return [u for u in self.units if u.movable]

    def player_units(self) -> List[Unit]:
        return [u for u in self.units if u.player]

    def unit_at(self, pos: HexCoordinate) -> Optional[Unit]:
        for unit in self.units:
            if unit.position == pos:
                return unit
        return None

    def hex_at_pixel(self, point: Tuple[float, float]) -> HexCoordinate:
        return pixel_to_hex(point, self.hex_size, self.offset)

    def handle_click(self, point: Tuple[float, float]) -> HexCoordinate:
        """Select the hex under a pixel-space click and return it."""
        clicked = self.hex_at_pixel(point)
        self.selected.select(clicked)
        return clicked

    def update(self, click: Optional[Tuple[float, float]] = None) -> bool:
        """Run one tick: record this frame's click, then resolve movement."""
        if click is not None:
            self.handle_click(click)
        target = self.selected.pending
        moved = resolve_player_movement(self.selected, self.board, self.units)
        if moved:
            for unit in self.movable_units():
                print(f"{unit.name} moves to {target}")
        return moved

    # --- Drawing helpers ---
    def tile_centers(self) -> List[Tuple[float, float]]:
        return [hex_to_pixel(pos, self.hex_size, self.offset) for pos in self.board.tiles()]

    def unit_centers(self) -> List[Tuple[float, float]]:
        return [hex_to_pixel(u.position, self.hex_size, self.offset) for u in self.units]


def create_demo_state(settings: Optional[DisplaySettings] = None) -> TurnManager:
    """Board of (2r+1)^2 tiles around the origin with one player unit on it."""
    settings = settings or DisplaySettings()
    board = Board.parallelogram(settings.board_radius)
    hero = Unit("Hero", ORIGIN, player=True, movable=True)
    return TurnManager(board, [hero], hex_size=settings.hex_size, offset=settings.grid_offset)
