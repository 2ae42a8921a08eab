"""
Unit tests for the Board tile set and the pending selection.
"""

import pytest
from board import Board, HexCoordinate, ORIGIN
from selection import SelectedHex


# ==================== FIXTURES ====================

@pytest.fixture
def demo_board():
    """The default 25-tile board around the origin."""
    return Board.parallelogram(2)


# ==================== BOARD TESTS ====================

class TestBoard:
    """Test board construction and membership."""

    def test_parallelogram_size(self, demo_board):
        assert len(demo_board) == 25

    def test_parallelogram_shape(self, demo_board):
        """Corners of the axial square are on the board, hex-distance-2 tips off it are not."""
        for q, r in [(-2, -2), (2, 2), (-2, 2), (2, -2), (0, 0), (2, -1)]:
            assert HexCoordinate(q, r) in demo_board
        for q, r in [(3, 0), (0, -3), (5, 5), (-3, 1)]:
            assert HexCoordinate(q, r) not in demo_board

    def test_radius_zero(self):
        board = Board.parallelogram(0)
        assert board.tiles() == [ORIGIN]

    def test_empty_board(self):
        board = Board()
        assert len(board) == 0
        assert not board.is_available(ORIGIN)

    def test_add_and_remove_tile(self, demo_board):
        far = HexCoordinate(7, -3)
        demo_board.add_tile(far)
        assert demo_board.is_available(far)
        demo_board.remove_tile(far)
        assert not demo_board.is_available(far)

    def test_remove_missing_tile_is_noop(self, demo_board):
        demo_board.remove_tile(HexCoordinate(9, 9))
        assert len(demo_board) == 25

    def test_tiles_ordered_by_row(self, demo_board):
        tiles = demo_board.tiles()
        assert tiles[0] == HexCoordinate(-2, -2)
        assert tiles[1] == HexCoordinate(-1, -2)
        assert tiles[-1] == HexCoordinate(2, 2)


# ==================== SELECTION TESTS ====================

class TestSelectedHex:
    """Test the single pending selection."""

    def test_starts_empty(self):
        selected = SelectedHex()
        assert selected.is_empty
        assert selected.take() is None

    def test_take_clears(self):
        selected = SelectedHex()
        selected.select(HexCoordinate(1, 1))
        assert selected.take() == HexCoordinate(1, 1)
        assert selected.is_empty
        assert selected.take() is None

    def test_newer_selection_replaces_older(self):
        selected = SelectedHex()
        selected.select(HexCoordinate(1, 1))
        selected.select(HexCoordinate(-1, 0))
        assert selected.take() == HexCoordinate(-1, 0)

    def test_clear(self):
        selected = SelectedHex()
        selected.select(ORIGIN)
        selected.clear()
        assert selected.is_empty
