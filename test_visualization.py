"""
Unit tests for the hover read-out of the Visualization adapter.

Only fonts are initialised; no window or GL context is opened.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest
from board import HexCoordinate, hex_to_pixel
from settings import DisplaySettings
from turnmanager import create_demo_state
from visualization import Visualization


# ==================== FIXTURES ====================

@pytest.fixture
def vis():
    pygame.font.init()
    settings = DisplaySettings()
    yield Visualization(create_demo_state(settings), settings)
    pygame.font.quit()


def pixel_of(vis, q, r):
    return hex_to_pixel(HexCoordinate(q, r), vis.state.hex_size, vis.state.offset)


# ==================== HOVER INFO TESTS ====================

class TestHoverInfo:
    """Test the lines shown for the hex under the mouse."""

    def test_occupied_origin(self, vis):
        assert vis.get_hover_info(pixel_of(vis, 0, 0)) == [
            "Hex: (0, 0)",
            "Hero at (0,0) (player, movable)",
            "Available",
        ]

    def test_empty_board_tile(self, vis):
        assert vis.get_hover_info(pixel_of(vis, 2, -1)) == ["Hex: (2, -1)", "Available"]

    def test_off_board(self, vis):
        assert vis.get_hover_info(pixel_of(vis, 5, 5)) == ["Hex: (5, 5)", "Off board"]

    def test_follows_unit_after_move(self, vis):
        vis.state.update(pixel_of(vis, -1, 2))
        assert vis.get_hover_info(pixel_of(vis, 0, 0)) == ["Hex: (0, 0)", "Available"]
        assert vis.get_hover_info(pixel_of(vis, -1, 2))[1] == "Hero at (-1,2) (player, movable)"

    def test_get_hex_at_pixel(self, vis):
        assert vis.get_hex_at_pixel(400.0, 300.0) == HexCoordinate(0, 0)
