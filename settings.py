"""Display and board configuration, optionally overridden from a JSON preset."""

from __future__ import annotations

import json
import os
from typing import Tuple

from pydantic import BaseModel, Field

SETTINGS_FILE = "display_settings.json"


class DisplaySettings(BaseModel):
    window_w: int = Field(800, gt=0)
    window_h: int = Field(600, gt=0)
    hex_size: float = Field(30.0, gt=0)  # radius of hex (distance center -> vertex)
    title: str = "Devastating Slash"
    fps: int = Field(60, gt=0)
    board_radius: int = Field(2, ge=0)
    tile_color: Tuple[int, int, int] = (100, 200, 255)
    unit_color: Tuple[int, int, int] = (144, 238, 144)
    unit_radius: float = Field(10.0, gt=0)

    @property
    def grid_offset(self) -> Tuple[float, float]:
        """Pixel position of hex (0, 0): the centre of the window."""
        return self.window_w / 2.0, self.window_h / 2.0


def load_settings(path: str = SETTINGS_FILE) -> DisplaySettings:
    """Load settings from ``path`` if it exists, otherwise use defaults.

    Raises pydantic.ValidationError when the file holds invalid values.
    """
    if not os.path.exists(path):
        return DisplaySettings()
    with open(path, "r", encoding="utf-8") as f:
        return DisplaySettings.model_validate(json.load(f))
