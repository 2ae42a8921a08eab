import math
import pygame
from OpenGL.GL import (
    glBegin, glEnd, glColor3f, glVertex2f, glClearColor, glClear, glDrawPixels, glWindowPos2d,
    GL_LINE_LOOP, GL_TRIANGLE_FAN, GL_COLOR_BUFFER_BIT, GL_DEPTH_BUFFER_BIT, GL_RGBA, GL_UNSIGNED_BYTE, glLineWidth
)

from board.hex import hex_corners
from settings import DisplaySettings
from turnmanager import TurnManager

# Background (R,G,B) floats 0..1
BACKGROUND_COLOR = (0.11, 0.11, 0.11)
CIRCLE_SEGMENTS = 24


def to_gl_color(rgb):
    """Convert a 0..255 RGB tuple to the 0..1 floats glColor3f expects."""
    return tuple(c / 255.0 for c in rgb)


def draw_hex_outline(cx: float, cy: float, size: float, color):
    """Draw a 1px hex outline at center (cx,cy) with given color tuple."""
    glColor3f(*color)
    glLineWidth(1)
    glBegin(GL_LINE_LOOP)
    for (x, y) in hex_corners((cx, cy), size):
        glVertex2f(x, y)
    glEnd()


def draw_unit_circle(cx: float, cy: float, radius: float, color):
    """Draw a filled circle for a unit."""
    glColor3f(*color)
    glBegin(GL_TRIANGLE_FAN)
    glVertex2f(cx, cy)
    for i in range(CIRCLE_SEGMENTS + 1):
        angle = 2 * math.pi * i / CIRCLE_SEGMENTS
        glVertex2f(cx + radius * math.cos(angle), cy + radius * math.sin(angle))
    glEnd()


class Visualization:
    def __init__(self, state: TurnManager, settings: DisplaySettings):
        self.state = state
        self.settings = settings
        self.font = pygame.font.SysFont("Arial", 18)

    def render(self, hover_info=None):
        glClearColor(*BACKGROUND_COLOR, 1.0)
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        tile_color = to_gl_color(self.settings.tile_color)
        for (cx, cy) in self.state.tile_centers():
            draw_hex_outline(cx, cy, self.state.hex_size, tile_color)
        # Draw units on top
        unit_color = to_gl_color(self.settings.unit_color)
        for (cx, cy) in self.state.unit_centers():
            draw_unit_circle(cx, cy, self.settings.unit_radius, unit_color)
        if hover_info:
            self.render_hover_info(hover_info)

    def get_hex_at_pixel(self, px, py):
        return self.state.hex_at_pixel((px, py))

    def get_hover_info(self, mouse_pos):
        """Return a list of lines describing the hovered hex and any unit on it."""
        pos = self.get_hex_at_pixel(*mouse_pos)
        lines = [f"Hex: ({pos.q}, {pos.r})"]
        unit = self.state.unit_at(pos)
        if unit:
            lines.append(unit.status())
        lines.append("Available" if self.state.board.is_available(pos) else "Off board")
        return lines

    def render_hover_info(self, lines):
        x = 20
        y = 20
        line_gap = 4
        for i, line in enumerate(lines):
            text_surface = self.font.render(line, True, (230, 230, 230), (40, 40, 40))
            text_data = pygame.image.tostring(text_surface, "RGBA", True)
            glWindowPos2d(x, y + i * (self.font.get_height() + line_gap))
            glDrawPixels(text_surface.get_width(), text_surface.get_height(), GL_RGBA, GL_UNSIGNED_BYTE, text_data)
