"""
pygame drawing of projected segments.
"""

import math
from typing import Sequence

import pygame

from ..config.settings import TesseractConfig
from ..geometry.projection import Segment
from ..sources.base import AngleState


class SegmentRenderer:
    """Draws a segment list onto a pygame surface in a single uniform style."""

    def __init__(self, surface: pygame.Surface, config: TesseractConfig = None):
        self.surface = surface
        self.config = config or TesseractConfig()
        self.font = pygame.font.Font(None, 36)

    def draw(self, segments: Sequence[Segment]) -> int:
        """Draw every finite segment and return how many were drawn."""
        drawn = 0
        for start, end in segments:
            if not all(math.isfinite(c) for c in (*start, *end)):
                continue
            pygame.draw.line(self.surface, self.config.LINE_COLOR, start, end, self.config.STROKE_WIDTH)
            drawn += 1
        return drawn

    def draw_hud(self, gyroscope_mode: bool, angles: AngleState):
        """Mode and angle readout in the top-left corner."""
        mode = "Gyroscope" if gyroscope_mode else "Drag"
        lines = [
            f"Mode: {mode}   (G / space to toggle, Esc to quit)",
            f"XW: {angles.angle_xw:+.3f} rad   YZ: {angles.angle_yz:+.3f} rad",
        ]
        y = 10
        for line in lines:
            txt = self.font.render(line, True, self.config.HUD_COLOR)
            self.surface.blit(txt, (10, y))
            y += 30

    def render(self, segments: Sequence[Segment], gyroscope_mode: bool, angles: AngleState):
        """Clear the surface and draw one frame."""
        self.surface.fill(self.config.BACKGROUND_COLOR)
        self.draw(segments)
        self.draw_hud(gyroscope_mode, angles)
