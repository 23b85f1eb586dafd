"""Pixel canvas capability used by the map renderer.

The rasterizer only talks to :class:`PixelCanvas`. :class:`BrailleCanvas`
is the terminal implementation, backed by ``drawille`` which packs a
2x4 block of pixels into one braille character.
"""

from __future__ import annotations

import math
from typing import List, Protocol

import drawille

from .projection import CanvasSpace

BLANK_BRAILLE = "⠀"


class PixelCanvas(Protocol):
    def set_pixel(self, x: int, y: int) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def set_text(self, x: int, y: int, text: str) -> None: ...

    def render(self) -> str: ...


class BrailleCanvas:
    """Braille-dot canvas with a fixed text extent.

    ``render()`` always yields ``rows`` lines of ``cols`` characters, the
    cell extent the :class:`CanvasSpace` was derived from.
    """

    def __init__(self, space: CanvasSpace):
        self.space = space
        self.cols = max(0, int(math.ceil((space.width + 1) / 2)))
        self.rows = max(0, int(math.ceil((space.height + 5) / 4)))
        self._canvas = drawille.Canvas()

    def set_pixel(self, x: int, y: int) -> None:
        self._canvas.set(x, y)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        for x, y in drawille.line(x1, y1, x2, y2):
            self._canvas.set(x, y)

    def set_text(self, x: int, y: int, text: str) -> None:
        self._canvas.set_text(x, y, text)

    def render(self) -> str:
        lines: List[str] = []
        if self.rows and self.cols and self._canvas.chars:
            lines = self._canvas.rows(0, 0, self.cols * 2, self.rows * 4)
        lines = lines[: self.rows]
        lines += [""] * (self.rows - len(lines))
        return "\n".join(
            line.replace(BLANK_BRAILLE, " ")[: self.cols].ljust(self.cols)
            for line in lines
        )
