"""Shared pytest fixtures for the ip411 test suite."""

from typing import List, Tuple

import pytest

from ip411.location import LocationRecord
from ip411.projection import CanvasSpace, GeoProjector


class RecordingCanvas:
    """PixelCanvas that records every call instead of drawing."""

    def __init__(self) -> None:
        self.pixels: List[Tuple[int, int]] = []
        self.lines: List[Tuple[float, float, float, float]] = []
        self.texts: List[Tuple[int, int, str]] = []

    def set_pixel(self, x: int, y: int) -> None:
        self.pixels.append((x, y))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.lines.append((x1, y1, x2, y2))

    def set_text(self, x: int, y: int, text: str) -> None:
        self.texts.append((x, y, text))

    def render(self) -> str:
        return ""


# ---------------------------------------------------------------------------
# Canvas fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def recording_canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture()
def degree_projector() -> GeoProjector:
    """One pixel per degree: x = lon + 180, y = 90 - lat."""
    return GeoProjector(CanvasSpace(width=360.0, height=180.0))


# ---------------------------------------------------------------------------
# Record fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def columbus_record() -> LocationRecord:
    """A typical ipinfo.io response."""
    return LocationRecord(
        {
            "ip": "8.8.8.8",
            "hostname": "dns.google",
            "city": "Columbus",
            "region": "Ohio",
            "country": "US",
            "loc": "39.96,-83.00",
            "org": "AS15169 Google LLC",
            "postal": "43215",
        }
    )
