"""Stroke world shapes and the located point onto a pixel canvas."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Tuple

from .canvas import BrailleCanvas, PixelCanvas
from .location import LocationRecord
from .projection import CanvasSpace, GeoProjector, Point
from .world import world_shapes

logger = logging.getLogger(__name__)


def snap(projector: GeoProjector, longitude: float, latitude: float) -> Tuple[int, int]:
    """Projected pixel for a coordinate, clamped to the canvas and truncated.

    Markers and line endpoints both go through here so they land on the
    same pixel.
    """
    space = projector.space
    x = min(max(projector.x(longitude), 0.0), space.width)
    y = min(max(projector.y(latitude), 0.0), space.height)
    return int(x), int(y)


def rasterize(
    shapes: Iterable[Sequence[Point]],
    projector: GeoProjector,
    canvas: PixelCanvas,
) -> None:
    """Mark every vertex and stroke every ring edge.

    Each point is joined to its predecessor, and the first point to the
    last, so a ring of ``n`` points yields ``n`` markers and ``n`` lines
    with the closing edge drawn first.
    """
    for shape in shapes:
        for i, point in enumerate(shape):
            partner = shape[-1] if i == 0 else shape[i - 1]
            x, y = snap(projector, point.longitude, point.latitude)
            px, py = snap(projector, partner.longitude, partner.latitude)
            canvas.set_pixel(x, y)
            canvas.draw_line(x, y, px, py)


class MapPlotter:
    """Geographic drawing operations on top of a :class:`PixelCanvas`."""

    def __init__(self, projector: GeoProjector, canvas: PixelCanvas):
        self.projector = projector
        self.canvas = canvas

    def plot(self, longitude: float, latitude: float) -> None:
        self.canvas.set_pixel(*snap(self.projector, longitude, latitude))

    def plot_text(self, longitude: float, latitude: float, text: str) -> None:
        x, y = snap(self.projector, longitude, latitude)
        self.canvas.set_text(x, y, text)

    def line(self, lon_a: float, lat_a: float, lon_b: float, lat_b: float) -> None:
        self.canvas.draw_line(
            *snap(self.projector, lon_a, lat_a), *snap(self.projector, lon_b, lat_b)
        )

    def load_shapes(self, shapes: Iterable[Sequence[Point]]) -> None:
        rasterize(shapes, self.projector, self.canvas)

    def render(self) -> str:
        return self.canvas.render()


def render_map(
    record: LocationRecord,
    cols: int,
    rows: int,
    marker: str = "X",
    shapes: Optional[Iterable[Sequence[Point]]] = None,
) -> str:
    """Render the world map for a ``cols`` x ``rows`` pane with ``marker``
    placed at the record's location.

    Coordinate errors from the record propagate; nothing is drawn for the
    point when ``loc`` is missing or malformed.
    """
    space = CanvasSpace.from_cells(cols, rows)
    plotter = MapPlotter(GeoProjector(space), BrailleCanvas(space))
    plotter.load_shapes(world_shapes() if shapes is None else shapes)
    longitude, latitude = record.get_coordinate()
    plotter.plot_text(longitude, latitude, marker)
    logger.debug("map %dx%d marked at lon=%s lat=%s", cols, rows, longitude, latitude)
    return plotter.render()
