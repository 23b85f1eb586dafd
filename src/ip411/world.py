"""Embedded world coastline and border rings.

The catalog ships as ``data/world.json``: a list of rings, each ring a
list of ``{"lat": ..., "lon": ...}`` objects. It is decoded once per
process. A catalog that fails to decode is a packaging defect, so the
process aborts instead of raising a typed error.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from typing import Any, Tuple

from .projection import Point

logger = logging.getLogger(__name__)

WORLD_RESOURCE = "world.json"

Shape = Tuple[Point, ...]


def decode_shapes(raw: str) -> Tuple[Shape, ...]:
    """Decode catalog JSON into shapes. Raises ValueError on bad structure."""
    data: Any = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("catalog root is not a list")
    shapes = []
    for index, ring in enumerate(data):
        if not isinstance(ring, list) or not ring:
            raise ValueError(f"ring {index} is not a non-empty list")
        points = []
        for vertex in ring:
            try:
                lat, lon = vertex["lat"], vertex["lon"]
            except (TypeError, KeyError):
                raise ValueError(f"ring {index} has a vertex without lat/lon") from None
            if isinstance(lat, bool) or isinstance(lon, bool):
                raise ValueError(f"ring {index} has a non-numeric vertex")
            points.append(Point(longitude=float(lon), latitude=float(lat)))
        shapes.append(tuple(points))
    return tuple(shapes)


@lru_cache(maxsize=None)
def world_shapes() -> Tuple[Shape, ...]:
    """Return the world catalog, decoding it on first use."""
    try:
        raw = resources.files("ip411.data").joinpath(WORLD_RESOURCE).read_text(encoding="utf-8")
        shapes = decode_shapes(raw)
    except (OSError, ValueError, TypeError) as e:
        logger.critical("world catalog is corrupt: %s", e)
        raise SystemExit(f"ip411: corrupt world catalog ({e})")
    logger.debug("loaded %d world shapes", len(shapes))
    return shapes
