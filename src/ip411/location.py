"""Typed access to a loosely-typed geolocation record.

Records come from JSON, so every value is one of boolean, number, null,
string, array or object. Only the first four can be rendered as a field;
arrays and objects are a :class:`TypeMismatchError`.
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from .errors import CoordinateFormatError, MissingKeyError, TypeMismatchError

NULL_TEXT = "<nil>"
LOC_KEY = "loc"


class ValueKind(Enum):
    BOOLEAN = "boolean"
    NUMBER = "number"
    NULL = "null"
    STRING = "string"
    OTHER = "other"


def classify(value: Any) -> ValueKind:
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.STRING
    return ValueKind.OTHER


def format_number(value: float) -> str:
    """Shortest round-tripping scientific notation, e.g. ``3.996E+01``."""
    try:
        value = float(value)
    except OverflowError:
        # integers past the float range
        return "+Inf" if value > 0 else "-Inf"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    digits = Decimal(repr(value)).normalize().as_tuple().digits
    return "{:.{}E}".format(value, max(len(digits) - 1, 0))


class LocationRecord:
    """Read-only view over one geolocation lookup result."""

    def __init__(self, data: Mapping[str, Any]):
        self._data = MappingProxyType(dict(data))

    @classmethod
    def from_json(cls, text: str) -> "LocationRecord":
        """Build a record from a JSON object document."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise TypeMismatchError(f"expected a JSON object, got {type(data).__name__}")
        return cls(data)

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"LocationRecord({dict(self._data)!r})"

    def get_key(self, key: str) -> str:
        """Return the value at ``key`` rendered as text.

        Raises:
            MissingKeyError: ``key`` is absent.
            TypeMismatchError: the value is an array, object or other kind.
        """
        if key not in self._data:
            raise MissingKeyError(f"Missing key '{key}' in location record", key=key)
        value = self._data[key]
        kind = classify(value)
        if kind is ValueKind.BOOLEAN:
            return "true" if value else "false"
        if kind is ValueKind.NUMBER:
            return format_number(value)
        if kind is ValueKind.NULL:
            return NULL_TEXT
        if kind is ValueKind.STRING:
            return value
        raise TypeMismatchError(
            f"Value found in key '{key}' of location record with unexpected type "
            f"{type(value).__name__}",
            key=key,
        )

    def get_coordinate(self) -> Tuple[float, float]:
        """Return ``(longitude, latitude)`` from the ``"lat,lon"`` string at ``loc``.

        The source string lists latitude first; the result is longitude first
        to match :class:`~ip411.projection.Point`.
        """
        loc = self.get_key(LOC_KEY)
        parts = loc.split(",")
        if len(parts) != 2:
            raise CoordinateFormatError(
                f"Expected 'lat,lon' in '{LOC_KEY}', got {loc!r}", key=LOC_KEY
            )
        try:
            latitude = float(parts[0].strip())
            longitude = float(parts[1].strip())
        except ValueError:
            raise CoordinateFormatError(
                f"Could not parse coordinate {loc!r}", key=LOC_KEY
            ) from None
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise CoordinateFormatError(
                f"Coordinate {loc!r} is not a finite number pair", key=LOC_KEY
            )
        return longitude, latitude
