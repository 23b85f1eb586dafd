"""Text for the info pane."""

from __future__ import annotations

from typing import List, Tuple

from .errors import MissingKeyError, TypeMismatchError
from .location import LOC_KEY, LocationRecord

INFO_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Hostname", "hostname"),
    ("Org", "org"),
    ("Longitude,Latitude", LOC_KEY),
    ("City", "city"),
    ("Region", "region"),
    ("Country", "country"),
    ("Postal", "postal"),
)


def format_info(record: LocationRecord, placeholder: str = "-") -> str:
    """One ``Label: value`` line per field.

    ``loc`` is required and its lookup error propagates. Other fields fall
    back to ``placeholder``.
    """
    lines: List[str] = []
    for label, key in INFO_FIELDS:
        if key == LOC_KEY:
            value = record.get_key(key)
        else:
            try:
                value = record.get_key(key)
            except (MissingKeyError, TypeMismatchError):
                value = placeholder
        lines.append(f"{label}: {value}")
    return "\n".join(lines)
