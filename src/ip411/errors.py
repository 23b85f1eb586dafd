"""Exception hierarchy for ip411.

Core lookups raise, they never log-and-swallow. The caller decides per
field whether a failure degrades to a placeholder or aborts the render.

- ``TypeMismatchError``      record value of an unsupported kind
- ``MissingKeyError``        required key absent from the record
- ``CoordinateFormatError``  malformed ``"lat,lon"`` string
- ``LookupFailedError``      geolocation service could not be queried
- ``InvalidAddressError``    IP argument is not an address literal
"""

from __future__ import annotations

from typing import Optional


class Ip411Error(Exception):
    """Base exception for all ip411 errors.

    Attributes:
        message: Human-readable error description.
        key: Record key involved, when the error concerns one.
    """

    def __init__(self, message: str = "", *, key: Optional[str] = None) -> None:
        self.message = message
        self.key = key
        super().__init__(message)


class TypeMismatchError(Ip411Error):
    """A record value is neither boolean, number, null nor string."""


class MissingKeyError(Ip411Error, KeyError):
    """A key is absent from the record."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.message


class CoordinateFormatError(Ip411Error, ValueError):
    """The ``loc`` value cannot be turned into a coordinate pair."""


class LookupFailedError(Ip411Error):
    """The geolocation service request failed."""


class InvalidAddressError(Ip411Error, ValueError):
    """A command line argument is not an IPv4 or IPv6 literal."""
