"""Resolve IP metadata through the ipinfo.io JSON API."""

from __future__ import annotations

import ipaddress
import logging
from typing import Optional, Union

import requests

from .config import Config
from .errors import InvalidAddressError, LookupFailedError, TypeMismatchError
from .location import LocationRecord

logger = logging.getLogger(__name__)

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_address(text: Optional[str]) -> Optional[Address]:
    """Parse an IP literal; ``None`` means look up the caller's own address."""
    if text is None:
        return None
    try:
        return ipaddress.ip_address(text.strip())
    except ValueError:
        raise InvalidAddressError(f"Could not convert '{text}' to an IP address") from None


def build_url(address: Optional[Address], base_url: str) -> str:
    base = base_url.rstrip("/")
    if address is None:
        return f"{base}/json"
    return f"{base}/{address}/json"


def fetch_location(
    address: Optional[Address],
    config: Optional[Config] = None,
    session: Optional[requests.Session] = None,
) -> LocationRecord:
    """GET the record for ``address``. One attempt, no retries."""
    config = config or Config()
    url = build_url(address, config.base_url)
    headers = {"User-Agent": config.user_agent, "Accept": "application/json"}
    http = session or requests
    logger.info("looking up %s", url)
    try:
        response = http.get(url, headers=headers, timeout=config.timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise LookupFailedError(f"Lookup of {url} failed: {e}") from e
    try:
        return LocationRecord.from_json(response.text)
    except (ValueError, TypeMismatchError) as e:
        raise LookupFailedError(f"Lookup of {url} returned an unusable body: {e}") from e
