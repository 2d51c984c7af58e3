"""Great-circle distance, distance labels, and map links for locations."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from election_watch.lib.civic.records import Address, GeoPoint

EARTH_RADIUS_MILES = 3959
GOOGLE_MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir/?api=1&destination={lat},{lng}"


def haversine_miles(point1: GeoPoint, point2: GeoPoint) -> float:
    """Great-circle distance between two points using the haversine formula.

    Args:
        point1: First WGS84 coordinate.
        point2: Second WGS84 coordinate.

    Returns:
        Distance in miles.
    """
    d_lat = math.radians(point2.lat - point1.lat)
    d_lng = math.radians(point2.lng - point1.lng)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(point1.lat)) * math.cos(math.radians(point2.lat)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def format_distance(miles: float) -> str:
    """Render a distance for display, e.g. ``"12.3 mi"``.

    Distances under 0.1 miles render as ``"Less than 0.1 mi"``.
    """
    if miles < 0.1:
        return "Less than 0.1 mi"
    # Decimal avoids binary-float surprises such as 0.85 rounding down
    rounded = Decimal(str(miles)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded} mi"


def directions_url(destination: GeoPoint) -> str:
    """Build a Google Maps directions deep link to ``destination``."""
    return GOOGLE_MAPS_DIRECTIONS_URL.format(lat=destination.lat, lng=destination.lng)


def format_address(address: Address) -> str:
    """Render a structured address as a single line.

    Missing components are skipped rather than rendered as blanks.
    """
    locality = " ".join(part for part in (address.state, address.zip_code) if part)
    parts = [address.street, address.city, locality]
    return ", ".join(part for part in parts if part)
