"""Geo helpers: distance calculation and location display formatting.

Public API:
    - haversine_miles: Great-circle distance in miles
    - format_distance: Human-readable distance label
    - directions_url: Google Maps directions deep link
    - format_address: Single-line address rendering
"""

from election_watch.lib.geo.location import directions_url, format_address, format_distance, haversine_miles

__all__ = [
    "directions_url",
    "format_address",
    "format_distance",
    "haversine_miles",
]
