"""Build Google Maps directions links that preserve stop order."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import quote

from thunderroutes.models import Waypoint

GOOGLE_MAPS_URL = "https://www.google.com/maps"
GOOGLE_MAPS_DIR_URL = "https://www.google.com/maps/dir/"

# characters left as-is by JavaScript's encodeURIComponent
_UNRESERVED = "-_.!~*'()"


def encode_segment(text: str) -> str:
    return quote(text, safe=_UNRESERVED)


def waypoint_segment(waypoint: Waypoint) -> str:
    """Pick the path segment for one stop: address, then coordinates, then raw input."""
    if waypoint.address:
        return encode_segment(waypoint.address)
    if waypoint.coordinates is not None:
        lat, lon = waypoint.coordinates
        # Python float text, so whole degrees read "35.0,139.0"
        return f"{lat},{lon}"
    return encode_segment(waypoint.original_input)


def generate_google_maps_url(route: Sequence[Waypoint]) -> str:
    """Serialise a route into a Google Maps directions URL.

    An empty route yields the Google Maps landing page.
    """
    if not route:
        return GOOGLE_MAPS_URL
    path = "/".join(waypoint_segment(w) for w in route)
    return f"{GOOGLE_MAPS_DIR_URL}{path}"


def share_text(route: Sequence[Waypoint]) -> str:
    """Text copied to the clipboard when a route is shared."""
    lines = [
        "My route on Thunder Routes",
        "Check out the optimised route I made!",
        generate_google_maps_url(route),
    ]
    return "\n".join(lines)
