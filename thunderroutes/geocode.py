"""
Location resolution for Thunder Routes.

This module turns free-text place descriptions into ``Waypoint`` records
using OpenStreetMap's Nominatim service via geopy. Resolution is best
effort: an entry that cannot be found still produces a waypoint, just
without a name, address or coordinates, so that the rest of the route
can be planned.

Example usage:

    from thunderroutes.geocode import resolve_locations
    route = resolve_locations(["Tokyo Tower", "Shibuya Crossing", "Tokyo Station"])

Results are cached in memory per description to avoid repeated queries.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, NamedTuple, Optional
from urllib.parse import urlencode

from geopy.exc import GeocoderServiceError, GeocoderTimedOut, GeopyError
from geopy.geocoders import Nominatim

from thunderroutes.config import settings
from thunderroutes.models import Route, Waypoint, new_waypoint_id

logger = logging.getLogger(__name__)

OSM_BASE_URL = "https://www.openstreetmap.org"
GOOGLE_MAPS_SEARCH_URL = "https://www.google.com/maps/search/"

_geocoder: Optional[Nominatim] = None


class ResolverError(Exception):
    """Raised when a list of locations cannot be resolved at all."""


class Place(NamedTuple):
    name: Optional[str]
    address: Optional[str]
    latitude: float
    longitude: float
    map_uri: Optional[str]


def _get_geocoder() -> Nominatim:
    """Return a singleton Nominatim geocoder instance."""
    global _geocoder
    if _geocoder is None:
        # Nominatim's usage policy requires an identifying user agent.
        _geocoder = Nominatim(user_agent=settings.NOMINATIM_USER_AGENT)
    return _geocoder


def _map_uri(raw: dict, lat: float, lon: float) -> str:
    osm_type = raw.get("osm_type")
    osm_id = raw.get("osm_id")
    if osm_type and osm_id:
        return f"{OSM_BASE_URL}/{osm_type}/{osm_id}"
    return GOOGLE_MAPS_SEARCH_URL + "?" + urlencode({"api": 1, "query": f"{lat},{lon}"})


def _to_place(location) -> Place:
    raw = location.raw or {}
    address = location.address or None
    name = raw.get("name") or (address.split(",")[0].strip() if address else None)
    lat, lon = float(location.latitude), float(location.longitude)
    return Place(name=name, address=address, latitude=lat, longitude=lon, map_uri=_map_uri(raw, lat, lon))


@lru_cache(maxsize=128)
def lookup_place(text: str) -> Optional[Place]:
    """Geocode one description, returning ``None`` if nothing is found.

    A timeout or service error is retried once with a longer timeout.
    Geocoder errors after that are raised, so only real answers (a place
    or "no match") are cached.
    """
    geocoder = _get_geocoder()
    try:
        location = geocoder.geocode(text, timeout=settings.GEOCODE_TIMEOUT)
    except (GeocoderTimedOut, GeocoderServiceError) as exc:
        logger.info("Geocoding %r failed (%s); retrying", text, exc)
        location = geocoder.geocode(text, timeout=settings.GEOCODE_RETRY_TIMEOUT)
    if not location:
        logger.warning("No match found for %r", text)
        return None
    return _to_place(location)


def _to_waypoint(text: str, index: int, place: Optional[Place]) -> Waypoint:
    if place is None:
        return Waypoint(id=new_waypoint_id(index), original_input=text)
    return Waypoint(
        id=new_waypoint_id(index),
        original_input=text,
        name=place.name,
        address=place.address,
        latitude=place.latitude,
        longitude=place.longitude,
        map_uri=place.map_uri,
    )


def resolve_location(text: str, index: int) -> Waypoint:
    """Resolve one description into a waypoint.

    Args:
        text: Free-form place description as typed by the user.
        index: Position of the description in the submission, used to
            build the waypoint id.

    Returns:
        A ``Waypoint``. Only ``id`` and ``original_input`` are set when
        the place could not be found.

    Raises:
        GeopyError: If the geocoder still fails after the retry.
    """
    text = text.strip()
    return _to_waypoint(text, index, lookup_place(text))


def resolve_locations(inputs: Iterable[str]) -> Route:
    """Resolve an ordered list of descriptions, keeping their order.

    Blank entries are ignored. A description the geocoder cannot find,
    or cannot answer for, becomes a waypoint without coordinates.

    Raises:
        ResolverError: If there is nothing to resolve, or if the geocoder
            failed for every description.
    """
    texts = [t.strip() for t in inputs if t and t.strip()]
    if not texts:
        raise ResolverError("No locations to resolve")
    logger.info("Resolving %d locations", len(texts))
    route: Route = []
    failures = 0
    for i, text in enumerate(texts):
        try:
            place = lookup_place(text)
        except GeopyError as exc:
            logger.warning("Geocoding %r failed after retry: %s", text, exc)
            failures += 1
            place = None
        route.append(_to_waypoint(text, i, place))
    if failures == len(texts):
        raise ResolverError(
            "The geocoding service could not be reached. Please check your connection and try again."
        )
    missing = sum(1 for w in route if not w.has_coordinates)
    if missing:
        logger.warning("%d of %d locations have no coordinates", missing, len(route))
    return route
