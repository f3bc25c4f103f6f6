"""
Distance utilities for Thunder Routes.

Distances are great-circle estimates on a spherical earth using the
Haversine formula. They are used to order intermediate stops and to
report an approximate total length for the finished route; no road
network is consulted.

Example usage:

    tokyo_tower = (35.6586, 139.7454)
    tokyo_station = (35.6812, 139.7671)
    km = haversine_distance(tokyo_tower, tokyo_station)
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from thunderroutes.models import Waypoint

EARTH_RADIUS_KM = 6371.0


def haversine_distance(coord1: Tuple[float, float], coord2: Tuple[float, float]) -> float:
    """Compute the great-circle distance between two coordinates in kilometers."""
    lat1, lon1 = coord1
    lat2, lon2 = coord2
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def waypoint_distance(a: Waypoint, b: Waypoint) -> Optional[float]:
    """Distance in km between two waypoints, or ``None`` if either lacks coordinates."""
    if a.coordinates is None or b.coordinates is None:
        return None
    return haversine_distance(a.coordinates, b.coordinates)


def route_length(route: Sequence[Waypoint]) -> float:
    """Sum the straight-line legs of a route.

    Legs touching a waypoint without coordinates are skipped, so the
    value is a lower bound when geocoding partially failed.

    Args:
        route: Waypoints in visiting order.

    Returns:
        Total distance in kilometers.
    """
    total = 0.0
    for i in range(len(route) - 1):
        leg = waypoint_distance(route[i], route[i + 1])
        if leg is not None:
            total += leg
    return total
