"""
Route ordering heuristic for Thunder Routes.

The start and end of a route are fixed by the user. Everything in
between is reordered with a greedy nearest neighbour heuristic:
starting from the start point, repeatedly step to the closest
unvisited stop, then finish at the end point regardless of distance.

This is an O(n^2) approximation, not a shortest tour solver. Routes
are expected to hold tens of stops at most.

Stops that could not be geocoded have no coordinates to compare. They
are taken as soon as the scan reaches them, and the scan always runs
in the order the stops were entered, so the result is reproducible.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from thunderroutes.models import Route, Waypoint
from thunderroutes.routing import haversine_distance

logger = logging.getLogger(__name__)


class InternalError(RuntimeError):
    """Raised when the ordering loop cannot make progress."""


def _pick_nearest(current: Waypoint, unvisited: Sequence[Waypoint]) -> Optional[int]:
    """Return the index in ``unvisited`` of the next stop to visit."""
    nearest: Optional[int] = None
    min_distance = float("inf")
    for idx, candidate in enumerate(unvisited):
        if current.coordinates is None or candidate.coordinates is None:
            # nothing to compare against; take it now
            return idx
        dist = haversine_distance(current.coordinates, candidate.coordinates)
        if dist < min_distance:
            min_distance = dist
            nearest = idx
    return nearest


def order_route(route: Sequence[Waypoint]) -> Route:
    """Reorder the intermediate stops of a route.

    Args:
        route: Waypoints where index 0 is the fixed start and the last
            element is the fixed end.

    Returns:
        A new list with the same waypoints, start and end in place and
        the intermediates in nearest neighbour visiting order. Routes
        of two or fewer waypoints are returned in their given order.

    Raises:
        InternalError: If no next stop can be selected while stops are
            still unvisited.
    """
    if len(route) <= 2:
        return list(route)

    start = route[0]
    end = route[-1]
    unvisited: List[Waypoint] = list(route[1:-1])

    ordered: Route = [start]
    current = start
    while unvisited:
        idx = _pick_nearest(current, unvisited)
        if idx is None:
            raise InternalError(
                f"no selectable stop after {current.id!r} with {len(unvisited)} stops unvisited"
            )
        current = unvisited.pop(idx)
        ordered.append(current)

    ordered.append(end)
    logger.debug("Ordered route: %s", " -> ".join(w.id for w in ordered))
    return ordered


def optimise_route_ids(route: Sequence[Waypoint]) -> List[str]:
    """Return the ids of ``route`` in optimised visiting order."""
    return [w.id for w in order_route(route)]
