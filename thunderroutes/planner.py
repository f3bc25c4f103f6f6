"""
Submission flow for Thunder Routes.

``plan_route`` ties the pieces together for one user submission:
collect the descriptions, resolve them, order the intermediate stops
and return the resulting state for display.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence

from geopy.exc import GeopyError

from thunderroutes.geocode import ResolverError, resolve_locations
from thunderroutes.inputs import collect_inputs
from thunderroutes.models import Route, RouteState, RouteStatus
from thunderroutes.optimisation import order_route

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = (
    "Could not resolve the locations. Please check your connection and try again."
)

Resolver = Callable[[Iterable[str]], Route]


def reset_state() -> RouteState:
    return RouteState()


def plan_route(
    start: str,
    stops: Sequence[str],
    end: str,
    resolver: Resolver = resolve_locations,
    on_status: Optional[Callable[[RouteStatus], None]] = None,
) -> RouteState:
    """Resolve and order one submission.

    Args:
        start: Description of the fixed start.
        stops: Descriptions of the intermediate stops, in entry order.
        end: Description of the fixed end; may be blank.
        resolver: Callable turning descriptions into waypoints.
        on_status: Optional callback notified of LOADING and OPTIMIZING
            so a UI can show progress.

    Returns:
        A READY state with the ordered route, or an ERROR state when
        resolution failed.

    ``InternalError`` from the orderer is not handled here and reaches
    the caller unchanged.
    """
    def notify(status: RouteStatus) -> None:
        if on_status is not None:
            on_status(status)

    inputs = collect_inputs(start, stops, end)
    notify(RouteStatus.LOADING)
    try:
        resolved = resolver(inputs)
    except (ResolverError, GeopyError) as exc:
        logger.error("Error processing route: %s", exc)
        return RouteState(
            status=RouteStatus.ERROR,
            error_message=str(exc) or DEFAULT_ERROR_MESSAGE,
        )

    notify(RouteStatus.OPTIMIZING)
    ordered = order_route(resolved)
    logger.info("Route ready with %d stops", len(ordered))
    return RouteState(locations=ordered, status=RouteStatus.READY)
