"""
Data model for Thunder Routes.

A ``Waypoint`` is one location supplied by the user, possibly resolved
to a geocoded place. A route is simply an ordered list of waypoints;
the first element is the fixed start and the last the fixed end.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Waypoint:
    id: str
    original_input: str
    name: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    map_uri: Optional[str] = None

    @property
    def coordinates(self) -> Optional[Tuple[float, float]]:
        """Return (lat, lon) when both are known, otherwise ``None``."""
        if self.latitude is None or self.longitude is None:
            return None
        return self.latitude, self.longitude

    @property
    def has_coordinates(self) -> bool:
        return self.coordinates is not None

    @property
    def label(self) -> str:
        return self.name or self.original_input


Route = List[Waypoint]


def new_waypoint_id(index: int) -> str:
    """Build a waypoint id of the form ``loc-<ms timestamp>-<index>``."""
    return f"loc-{int(time.time() * 1000)}-{index}"


class RouteStatus(Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    OPTIMIZING = "OPTIMIZING"
    READY = "READY"
    ERROR = "ERROR"


@dataclass
class RouteState:
    """State of the current submission as rendered by the UI."""

    locations: Route = field(default_factory=list)
    status: RouteStatus = RouteStatus.IDLE
    error_message: Optional[str] = None

    @property
    def is_busy(self) -> bool:
        return self.status in (RouteStatus.LOADING, RouteStatus.OPTIMIZING)
