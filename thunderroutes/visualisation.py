"""
Map visualisation utilities for Thunder Routes.

This module builds an interactive Folium map of an ordered route. It
renders numbered markers for each stop that has coordinates and draws
the visiting order as a polyline. The map can be embedded directly in
the Streamlit app via ``streamlit_folium``.
"""

from __future__ import annotations

import html
from typing import Sequence

import folium

from thunderroutes.models import Waypoint


def _popup_html(order: int, waypoint: Waypoint) -> str:
    parts = [f"<b>Stop #{order}</b>", html.escape(waypoint.label)]
    if waypoint.address:
        parts.append(f"<small>{html.escape(waypoint.address)}</small>")
    return "<br/>".join(parts)


def create_folium_map(route: Sequence[Waypoint]) -> folium.Map:
    """Create a Folium map with numbered markers and a polyline for the route.

    Waypoints without coordinates are left off the map. Stops are
    numbered by their position among the drawn waypoints.

    Args:
        route: Waypoints in visiting order.

    Returns:
        A Folium Map object ready for display.
    """
    points = [w for w in route if w.coordinates is not None]
    if not points:
        return folium.Map(location=[0, 0], zoom_start=2)
    first_lat, first_lon = points[0].coordinates
    m = folium.Map(location=[first_lat, first_lon], zoom_start=13, tiles="OpenStreetMap")
    for order, waypoint in enumerate(points, start=1):
        lat, lon = waypoint.coordinates
        folium.Marker(
            location=[lat, lon],
            popup=folium.Popup(_popup_html(order, waypoint)),
            tooltip=waypoint.label,
            icon=folium.DivIcon(html=f"<div style='font-size: 12px; color: white; background-color: #3b82f6; border-radius: 50%; width: 24px; height: 24px; text-align: center; line-height: 24px;'>{order}</div>")
        ).add_to(m)
    poly_coords = [list(w.coordinates) for w in points]
    folium.PolyLine(poly_coords, color="#3b82f6", weight=4, opacity=0.7).add_to(m)
    if len(points) > 1:
        lats = [lat for lat, _ in poly_coords]
        lons = [lon for _, lon in poly_coords]
        m.fit_bounds([[min(lats), min(lons)], [max(lats), max(lons)]], padding=(50, 50))
    return m
