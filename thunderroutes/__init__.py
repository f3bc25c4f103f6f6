"""
Thunder Routes package initialization.

This package provides core functionality for the Thunder Routes
planner: a fixed start, a fixed end and any number of stops in between
are resolved to places, the stops are put into a short visiting order,
and the result is handed to Google Maps for navigation.

Modules:
    models        – Waypoint and route state types.
    geocode       – Resolve free-text descriptions using Nominatim.
    routing       – Haversine distances between waypoints.
    optimisation  – Nearest neighbour ordering with fixed endpoints.
    navigation    – Google Maps directions links.
    inputs        – Parsing of the list and bulk input modes.
    planner       – The submission flow from text to ordered route.
    visualisation – Folium based map creation utilities.
"""

__all__ = [
    "models",
    "geocode",
    "routing",
    "optimisation",
    "navigation",
    "inputs",
    "planner",
    "visualisation",
]
