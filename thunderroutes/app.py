"""
Streamlit application for Thunder Routes.

This script defines the user interface and orchestrates the underlying
modules to resolve place descriptions, reorder the intermediate stops
between a fixed start and end, display the route on an interactive map,
and hand the final order to Google Maps for navigation.

To run this app locally for development, install the package and
execute:

    streamlit run thunderroutes/app.py

Optional overrides (``NOMINATIM_USER_AGENT``, ``GEOCODE_TIMEOUT``,
``LOG_LEVEL``) can be placed in ``.streamlit/secrets.toml``.
"""

from __future__ import annotations

from typing import List

import streamlit as st
from streamlit_folium import folium_static

import os
import sys
# Ensure the package can be imported when run as a script via `streamlit run`.
parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if parent_dir not in sys.path:
    sys.path.append(parent_dir)

from thunderroutes import logging_config
from thunderroutes.config import settings
from thunderroutes.inputs import BULK_MODE, LIST_MODE, can_submit, parse_bulk_text, to_bulk_text
from thunderroutes.models import Route, RouteState, RouteStatus
from thunderroutes.navigation import generate_google_maps_url, share_text
from thunderroutes.planner import plan_route, reset_state
from thunderroutes.routing import route_length
from thunderroutes.visualisation import create_folium_map

HELP_TEXT = """
1. Enter the starting point.
2. Add intermediate stops.
3. Specify a fixed final destination.
4. The intermediate stops are reordered into the most efficient path
   between your start and your destination.
"""

MODE_LABELS = {LIST_MODE: "One field per stop", BULK_MODE: "Paste a list"}


def load_secrets() -> dict:
    """Return Streamlit secrets as a dict, or an empty dict when none are configured."""
    try:
        return dict(st.secrets)
    except FileNotFoundError:
        return {}


def init_session() -> None:
    defaults = {
        "route_state": reset_state(),
        "input_key": 0,
        "n_stops": 1,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def field_key(name: str) -> str:
    # Widget keys carry a generation counter so that a reset clears them.
    return f"{name}_{st.session_state['input_key']}"


def current_stops() -> List[str]:
    return [st.session_state.get(field_key(f"stop_{i}"), "") for i in range(st.session_state["n_stops"])]


def toggle_mode() -> None:
    """Carry the entered places across when switching input mode."""
    new_mode = st.session_state[field_key("mode")]
    if new_mode == BULK_MODE:
        st.session_state[field_key("bulk")] = to_bulk_text(
            st.session_state.get(field_key("start"), ""),
            current_stops(),
            st.session_state.get(field_key("end"), ""),
        )
    else:
        start, stops, end = parse_bulk_text(st.session_state.get(field_key("bulk"), ""))
        if start:
            st.session_state[field_key("start")] = start
            st.session_state[field_key("end")] = end
            stops = stops or [""]
            for i, stop in enumerate(stops):
                st.session_state[field_key(f"stop_{i}")] = stop
            st.session_state["n_stops"] = len(stops)


def add_stop() -> None:
    st.session_state["n_stops"] += 1


def remove_stop(index: int) -> None:
    stops = current_stops()
    del stops[index]
    stops = stops or [""]
    for i, stop in enumerate(stops):
        st.session_state[field_key(f"stop_{i}")] = stop
    st.session_state["n_stops"] = len(stops)


def reset_route() -> None:
    st.session_state["route_state"] = reset_state()
    st.session_state["input_key"] += 1
    st.session_state["n_stops"] = 1


def render_inputs(busy: bool):
    """Draw the input form and return ``(start, stops, end)`` if submitted."""
    st.subheader("Configure route")
    mode = st.radio(
        "Input mode",
        [LIST_MODE, BULK_MODE],
        format_func=MODE_LABELS.get,
        horizontal=True,
        key=field_key("mode"),
        on_change=toggle_mode,
    )
    if mode == LIST_MODE:
        start = st.text_input("Start", key=field_key("start"), placeholder="Where are you leaving from?")
        for i in range(st.session_state["n_stops"]):
            col_stop, col_remove = st.columns([6, 1])
            with col_stop:
                st.text_input(f"Stop {i + 1}", key=field_key(f"stop_{i}"))
            with col_remove:
                st.button("✕", key=field_key(f"remove_{i}"), on_click=remove_stop, args=(i,))
        st.button("Add stop", on_click=add_stop)
        end = st.text_input("Destination (optional)", key=field_key("end"))
        bulk_text = ""
    else:
        bulk_text = st.text_area(
            "One place per line. First line is the start, last line the destination.",
            key=field_key("bulk"),
            height=200,
        )
        start = ""
        end = ""
    disabled = busy or not can_submit(mode, start, bulk_text)
    if not st.button("Optimise route", type="primary", disabled=disabled):
        return None
    if mode == BULK_MODE:
        return parse_bulk_text(bulk_text)
    return start, current_stops(), end


def render_route_list(route: Route) -> None:
    st.subheader(f"Optimised route ({len(route)} stops)")
    for index, waypoint in enumerate(route, start=1):
        st.markdown(f"**#{index}** {waypoint.label}")
        st.caption(waypoint.address or "Address not found")
        if waypoint.map_uri:
            st.markdown(f"[View details]({waypoint.map_uri})")
    km = route_length(route)
    if km > 0:
        st.info(f"Approximate straight-line distance: {km:.1f} km")
    url = generate_google_maps_url(route)
    st.link_button("Start navigation in Google Maps", url, type="primary")
    st.caption("Opens Google Maps directions with every stop preloaded.")
    with st.expander("Share route"):
        st.code(share_text(route), language=None)


def main():
    st.set_page_config(page_title="Thunder Routes", layout="wide")
    settings.update_from(load_secrets())
    logging_config.configure()
    init_session()

    with st.sidebar:
        st.markdown("### Menu")
        st.button("New route", on_click=reset_route)
        st.markdown("#### Help and tips")
        st.markdown(HELP_TEXT)

    st.title("⚡ Thunder Routes")
    state: RouteState = st.session_state["route_state"]
    col_side, col_map = st.columns([2, 3])

    with col_side:
        submitted = render_inputs(state.is_busy)
        if submitted is not None:
            start, stops, end = submitted
            with st.spinner("Finding locations and calculating the best route…"):
                state = plan_route(start, stops, end)
            st.session_state["route_state"] = state
        if state.status == RouteStatus.ERROR:
            st.error(f"The route could not be planned. {state.error_message}")
        elif state.status == RouteStatus.READY:
            render_route_list(state.locations)
        elif state.status == RouteStatus.IDLE:
            st.markdown("#### Plan your perfect trip")
            st.caption(
                "Fix a start and an end. The stops in between are ordered to follow the shortest path."
            )

    with col_map:
        if any(w.has_coordinates for w in state.locations):
            folium_static(create_folium_map(state.locations), width=700, height=500)
        else:
            st.caption("Map preview not available")


if __name__ == "__main__":
    main()
