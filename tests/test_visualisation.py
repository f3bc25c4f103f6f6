import unittest

import folium

from thunderroutes.models import Waypoint
from thunderroutes.visualisation import create_folium_map


def children_of_type(m, cls):
    return [child for child in m._children.values() if isinstance(child, cls)]


class TestVisualisation(unittest.TestCase):
    def test_markers_only_for_geocoded_stops(self):
        route = [
            Waypoint(id="a", original_input="Tokyo Tower", latitude=35.6586, longitude=139.7454),
            Waypoint(id="b", original_input="unknown place"),
            Waypoint(id="c", original_input="Tokyo Station", name="Tokyo Station", address="Marunouchi", latitude=35.6812, longitude=139.7671),
        ]
        m = create_folium_map(route)
        self.assertIsInstance(m, folium.Map)
        self.assertEqual(len(children_of_type(m, folium.Marker)), 2)
        self.assertEqual(len(children_of_type(m, folium.PolyLine)), 1)
        self.assertEqual(m.location, [35.6586, 139.7454])

    def test_empty_route_gives_world_map(self):
        m = create_folium_map([Waypoint(id="a", original_input="nowhere")])
        self.assertEqual(m.location, [0, 0])
        self.assertEqual(children_of_type(m, folium.Marker), [])


if __name__ == "__main__":
    unittest.main()
