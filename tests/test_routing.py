import math
import unittest

from thunderroutes.models import Waypoint
from thunderroutes.routing import haversine_distance, route_length, waypoint_distance


def wp(id, lat=None, lon=None):
    return Waypoint(id=id, original_input=id, latitude=lat, longitude=lon)


class TestRouting(unittest.TestCase):
    def test_haversine_distance(self):
        # distance between Tokyo Tower and Tokyo Station (~2.9 km)
        tokyo_tower = (35.6586, 139.7454)
        tokyo_station = (35.6812, 139.7671)
        dist = haversine_distance(tokyo_tower, tokyo_station)
        self.assertAlmostEqual(dist, 2.9, delta=0.5)

    def test_one_degree_of_longitude_at_equator(self):
        # 2 * pi * 6371 / 360 ~= 111.19 km
        self.assertAlmostEqual(haversine_distance((0, 0), (0, 1)), 2 * math.pi * 6371 / 360, places=6)

    def test_zero_for_coincident_points(self):
        self.assertEqual(haversine_distance((48.8566, 2.3522), (48.8566, 2.3522)), 0.0)

    def test_symmetric(self):
        pairs = [
            ((35.6586, 139.7454), (35.6812, 139.7671)),
            ((-33.8688, 151.2093), (51.5074, -0.1278)),
            ((89.9, -179.9), (-89.9, 179.9)),
        ]
        for a, b in pairs:
            self.assertEqual(haversine_distance(a, b), haversine_distance(b, a))
            self.assertGreaterEqual(haversine_distance(a, b), 0.0)

    def test_antipodal_points(self):
        # half the circumference
        self.assertAlmostEqual(haversine_distance((0, 0), (0, 180)), math.pi * 6371, places=3)

    def test_waypoint_distance_requires_coordinates(self):
        self.assertIsNone(waypoint_distance(wp("a", 0, 0), wp("b")))
        self.assertIsNone(waypoint_distance(wp("a"), wp("b", 0, 1)))
        self.assertAlmostEqual(waypoint_distance(wp("a", 0, 0), wp("b", 0, 1)), 111.19, delta=0.01)

    def test_route_length_skips_unknown_legs(self):
        route = [wp("s", 0, 0), wp("a", 0, 1), wp("x"), wp("e", 0, 2)]
        self.assertAlmostEqual(route_length(route), haversine_distance((0, 0), (0, 1)))
        self.assertEqual(route_length([]), 0.0)


if __name__ == "__main__":
    unittest.main()
