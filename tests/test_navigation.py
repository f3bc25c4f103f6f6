import unittest

from thunderroutes.models import Waypoint
from thunderroutes.navigation import generate_google_maps_url, share_text, waypoint_segment


class TestNavigation(unittest.TestCase):
    def test_address_and_coordinates(self):
        route = [
            Waypoint(id="a", original_input="home", address="1 Main St"),
            Waypoint(id="b", original_input="somewhere", latitude=1.5, longitude=2.5),
        ]
        self.assertEqual(
            generate_google_maps_url(route),
            "https://www.google.com/maps/dir/1%20Main%20St/1.5,2.5",
        )

    def test_empty_route(self):
        self.assertEqual(generate_google_maps_url([]), "https://www.google.com/maps")

    def test_address_preferred_over_coordinates(self):
        w = Waypoint(id="a", original_input="x", address="Tokyo Tower", latitude=35.6586, longitude=139.7454)
        self.assertEqual(waypoint_segment(w), "Tokyo%20Tower")

    def test_falls_back_to_original_input(self):
        w = Waypoint(id="a", original_input="Café & Bar/Patio")
        self.assertEqual(waypoint_segment(w), "Caf%C3%A9%20%26%20Bar%2FPatio")

    def test_encodes_like_encode_uri_component(self):
        w = Waypoint(id="a", original_input="x", address="St. Mary's (North) ~*!")
        self.assertEqual(waypoint_segment(w), "St.%20Mary's%20(North)%20~*!")

    def test_zero_coordinates_are_used(self):
        w = Waypoint(id="a", original_input="null island", latitude=0.0, longitude=0.0)
        self.assertEqual(waypoint_segment(w), "0.0,0.0")

    def test_whole_degree_coordinates_keep_decimal_point(self):
        w = Waypoint(id="a", original_input="x", latitude=35.0, longitude=139.0)
        self.assertEqual(waypoint_segment(w), "35.0,139.0")
        w = Waypoint(id="b", original_input="y", latitude=-33.8688, longitude=151.2093)
        self.assertEqual(waypoint_segment(w), "-33.8688,151.2093")

    def test_share_text_contains_link(self):
        route = [Waypoint(id="a", original_input="Kyoto Station")]
        text = share_text(route)
        self.assertTrue(text.endswith("https://www.google.com/maps/dir/Kyoto%20Station"))


if __name__ == "__main__":
    unittest.main()
