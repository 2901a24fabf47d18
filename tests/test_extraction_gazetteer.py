import random

import pytest

from historia.extraction.gazetteer import (
    LocationGazetteer,
    RandomPlaceholderGeocoder,
    extract_locations,
)


class FixedGeocoder:
    def __init__(self):
        self.calls = []

    def locate(self, name: str) -> tuple[float, float]:
        self.calls.append(name)
        return 1.0, 2.0


def test_locations_follow_reading_order_with_sentences():
    geocoder = FixedGeocoder()
    content = "Napoleon invaded Russia in 1812. Later he returned to France."

    locations = extract_locations(content, geocoder=geocoder)

    assert [loc.name for loc in locations] == ["Russia", "France"]
    assert locations[0].description == "Napoleon invaded Russia in 1812"
    assert (locations[1].lat, locations[1].lng) == (1.0, 2.0)
    assert geocoder.calls == ["Russia", "France"]


def test_locations_match_case_insensitively_and_prefer_longest_names():
    content = "Settlers crossed North America quickly. They followed the river upstream."

    locations = extract_locations(content, geocoder=FixedGeocoder())

    assert [loc.name for loc in locations] == ["North America", "river"]


def test_locations_are_unique_and_capped():
    places = ["Egypt", "Greece", "Rome", "Athens", "Sparta", "London", "Paris", "Berlin", "Tokyo"]
    content = " ".join(f"Travellers reached {place} eventually." for place in places)
    content += " Travellers reached Egypt again."

    locations = extract_locations(content, geocoder=FixedGeocoder())

    assert [loc.name for loc in locations] == places[:8]


def test_locations_are_flagged_as_placeholder_coordinates():
    geocoder = RandomPlaceholderGeocoder(random.Random(3))

    locations = extract_locations("The army marched into Egypt.", geocoder=geocoder)

    assert len(locations) == 1
    location = locations[0]
    assert location.coordinates_authoritative is False
    assert -90.0 <= location.lat <= 90.0
    assert -180.0 <= location.lng <= 180.0


def test_custom_gazetteer_restricts_matches():
    gazetteer = LocationGazetteer(["Carthage"])

    locations = extract_locations(
        "Carthage fought Rome for a century.", gazetteer=gazetteer, geocoder=FixedGeocoder()
    )

    assert [loc.name for loc in locations] == ["Carthage"]


def test_empty_gazetteer_is_rejected():
    with pytest.raises(ValueError):
        LocationGazetteer([])


def test_locations_of_missing_content_are_empty():
    assert extract_locations(None, geocoder=FixedGeocoder()) == []
