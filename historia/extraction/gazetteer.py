"""Gazetteer matching and placeholder geocoding for location mentions."""
from __future__ import annotations

import random
import re
from typing import Iterable, Iterator, List

from .models import Geocoder, Location
from .normalization import find_enclosing_sentence, split_paragraphs

MAX_LOCATIONS = 8
MIN_DESCRIPTION_LENGTH = 10

DEFAULT_PLACE_NAMES = (
    "Africa",
    "America",
    "Asia",
    "Australia",
    "Europe",
    "North America",
    "South America",
    "Antarctica",
    "Middle East",
    "United States",
    "Russia",
    "China",
    "India",
    "Brazil",
    "Canada",
    "England",
    "France",
    "Germany",
    "Italy",
    "Spain",
    "Japan",
    "Egypt",
    "Greece",
    "Rome",
    "Athens",
    "Sparta",
    "Jerusalem",
    "London",
    "Paris",
    "Berlin",
    "Moscow",
    "Beijing",
    "Tokyo",
    "New York",
    "Washington",
    "Chicago",
    "Los Angeles",
    "San Francisco",
    "River",
    "Mountain",
    "Ocean",
    "Sea",
    "Lake",
    "Gulf",
    "Peninsula",
)


class LocationGazetteer:
    """Fixed list of place names matched case-insensitively on word boundaries."""

    def __init__(self, names: Iterable[str] = DEFAULT_PLACE_NAMES) -> None:
        self._names: tuple[str, ...] = tuple(name.strip() for name in names if name.strip())
        if not self._names:
            raise ValueError("gazetteer requires at least one place name")
        self._pattern = re.compile(
            r"\b(" + "|".join(re.escape(name) for name in self._names) + r")\b",
            re.IGNORECASE,
        )

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def finditer(self, text: str) -> Iterator[re.Match[str]]:
        """Yield every gazetteer hit in ``text`` in reading order."""

        return self._pattern.finditer(text)


class RandomPlaceholderGeocoder:
    """Mock geocoder returning uniformly random coordinates.

    No geocoding service is consulted: the coordinates only let a map widget
    place a marker and must not be read as the real position of the place.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def locate(self, name: str) -> tuple[float, float]:
        lat = self._rng.uniform(-90.0, 90.0)
        lng = self._rng.uniform(-180.0, 180.0)
        return lat, lng


_DEFAULT_GAZETTEER: LocationGazetteer | None = None


def get_default_gazetteer() -> LocationGazetteer:
    global _DEFAULT_GAZETTEER
    if _DEFAULT_GAZETTEER is None:
        _DEFAULT_GAZETTEER = LocationGazetteer()
    return _DEFAULT_GAZETTEER


def extract_locations(
    content: str | None,
    *,
    gazetteer: LocationGazetteer | None = None,
    geocoder: Geocoder | None = None,
) -> List[Location]:
    """Return up to eight distinct gazetteer places with placeholder coordinates."""

    gazetteer = gazetteer or get_default_gazetteer()
    geocoder = geocoder or RandomPlaceholderGeocoder()
    locations: List[Location] = []
    seen: set[str] = set()

    for paragraph in split_paragraphs(content):
        for match in gazetteer.finditer(paragraph):
            name = match.group(0)
            if name in seen:
                continue
            description = find_enclosing_sentence(paragraph, match.start(), match.end())
            if description is None or len(description) <= MIN_DESCRIPTION_LENGTH:
                continue
            lat, lng = geocoder.locate(name)
            seen.add(name)
            locations.append(Location(name=name, description=description, lat=lat, lng=lng))

    return locations[:MAX_LOCATIONS]


__all__ = [
    "DEFAULT_PLACE_NAMES",
    "LocationGazetteer",
    "MAX_LOCATIONS",
    "RandomPlaceholderGeocoder",
    "extract_locations",
    "get_default_gazetteer",
]
