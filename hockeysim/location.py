"""Birth places and the pools they are drawn from."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from hockeysim.dates import GameDate


@dataclass
class Location:
    """A place and date someone was born."""

    country: str
    location: str
    date: GameDate


@dataclass
class Places:
    """The places of one country that birth locations are drawn from."""

    country: str
    places: list[str] = field(default_factory=list)

    def add_place(self, place: str) -> None:
        self.places.append(place)

    def random_location(self, date: GameDate) -> Location:
        """A location in a randomly chosen place of this country."""
        if not self.places:
            raise ValueError(f"no places known for {self.country}")
        return Location(self.country, random.choice(self.places), date)