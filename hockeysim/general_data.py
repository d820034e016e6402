"""Physical growth, player categories and the name pools used for generation."""

from __future__ import annotations

import json
import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from hockeysim.location import Location, Places

_log = logging.getLogger(__name__)

DEFAULT_DIRECTORY = Path("data/NameData")

LEFT_SHOT = 0b0000_0000
RIGHT_SHOT = 0b1000_0000
GROWTH_HIGH = 0b0100_0000
GROWTH_LOW = 0b0000_0000
GROWING = 0b0010_0000
NOT_GROWING = GROWTH_LOW

_GROWING_MASK = 1 << 5
_GROWTH_MASK = 1 << 6
_U8_MAX = 255


class Growable(ABC):
    """Something whose attributes change as in-game time passes."""

    @abstractmethod
    def grow_month(self) -> None:
        """Apply one month of growth."""

    @abstractmethod
    def grow_year(self) -> None:
        """Apply one year of growth."""


def _scaled_u8(value: int, factor: float) -> int:
    return max(0, min(int(value * factor), _U8_MAX))


@dataclass
class General(Growable):
    """Body measurements, growth flags and birth place of a person."""

    height: int
    weight: int
    flags: int
    birth: Location

    def can_grow(self) -> bool:
        """True when the growing flag is set."""
        return (self.flags & _GROWING_MASK) == (GROWING & _GROWING_MASK)

    def check_growth(self, growth: int) -> bool:
        """True when the growth-rate bit of the flags equals ``growth``."""
        return (self.flags & _GROWTH_MASK) == growth

    def grow_month(self) -> None:
        """Grow height and weight; high growth allows up to 50%, low up to 15%."""
        if not self.can_grow():
            return
        top = 1.5 if self.check_growth(GROWTH_HIGH) else 1.15
        self.height = _scaled_u8(self.height, random.uniform(1.0, top))
        self.weight = _scaled_u8(self.weight, random.uniform(1.0, top))

    def grow_year(self) -> None:
        """Yearly growth has no effect."""


class Type(Enum):
    SKATER = "SKATER"
    GOALIE = "GOALIE"


class Position(Enum):
    CENTER = "CENTER"
    LW = "LW"
    RW = "RW"
    RD = "RD"
    LD = "LD"
    GOALIE = "GOALIE"


class PlayType(Enum):
    SNIPER = "SNIPER"
    OFD = "OFD"
    DFD = "DFD"
    PWF = "PWF"
    DF = "DF"
    TWD = "TWD"
    PLAYMAKER = "PLAYMAKER"
    BUTTERFLY = "BUTTERFLY"
    REACTIVE = "REACTIVE"
    HYBRID = "HYBRID"


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError("expected a list of strings")
    return list(value)


@dataclass
class NameData:
    """Pools of first, last and team names and of birth places."""

    first_names: list[str] = field(default_factory=list)
    last_names: list[str] = field(default_factory=list)
    team_names: list[str] = field(default_factory=list)
    places: list[Places] = field(default_factory=list)

    # --- persistence -------------------------------------------------------

    @staticmethod
    def _path(name: str, directory: str | Path) -> Path:
        return Path(directory) / f"{name}.json"

    def to_dict(self) -> dict[str, Any]:
        return {
            "first_names": list(self.first_names),
            "last_names": list(self.last_names),
            "team_names": list(self.team_names),
            "places": [
                {"country": place.country, "places": list(place.places)}
                for place in self.places
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NameData:
        """Build from the structure written by :meth:`to_dict`."""
        if not isinstance(data, dict):
            raise TypeError("name data must be a JSON object")
        places = []
        for entry in data["places"]:
            if not isinstance(entry, dict) or not isinstance(entry["country"], str):
                raise TypeError("invalid place entry")
            places.append(Places(entry["country"], _string_list(entry["places"])))
        return cls(
            _string_list(data["first_names"]),
            _string_list(data["last_names"]),
            _string_list(data["team_names"]),
            places,
        )

    def save(self, name: str, directory: str | Path = DEFAULT_DIRECTORY) -> None:
        """Write this data as pretty JSON to ``<directory>/<name>.json``."""
        Path(directory).mkdir(parents=True, exist_ok=True)
        self._path(name, directory).write_text(
            json.dumps(self.to_dict(), indent=2), encoding="utf-8"
        )

    @classmethod
    def load(cls, name: str, directory: str | Path = DEFAULT_DIRECTORY) -> NameData | None:
        """Read saved data; None if the file is missing or malformed."""
        Path(directory).mkdir(parents=True, exist_ok=True)
        try:
            content = cls._path(name, directory).read_text(encoding="utf-8")
        except OSError:
            return None
        try:
            return cls.from_dict(json.loads(content))
        except (ValueError, KeyError, TypeError) as exc:
            _log.warning("cannot parse name data %r: %s", name, exc)
            return None

    @classmethod
    def read_or_new(cls, name: str, directory: str | Path = DEFAULT_DIRECTORY) -> NameData:
        """Load saved data, or save and return an empty set."""
        data = cls.load(name, directory)
        if data is None:
            data = cls()
            data.save(name, directory)
        return data

    @classmethod
    def exists(cls, name: str, directory: str | Path = DEFAULT_DIRECTORY) -> bool:
        return cls._path(name, directory).exists()

    @classmethod
    def delete(cls, name: str, directory: str | Path = DEFAULT_DIRECTORY) -> None:
        """Remove a saved file; raises FileNotFoundError if it is absent."""
        cls._path(name, directory).unlink()

    @classmethod
    def list_files(cls, directory: str | Path = DEFAULT_DIRECTORY) -> list[str]:
        """Names of the saved data sets, sorted."""
        folder = Path(directory)
        if not folder.is_dir():
            return []
        return sorted(entry.stem for entry in folder.iterdir())

    # --- editing -----------------------------------------------------------

    def add_first_name(self, name: str) -> None:
        self.first_names.append(name)

    def add_last_name(self, name: str) -> None:
        self.last_names.append(name)

    def add_team_name(self, name: str) -> None:
        self.team_names.append(name)

    def add_first_names(self, names: list[str]) -> None:
        self.first_names.extend(names)

    def add_last_names(self, names: list[str]) -> None:
        self.last_names.extend(names)

    def add_team_names(self, names: list[str]) -> None:
        self.team_names.extend(names)

    def remove_first_name(self, name: str) -> None:
        self.first_names = [n for n in self.first_names if n != name]

    def remove_last_name(self, name: str) -> None:
        self.last_names = [n for n in self.last_names if n != name]

    def remove_team_name(self, name: str) -> None:
        self.team_names = [n for n in self.team_names if n != name]

    def add_place(self, place: Places) -> None:
        self.places.append(place)

    def clear_all(self) -> None:
        """Empty the name pools; places are kept."""
        self.first_names.clear()
        self.last_names.clear()
        self.team_names.clear()

    # --- queries -----------------------------------------------------------

    def random_place(self) -> Places | None:
        return random.choice(self.places) if self.places else None

    def random_first_name(self) -> str | None:
        return random.choice(self.first_names) if self.first_names else None

    def random_last_name(self) -> str | None:
        return random.choice(self.last_names) if self.last_names else None

    def random_team_name(self) -> str | None:
        return random.choice(self.team_names) if self.team_names else None

    def random_full_name(self) -> str | None:
        first, last = self.random_first_name(), self.random_last_name()
        if first is None or last is None:
            return None
        return f"{first} {last}"

    def random_name(self) -> tuple[str, str]:
        """A random (first, last) pair; raises ValueError if a pool is empty."""
        first, last = self.random_first_name(), self.random_last_name()
        if first is None or last is None:
            raise ValueError("name data has no first or last names")
        return first, last