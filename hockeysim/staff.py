"""Team staff members and their development."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class StaffRole(Enum):
    """Front-office and coaching roles."""

    GENERAL_MANAGER = "GENERAL_MANAGER"
    ASSISTANT_GENERAL_MANAGER = "ASSISTANT_GENERAL_MANAGER"
    HEAD_COACH = "HEAD_COACH"
    ASSISTANT_COACH = "ASSISTANT_COACH"
    DEVELOPMENT_COACH = "DEVELOPMENT_COACH"
    HEAD_SCOUT = "HEAD_SCOUT"
    GOALIE_COACH = "GOALIE_COACH"
    SKATING_COACH = "SKATING_COACH"
    SCOUT = "SCOUT"
    DIRECTOR_OF_PLAYER_DEVELOPMENT = "DIRECTOR_OF_PLAYER_DEVELOPMENT"
    OWNER = "OWNER"


def _div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass
class StaffRatings:
    teaching: int
    tactical: int
    evaluation: int
    leadership: int

    def average(self) -> int:
        return _div(self.teaching + self.tactical + self.evaluation + self.leadership, 4)


@dataclass
class StaffDevelopment:
    current_level: int
    potential: int
    growth_rate: int
    consistency: int

    @classmethod
    def default(cls) -> StaffDevelopment:
        return cls(current_level=55, potential=75, growth_rate=18, consistency=60)


@dataclass
class StaffMember:
    name: str
    age: int
    role: StaffRole
    ratings: StaffRatings
    development: StaffDevelopment = field(default_factory=StaffDevelopment.default)

    def age_one_year(self) -> None:
        self.age += 1

    def develop(self) -> None:
        """Grow every rating toward the member's potential."""
        dev = self.development
        room_to_grow = max(dev.potential - dev.current_level, 0)
        growth = max(_div(room_to_grow * dev.growth_rate, 100), 1)
        applied = max(_div(growth * (50 + dev.consistency), 100), 0)

        ratings = self.ratings
        ratings.teaching = min(ratings.teaching + applied, dev.potential)
        ratings.tactical = min(ratings.tactical + applied, dev.potential)
        ratings.evaluation = min(ratings.evaluation + applied, dev.potential)
        ratings.leadership = min(ratings.leadership + applied, dev.potential)
        dev.current_level = ratings.average()