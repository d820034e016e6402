"""Skating and goaltending movement ratings."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum


class SkatingType(Enum):
    """Skating style of a player."""

    QUICK = "QUICK"
    SLOW = "SLOW"
    STRONG = "STRONG"
    NIMBLE = "NIMBLE"

    @classmethod
    def random(cls) -> SkatingType:
        """A uniformly chosen skating style."""
        return random.choice(list(cls))


def _adjust_rating(current: int, delta: int, max_rating: int) -> int:
    if max_rating < 1:
        raise ValueError(f"max_rating must be at least 1, got {max_rating}")
    return min(max(current + delta, 1), max_rating)


@dataclass
class SkatingStats:
    speed: int
    edges: int
    acceleration: int
    skate_type: SkatingType

    def apply_delta(
        self, speed_delta: int, edges_delta: int, acceleration_delta: int, max_rating: int
    ) -> None:
        """Shift each rating, keeping it within 1..max_rating."""
        self.speed = _adjust_rating(self.speed, speed_delta, max_rating)
        self.edges = _adjust_rating(self.edges, edges_delta, max_rating)
        self.acceleration = _adjust_rating(self.acceleration, acceleration_delta, max_rating)


@dataclass
class GoalieMovement:
    side: int
    up_down: int
    push: int

    def apply_delta(
        self, side_delta: int, up_down_delta: int, push_delta: int, max_rating: int
    ) -> None:
        """Shift each rating, keeping it within 1..max_rating."""
        self.side = _adjust_rating(self.side, side_delta, max_rating)
        self.up_down = _adjust_rating(self.up_down, up_down_delta, max_rating)
        self.push = _adjust_rating(self.push, push_delta, max_rating)