"""Game sense and on-ice skills ratings."""

from __future__ import annotations

import random
from dataclasses import dataclass, fields
from enum import Enum


class ViewStyle(Enum):
    """How a player reads the game."""

    SMART = "SMART"
    QUICK = "QUICK"
    SUPREME = "SUPREME"
    SLOW = "SLOW"


def _rating() -> int:
    return random.randint(1, 100)


@dataclass
class GameView:
    scan: int
    predicting: int
    smart: int
    play: ViewStyle

    @classmethod
    def random(cls) -> GameView:
        """Uniform ratings in 1..100 and a random view style."""
        return cls(_rating(), _rating(), _rating(), random.choice(list(ViewStyle)))


@dataclass
class Skills:
    shot_accuracy: int
    shot_power: int
    offense: int
    defense: int
    hands: int
    mentality: int
    face_off: int
    durability: int
    passing: int
    physicality: int
    fighting: int
    discipline: int

    @classmethod
    def random(cls) -> Skills:
        """Every skill drawn uniformly from 1..100."""
        return cls(*(_rating() for _ in fields(cls)))