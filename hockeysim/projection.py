"""Draft projections and development profiles of prospects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


def clamp_unit(value: float) -> float:
    """Clamp to the unit interval."""
    return min(max(value, 0.0), 1.0)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def scale_to_range(value: float, low: int, high: int) -> int:
    """Map a unit value (clamped) linearly onto ``low..high``, rounded."""
    return _round_half_away(low + clamp_unit(value) * (high - low))


class ProjMax(Enum):
    """Highest level a prospect is projected to reach."""

    MINOR = "MINOR"
    MINOR_TOP = "MINOR_TOP"
    BOTTOM_6 = "BOTTOM_6"
    MID_6 = "MID_6"
    TOP4 = "TOP4"
    TOP2 = "TOP2"
    TOP1 = "TOP1"
    FRANCHISE = "FRANCHISE"
    SUPERSTAR = "SUPERSTAR"
    ELITE = "ELITE"
    GENERATIONAL = "GENERATIONAL"

    @classmethod
    def from_quality(cls, quality: float) -> ProjMax:
        """Split the unit quality range into eleven equal tiers."""
        members = list(cls)
        tier = math.floor(clamp_unit(quality) * 11.0)
        return members[min(tier, len(members) - 1)]


class DevelopmentCurve(Enum):
    """When in a career development happens."""

    EARLY = "EARLY"
    LINEAR = "LINEAR"
    LATE = "LATE"
    BOOM_BUST = "BOOM_BUST"

    @classmethod
    def from_profile(
        cls, quality: float, actualization: float, volatility: float
    ) -> DevelopmentCurve:
        if volatility >= 0.75:
            return cls.BOOM_BUST
        if quality >= 0.72 and actualization >= 0.6:
            return cls.EARLY
        if quality <= 0.35 and actualization <= 0.45:
            return cls.LATE
        return cls.LINEAR


_GROWTH_WINDOWS = {
    DevelopmentCurve.EARLY: (18, 23),
    DevelopmentCurve.LINEAR: (18, 27),
    DevelopmentCurve.LATE: (20, 29),
    DevelopmentCurve.BOOM_BUST: (18, 26),
}


def growth_window_for_curve(curve: DevelopmentCurve) -> tuple[int, int]:
    """First and last age of the growth window for ``curve``."""
    return _GROWTH_WINDOWS[curve]


@dataclass
class DraftProjection:
    draft_round_grade: int
    overall_pick_estimate: int
    projection_confidence: int
    scouting_visibility: int
    max_projection: ProjMax


@dataclass
class DevelopmentProfile:
    ceiling: int
    floor: int
    growth_rate: int
    consistency: int
    coachability: int
    work_ethic: int
    injury_risk: int
    growth_window_start: int
    growth_window_end: int
    curve: DevelopmentCurve


@dataclass
class Projection:
    draft_projection: DraftProjection
    development_profile: DevelopmentProfile


@dataclass
class ProjectionGenerationSettings:
    """Unit-interval knobs for generating projections; values are clamped."""

    actualization: float
    certainty: float
    visibility: float
    volatility: float
    injury_risk: float
    coachability: float
    work_ethic: float

    def __post_init__(self) -> None:
        self.actualization = clamp_unit(self.actualization)
        self.certainty = clamp_unit(self.certainty)
        self.visibility = clamp_unit(self.visibility)
        self.volatility = clamp_unit(self.volatility)
        self.injury_risk = clamp_unit(self.injury_risk)
        self.coachability = clamp_unit(self.coachability)
        self.work_ethic = clamp_unit(self.work_ethic)

    @classmethod
    def default_balanced(cls) -> ProjectionGenerationSettings:
        return cls(
            actualization=0.55,
            certainty=0.5,
            visibility=0.5,
            volatility=0.35,
            injury_risk=0.3,
            coachability=0.55,
            work_ethic=0.55,
        )