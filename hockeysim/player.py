"""Players: creation, random attributes and development over time."""

from __future__ import annotations

import math
import random
import struct
from dataclasses import dataclass

from hockeysim.contract import Contract
from hockeysim.dates import GameDate
from hockeysim.general_data import NameData, PlayType, Position, Type
from hockeysim.helper import DraftStatus
from hockeysim.location import Location
from hockeysim.movement import GoalieMovement, SkatingStats
from hockeysim.playing import GameView, Skills
from hockeysim.projection import DevelopmentCurve, Projection
from hockeysim.stats import PlayerStats

_I8_MIN = -128
_I8_MAX = 127
_RATING_CAP = 100

_SKATER_POSITIONS = (
    Position.CENTER,
    Position.RW,
    Position.LW,
    Position.LD,
    Position.RD,
)
_DEFENSE = (Position.LD, Position.RD)

_PLAY_TYPES_GOALIE = (PlayType.BUTTERFLY, PlayType.HYBRID, PlayType.REACTIVE)
_PLAY_TYPES_FORWARD = (PlayType.PLAYMAKER, PlayType.PWF, PlayType.SNIPER, PlayType.DF)
_PLAY_TYPES_DEFENSE = (PlayType.SNIPER, PlayType.PLAYMAKER, PlayType.DFD, PlayType.OFD)


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _to_i8(value: float) -> int:
    """Truncate toward zero and saturate to the signed 8-bit range."""
    if math.isnan(value):
        return 0
    if value >= _I8_MAX:
        return _I8_MAX
    if value <= _I8_MIN:
        return _I8_MIN
    return int(value)


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _injury_penalty(injury_risk: int) -> int:
    if injury_risk >= 80:
        return 2
    if injury_risk >= 60:
        return 1
    return 0


def random_type() -> Type:
    """Skater or goalie with equal odds."""
    return Type.SKATER if random.random() < 0.5 else Type.GOALIE


def random_position(include_goalie: bool) -> Position:
    """A uniformly chosen position; goalie only when ``include_goalie``."""
    choices = _SKATER_POSITIONS + ((Position.GOALIE,) if include_goalie else ())
    return random.choice(choices)


def random_playtype_from_pos(position: Position) -> PlayType:
    """A play type that suits ``position``."""
    if position is Position.GOALIE:
        return random.choice(_PLAY_TYPES_GOALIE)
    if position in _DEFENSE:
        return random.choice(_PLAY_TYPES_DEFENSE)
    return random.choice(_PLAY_TYPES_FORWARD)


def default_stats_for_position(position: Position) -> PlayerStats:
    """Empty stats; goalies also get empty goalie stats."""
    if position is Position.GOALIE:
        return PlayerStats.goalie_default()
    return PlayerStats.skater_default()


def random_birth_location(names: NameData, age: int) -> Location:
    """Birth place drawn from ``names``, dated at the start of the birth year."""
    birth_date = GameDate.start_of_year(max(30 - age, 0))
    place = names.random_place()
    if place is None:
        return Location("Unknown", "Unknown", birth_date)
    return place.random_location(birth_date)


def random_height_cm(position: Position) -> int:
    if position is Position.GOALIE:
        return random.randint(180, 198)
    if position in _DEFENSE:
        return random.randint(178, 196)
    return random.randint(170, 194)


def random_weight_kg(position: Position, goalie: bool) -> int:
    if goalie:
        return random.randint(78, 105)
    if position in _DEFENSE:
        return random.randint(80, 104)
    return random.randint(72, 100)


def scale(value: int, percent: float) -> int:
    """Scale a rating by ``percent``, truncated and capped at 100."""
    product = _f32(_f32(float(value)) * _f32(percent))
    return min(_to_i8(product), _RATING_CAP)


def develop_skating(skating: SkatingStats, percent: float) -> None:
    skating.speed = scale(skating.speed, percent)
    skating.acceleration = scale(skating.acceleration, percent)
    skating.edges = scale(skating.edges, percent)


def develop_shooting(skills: Skills, percent: float) -> None:
    skills.shot_accuracy = scale(skills.shot_accuracy, percent)
    skills.shot_power = scale(skills.shot_power, percent)


def develop_offensive(skills: Skills, percent: float) -> None:
    skills.offense = scale(skills.offense, percent)
    skills.hands = scale(skills.hands, percent)
    skills.passing = scale(skills.passing, percent)


def develop_defensive(skills: Skills, percent: float) -> None:
    skills.defense = scale(skills.defense, percent)
    skills.discipline = scale(skills.discipline, percent)


def develop_physical(skills: Skills, percent: float) -> None:
    skills.physicality = scale(skills.physicality, percent)
    skills.fighting = scale(skills.fighting, percent)
    skills.durability = scale(skills.durability, percent)


def develop_mental(skills: Skills, percent: float) -> None:
    skills.mentality = scale(skills.mentality, percent)
    skills.discipline = scale(skills.discipline, percent)


def develop_faceoff(skills: Skills, percent: float) -> None:
    skills.face_off = scale(skills.face_off, percent)
    skills.mentality = scale(skills.mentality, percent)


@dataclass
class Player:
    """A skater or goalie with ratings, projection and career record."""

    first_name: str
    last_name: str
    age: int
    overall: int
    player_type: Type
    position: Position
    play_type: PlayType
    skate_stats: SkatingStats
    goalie_movement: GoalieMovement | None
    projection: Projection
    view: GameView
    skills: Skills
    height_cm: int
    weight_kg: int
    birth_location: Location
    draft_status: DraftStatus = DraftStatus()
    stats: PlayerStats | None = None
    contract: Contract | None = None

    def __post_init__(self) -> None:
        if self.stats is None:
            self.stats = default_stats_for_position(self.position)

    @classmethod
    def new_skater(
        cls,
        first_name: str,
        last_name: str,
        age: int,
        overall: int,
        position: Position,
        play_type: PlayType,
        skate_stats: SkatingStats,
        projection: Projection,
        view: GameView,
        skills: Skills,
        height_cm: int,
        weight_kg: int,
        birth_location: Location,
    ) -> Player:
        """An undrafted, unsigned skater with empty stats."""
        return cls(
            first_name, last_name, age, overall, Type.SKATER, position, play_type,
            skate_stats, None, projection, view, skills, height_cm, weight_kg,
            birth_location, DraftStatus.undrafted(),
            default_stats_for_position(position), None,
        )

    @classmethod
    def new_goalie(
        cls,
        first_name: str,
        last_name: str,
        age: int,
        overall: int,
        play_type: PlayType,
        skate_stats: SkatingStats,
        goalie_movement: GoalieMovement,
        projection: Projection,
        view: GameView,
        skills: Skills,
        height_cm: int,
        weight_kg: int,
        birth_location: Location,
    ) -> Player:
        """An undrafted, unsigned goalie with empty goalie stats."""
        return cls(
            first_name, last_name, age, overall, Type.GOALIE, Position.GOALIE,
            play_type, skate_stats, goalie_movement, projection, view, skills,
            height_cm, weight_kg, birth_location, DraftStatus.undrafted(),
            PlayerStats.goalie_default(), None,
        )

    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def age_develop(self, coaching_bonus: int) -> None:
        """Develop for the coming age, then age one year and re-rate."""
        self.develop(coaching_bonus, self.age + 1)
        self.age += 1
        self.guess_overall()

    def develop(self, coaching_bonus: int, age: int) -> None:
        """Shift movement ratings by one development step at ``age``."""
        profile = self.projection.development_profile
        total_delta = (
            self._age_factor(age, self.is_in_growth_window(age))
            + self.get_curve_bonus(age)
            + self.growth_pressure(coaching_bonus)
            - _injury_penalty(profile.injury_risk)
        )
        max_rating = self.get_max_rating()
        self.skate_stats.apply_delta(total_delta, total_delta, total_delta, max_rating)
        if self.goalie_movement is not None:
            self.goalie_movement.apply_delta(total_delta, total_delta, total_delta, max_rating)

    def get_max_rating(self) -> int:
        profile = self.projection.development_profile
        return max(profile.ceiling, profile.floor)

    def growth_pressure(self, coaching_bonus: int) -> int:
        profile = self.projection.development_profile
        total = profile.growth_rate + profile.coachability + profile.work_ethic + coaching_bonus
        return _trunc_div(total, 45)

    def get_curve_bonus(self, age: int) -> int:
        profile = self.projection.development_profile
        curve = profile.curve
        if curve is DevelopmentCurve.EARLY:
            return 1 if age <= 22 else 0
        if curve is DevelopmentCurve.LATE:
            return 1 if age >= 24 else 0
        if curve is DevelopmentCurve.BOOM_BUST:
            return 1 if profile.consistency >= 60 else -1
        return 0

    def _age_factor(self, age: int, in_window: bool) -> int:
        if in_window:
            return 2
        if age < self.projection.development_profile.growth_window_start:
            return 1
        return -1

    def is_in_growth_window(self, age: int) -> bool:
        profile = self.projection.development_profile
        return profile.growth_window_start <= age <= profile.growth_window_end

    def guess_overall(self) -> None:
        """Set the overall rating to the rounded mean of the core ratings."""
        values = [
            self.skate_stats.speed,
            self.skate_stats.acceleration,
            self.skate_stats.edges,
            self.skills.offense,
            self.skills.defense,
            self.skills.mentality,
        ]
        if self.goalie_movement is not None:
            values += [
                self.goalie_movement.push,
                self.goalie_movement.side,
                self.goalie_movement.up_down,
            ]
        self.overall = _to_i8(_round_half_away(sum(values) / len(values)))


def is_goalie(player: Player) -> bool:
    """True when the player has goaltending movement ratings."""
    return player.goalie_movement is not None