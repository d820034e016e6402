"""Teams: roster, staff, statistics, cap settings and line assignments."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from hockeysim.contract import TeamContractSettings
from hockeysim.general_data import Position
from hockeysim.line import Loadout
from hockeysim.names import Conference, Division
from hockeysim.player import Player
from hockeysim.staff import StaffMember, StaffRole
from hockeysim.stats import TeamStats

_DEVELOPMENT_ROLES = frozenset(
    {
        StaffRole.DEVELOPMENT_COACH,
        StaffRole.GOALIE_COACH,
        StaffRole.SKATING_COACH,
        StaffRole.DIRECTOR_OF_PLAYER_DEVELOPMENT,
    }
)
_SCOUT_ROLES = frozenset({StaffRole.HEAD_SCOUT, StaffRole.SCOUT})
_EMPTY_SLOT = -1
_AUTO_STARTER_SHARE = 70


class TeamLevel(Enum):
    """Competitive level a team plays at."""

    MAJOR_PRO = "MAJOR_PRO"
    MINOR_PRO = "MINOR_PRO"
    JUNIOR = "JUNIOR"
    COLLEGE = "COLLEGE"
    INTERNATIONAL = "INTERNATIONAL"
    OTHER = "OTHER"


@dataclass
class Team:
    """A club with its players, staff, record, cap rules and lines."""

    city: str
    name: str
    abbreviation: str
    conference: Conference
    division: Division
    roster: list[Player] = field(default_factory=list)
    staff: list[StaffMember] = field(default_factory=list)
    level: TeamLevel = TeamLevel.MAJOR_PRO
    team_stats: TeamStats = field(default_factory=TeamStats)
    contract_settings: TeamContractSettings = field(
        default_factory=TeamContractSettings.nhl_default
    )
    lines: Loadout = field(default_factory=Loadout.none)

    def add_player(self, player: Player) -> None:
        self.roster.append(player)

    def add_players(self, players: list[Player]) -> None:
        """Move every player from ``players`` onto the roster, emptying the list."""
        self.roster.extend(players)
        players.clear()

    def add_staff_member(self, staff_member: StaffMember) -> None:
        self.staff.append(staff_member)

    def head_coach(self) -> StaffMember | None:
        """The first head coach on staff, if any."""
        return next((m for m in self.staff if m.role is StaffRole.HEAD_COACH), None)

    def head_scout(self) -> StaffMember | None:
        """The first head scout on staff, if any."""
        return next((m for m in self.staff if m.role is StaffRole.HEAD_SCOUT), None)

    def development_coaches(self) -> list[StaffMember]:
        """Staff whose role is about developing players, in staff order."""
        return [m for m in self.staff if m.role in _DEVELOPMENT_ROLES]

    def scouts(self) -> list[StaffMember]:
        """Head scouts and scouts, in staff order."""
        return [m for m in self.staff if m.role in _SCOUT_ROLES]

    def active_contract_count(self) -> int:
        return sum(1 for p in self.roster if p.contract is not None)

    def total_cap_hit_millions(self) -> float:
        """Sum of the cap hits of all signed players."""
        return sum(
            (p.contract.cap_hit_millions for p in self.roster if p.contract is not None),
            0.0,
        )


def auto_assign_lines(team: Team) -> None:
    """Fill the team's lines with its best players at each position.

    Slots hold roster indices; a slot without a suitable player holds -1.
    """
    by_position: dict[Position, list[tuple[int, int]]] = {pos: [] for pos in Position}
    for index, player in enumerate(team.roster):
        by_position[player.position].append((index, player.overall))

    ranked = {
        pos: [index for index, _ in sorted(entries, key=lambda e: e[1], reverse=True)]
        for pos, entries in by_position.items()
    }

    def slot(position: Position, rank: int) -> int:
        indices = ranked[position]
        return indices[rank] if rank < len(indices) else _EMPTY_SLOT

    forward_lines = [
        (slot(Position.LW, rank), slot(Position.CENTER, rank), slot(Position.RW, rank))
        for rank in range(4)
    ]
    defense_pairs = [(slot(Position.LD, rank), slot(Position.RD, rank)) for rank in range(3)]
    goalies = (slot(Position.GOALIE, 0), slot(Position.GOALIE, 1))

    team.lines = Loadout(forward_lines, defense_pairs, goalies, _AUTO_STARTER_SHARE)