import pytest

from hockeysim.contract import Contract, ContractType, TeamContractSettings
from hockeysim.dates import GameDate
from hockeysim.general_data import PlayType, Position, Type
from hockeysim.line import Loadout
from hockeysim.location import Location
from hockeysim.movement import GoalieMovement, SkatingStats, SkatingType
from hockeysim.names import Conference, Division
from hockeysim.player import Player
from hockeysim.playing import GameView, Skills, ViewStyle
from hockeysim.projection import (
    DevelopmentCurve,
    DevelopmentProfile,
    DraftProjection,
    ProjMax,
    Projection,
)
from hockeysim.staff import StaffMember, StaffRatings, StaffRole
from hockeysim.stats import TeamStats
from hockeysim.team import Team, TeamLevel, auto_assign_lines


def make_player(position, overall, contract=None, last_name="Player"):
    goalie = position is Position.GOALIE
    projection = Projection(
        DraftProjection(1, 1, 50, 50, ProjMax.TOP4),
        DevelopmentProfile(80, 40, 50, 60, 50, 50, 10, 18, 27, DevelopmentCurve.LINEAR),
    )
    return Player(
        first_name="Test",
        last_name=last_name,
        age=20,
        overall=overall,
        player_type=Type.GOALIE if goalie else Type.SKATER,
        position=position,
        play_type=PlayType.HYBRID if goalie else PlayType.SNIPER,
        skate_stats=SkatingStats(50, 50, 50, SkatingType.QUICK),
        goalie_movement=GoalieMovement(50, 50, 50) if goalie else None,
        projection=projection,
        view=GameView(50, 50, 50, ViewStyle.SMART),
        skills=Skills(*([50] * 12)),
        height_cm=185,
        weight_kg=85,
        birth_location=Location("Nowhere", "Town", GameDate(0, 1, 1)),
        contract=contract,
    )


def make_staff(name, role):
    return StaffMember(name, 45, role, StaffRatings(50, 50, 50, 50))


def make_team(roster=None, staff=None):
    return Team(
        "City",
        "Skaters",
        "CSK",
        Conference.east(),
        Division.atlantic(),
        roster if roster is not None else [],
        staff if staff is not None else [],
    )


def make_contract(cap_hit):
    return Contract(ContractType.STANDARD, 3, cap_hit, cap_hit, 0.0, 0.0, 0, 0)


def test_new_team_defaults():
    team = make_team()
    assert team.level is TeamLevel.MAJOR_PRO
    assert team.team_stats == TeamStats()
    assert team.contract_settings == TeamContractSettings.nhl_default()
    assert team.lines == Loadout.none()
    assert team.roster == []
    assert team.staff == []


def test_add_player_appends():
    team = make_team()
    player = make_player(Position.CENTER, 70)
    team.add_player(player)
    assert team.roster == [player]


def test_add_players_moves_all_and_empties_source():
    team = make_team([make_player(Position.LW, 60)])
    incoming = [make_player(Position.RW, 61), make_player(Position.LD, 62)]
    moved = list(incoming)
    team.add_players(incoming)
    assert incoming == []
    assert team.roster[1:] == moved
    assert len(team.roster) == 3


def test_add_staff_member():
    team = make_team()
    coach = make_staff("Coach", StaffRole.HEAD_COACH)
    team.add_staff_member(coach)
    assert team.staff == [coach]


def test_head_coach_and_head_scout_found():
    coach = make_staff("Coach", StaffRole.HEAD_COACH)
    scout = make_staff("Scout", StaffRole.HEAD_SCOUT)
    team = make_team(staff=[make_staff("Owner", StaffRole.OWNER), coach, scout])
    assert team.head_coach() is coach
    assert team.head_scout() is scout


def test_head_coach_and_scout_missing():
    team = make_team(staff=[make_staff("Owner", StaffRole.OWNER)])
    assert team.head_coach() is None
    assert team.head_scout() is None


def test_head_coach_returns_first_match():
    first = make_staff("First", StaffRole.HEAD_COACH)
    second = make_staff("Second", StaffRole.HEAD_COACH)
    team = make_team(staff=[first, second])
    assert team.head_coach() is first


def test_development_coaches_filters_roles_in_order():
    staff = [
        make_staff("dev", StaffRole.DEVELOPMENT_COACH),
        make_staff("gm", StaffRole.GENERAL_MANAGER),
        make_staff("goalie", StaffRole.GOALIE_COACH),
        make_staff("skating", StaffRole.SKATING_COACH),
        make_staff("assistant", StaffRole.ASSISTANT_COACH),
        make_staff("director", StaffRole.DIRECTOR_OF_PLAYER_DEVELOPMENT),
    ]
    team = make_team(staff=staff)
    assert [m.name for m in team.development_coaches()] == [
        "dev", "goalie", "skating", "director",
    ]


def test_scouts_includes_head_scout_and_scouts():
    staff = [
        make_staff("a", StaffRole.SCOUT),
        make_staff("b", StaffRole.HEAD_COACH),
        make_staff("c", StaffRole.HEAD_SCOUT),
    ]
    team = make_team(staff=staff)
    assert [m.name for m in team.scouts()] == ["a", "c"]


def test_contract_count_and_cap_hit():
    roster = [
        make_player(Position.CENTER, 70, make_contract(1.5)),
        make_player(Position.LW, 70),
        make_player(Position.RD, 70, make_contract(2.25)),
    ]
    team = make_team(roster)
    assert team.active_contract_count() == 2
    assert team.total_cap_hit_millions() == pytest.approx(1.5 + 2.25)


def test_cap_hit_without_contracts_is_zero():
    team = make_team([make_player(Position.CENTER, 70)])
    assert team.active_contract_count() == 0
    assert team.total_cap_hit_millions() == 0.0


def test_auto_assign_lines_orders_by_overall():
    roster = [
        make_player(Position.LW, 60),   # 0
        make_player(Position.LW, 80),   # 1
        make_player(Position.CENTER, 75),  # 2
        make_player(Position.RW, 65),   # 3
        make_player(Position.LD, 70),   # 4
        make_player(Position.RD, 71),   # 5
        make_player(Position.GOALIE, 55),  # 6
        make_player(Position.GOALIE, 90),  # 7
    ]
    team = make_team(roster)
    auto_assign_lines(team)
    lines = team.lines
    assert lines.forward_lines[0] == (1, 2, 3)
    assert lines.forward_lines[1] == (0, -1, -1)
    assert lines.forward_lines[2] == (-1, -1, -1)
    assert lines.forward_lines[3] == (-1, -1, -1)
    assert lines.defense_pairs[0] == (4, 5)
    assert lines.defense_pairs[1] == (-1, -1)
    assert lines.goalies == (7, 6)
    assert lines.starter_share == 70


def test_auto_assign_lines_keeps_roster_order_on_ties():
    roster = [make_player(Position.CENTER, 70, last_name=str(i)) for i in range(5)]
    team = make_team(roster)
    auto_assign_lines(team)
    assert [line[1] for line in team.lines.forward_lines] == [0, 1, 2, 3]


def test_auto_assign_lines_empty_roster():
    team = make_team()
    auto_assign_lines(team)
    assert all(line == (-1, -1, -1) for line in team.lines.forward_lines)
    assert all(pair == (-1, -1) for pair in team.lines.defense_pairs)
    assert team.lines.goalies == (-1, -1)


def test_auto_assign_lines_every_slot_matches_position():
    positions = [Position.LW, Position.CENTER, Position.RW, Position.LD, Position.RD,
                 Position.GOALIE] * 4
    roster = [make_player(pos, 50 + i) for i, pos in enumerate(positions)]
    team = make_team(roster)
    auto_assign_lines(team)
    for line in team.lines.forward_lines:
        assert [roster[i].position for i in line] == [
            Position.LW, Position.CENTER, Position.RW,
        ]
    for pair in team.lines.defense_pairs:
        assert [roster[i].position for i in pair] == [Position.LD, Position.RD]
    overalls = [roster[line[1]].overall for line in team.lines.forward_lines]
    assert overalls == sorted(overalls, reverse=True)