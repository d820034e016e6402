"""Season statistics for skaters, goalies and teams."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GoalieStats:
    """Accumulated goaltending numbers."""

    starts: int = 0
    wins: int = 0
    losses: int = 0
    overtime_losses: int = 0
    shots_against: int = 0
    saves: int = 0
    goals_against: int = 0
    shutouts: int = 0
    power_play_goals_against: int = 0
    short_handed_goals_against: int = 0
    time_on_ice_minutes: int = 0

    def is_default(self) -> bool:
        """True when nothing has been recorded yet."""
        return self == GoalieStats()

    def save_percentage(self) -> float:
        """Saves per shot against; 0.0 before any shot."""
        if self.shots_against == 0:
            return 0.0
        return self.saves / self.shots_against

    def goals_against_average(self) -> float:
        """Goals against per sixty minutes; 0.0 before any ice time."""
        if self.time_on_ice_minutes == 0:
            return 0.0
        return self.goals_against * 60.0 / self.time_on_ice_minutes


@dataclass
class PlayerStats:
    """Accumulated numbers of one player; goalies also carry goalie stats."""

    games_played: int = 0
    goals: int = 0
    assists: int = 0
    plus_minus: int = 0
    penalty_minutes: int = 0
    shots: int = 0
    power_play_goals: int = 0
    power_play_assists: int = 0
    short_handed_goals: int = 0
    short_handed_assists: int = 0
    game_winning_goals: int = 0
    overtime_goals: int = 0
    faceoff_wins: int = 0
    faceoff_losses: int = 0
    hits: int = 0
    blocked_shots: int = 0
    takeaways: int = 0
    giveaways: int = 0
    time_on_ice_minutes: int = 0
    goalie_stats: GoalieStats | None = None

    @classmethod
    def skater_default(cls) -> PlayerStats:
        return cls()

    @classmethod
    def goalie_default(cls) -> PlayerStats:
        return cls(goalie_stats=GoalieStats())

    def is_default(self) -> bool:
        """True when no game has been recorded."""
        goalie_clean = self.goalie_stats is None or self.goalie_stats.is_default()
        return goalie_clean and PlayerStats(goalie_stats=self.goalie_stats) == self

    def points(self) -> int:
        return self.goals + self.assists

    def record_skater_game(
        self,
        goals: int,
        assists: int,
        plus_minus: int,
        penalty_minutes: int,
        shots: int,
        power_play_goals: int,
        power_play_assists: int,
        hits: int,
        blocked_shots: int,
        time_on_ice_minutes: int,
    ) -> None:
        """Add one skater game to the totals."""
        self.games_played += 1
        self.goals += goals
        self.assists += assists
        self.plus_minus += plus_minus
        self.penalty_minutes += penalty_minutes
        self.shots += shots
        self.power_play_goals += power_play_goals
        self.power_play_assists += power_play_assists
        self.hits += hits
        self.blocked_shots += blocked_shots
        self.time_on_ice_minutes += time_on_ice_minutes

    def record_goalie_game(
        self,
        win: bool,
        overtime_loss: bool,
        shots_against: int,
        saves: int,
        goals_against: int,
        shutout: bool,
        time_on_ice_minutes: int,
    ) -> None:
        """Add one goalie game; goalie totals change only if present."""
        self.games_played += 1
        self.time_on_ice_minutes += time_on_ice_minutes
        goalie = self.goalie_stats
        if goalie is None:
            return
        goalie.starts += 1
        goalie.shots_against += shots_against
        goalie.saves += saves
        goalie.goals_against += goals_against
        goalie.time_on_ice_minutes += time_on_ice_minutes
        if shutout:
            goalie.shutouts += 1
        if win:
            goalie.wins += 1
        elif overtime_loss:
            goalie.overtime_losses += 1
        else:
            goalie.losses += 1


@dataclass
class TeamStats:
    """Accumulated team numbers; points are two per win, one per overtime loss."""

    games_played: int = 0
    wins: int = 0
    losses: int = 0
    overtime_losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    shots_for: int = 0
    shots_against: int = 0
    power_play_goals: int = 0
    power_play_opportunities: int = 0
    penalty_kill_goals_against: int = 0
    penalty_kill_opportunities: int = 0
    faceoff_wins: int = 0
    faceoff_losses: int = 0
    hits: int = 0
    blocked_shots: int = 0
    points: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.points = self.wins * 2 + self.overtime_losses

    def goal_differential(self) -> int:
        return self.goals_for - self.goals_against

    def power_play_percentage(self) -> float:
        if self.power_play_opportunities == 0:
            return 0.0
        return self.power_play_goals / self.power_play_opportunities

    def penalty_kill_percentage(self) -> float:
        if self.penalty_kill_opportunities == 0:
            return 0.0
        return 1.0 - self.penalty_kill_goals_against / self.penalty_kill_opportunities

    def record_game(
        self,
        win: bool,
        overtime_loss: bool,
        goals_for: int,
        goals_against: int,
        shots_for: int,
        shots_against: int,
        power_play_goals: int,
        power_play_opportunities: int,
        penalty_kill_goals_against: int,
        penalty_kill_opportunities: int,
        faceoff_wins: int,
        faceoff_losses: int,
        hits: int,
        blocked_shots: int,
    ) -> None:
        """Add one game's result and numbers to the totals."""
        self.games_played += 1
        self.goals_for += goals_for
        self.goals_against += goals_against
        self.shots_for += shots_for
        self.shots_against += shots_against
        self.power_play_goals += power_play_goals
        self.power_play_opportunities += power_play_opportunities
        self.penalty_kill_goals_against += penalty_kill_goals_against
        self.penalty_kill_opportunities += penalty_kill_opportunities
        self.faceoff_wins += faceoff_wins
        self.faceoff_losses += faceoff_losses
        self.hits += hits
        self.blocked_shots += blocked_shots

        if win:
            self.wins += 1
            self.points += 2
        elif overtime_loss:
            self.overtime_losses += 1
            self.points += 1
        else:
            self.losses += 1