"""UGC League scraper: shared data models.

Every record is built in one ``parse`` call and never changed afterwards.
Teams mentioned inside other records are plain ``TeamRef`` copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ugc_scraper.dates import parse_match_date
from ugc_scraper.vocab import Class, GameMode, MembershipRole, Region, Side, TransactionAction


@dataclass(frozen=True)
class TeamRef:
    id: int
    name: str


@dataclass(frozen=True)
class Honors:
    """One seasonal award line on a player profile."""

    format: GameMode
    season: int
    division: str
    team: TeamRef


@dataclass(frozen=True)
class TeamMembership:
    """A player's current tie to a team."""

    team: TeamRef
    league: str
    since: date


@dataclass(frozen=True)
class Player:
    name: str
    avatar: str
    steam_id: int
    country: str | None
    honors: tuple[Honors, ...]
    teams: tuple[TeamMembership, ...]
    favorite_classes: frozenset[Class]


@dataclass(frozen=True)
class MembershipHistory:
    """A past or present team of a player; ``left`` is None while still a member."""

    format: str
    team: TeamRef
    division: str
    joined: date
    left: date | None


@dataclass(frozen=True)
class NameChange:
    from_tag: str
    from_name: str
    to_tag: str
    to_name: str
    date: date


@dataclass(frozen=True)
class Membership:
    """One entry of a team's current roster."""

    name: str
    steam_id: int
    role: MembershipRole
    since: datetime


@dataclass(frozen=True)
class Record:
    """Win/loss record of a team for one season."""

    season: int
    division: str
    wins: int
    losses: int


@dataclass(frozen=True)
class Team:
    name: str
    tag: str
    image: str
    format: GameMode
    region: Region | None
    timezone: str | None
    steam_group: str | None
    division: str
    description: str
    titles: tuple[str, ...]
    members: tuple[Membership, ...]
    results: tuple[Record, ...]
    name_changes: tuple[NameChange, ...]


@dataclass(frozen=True)
class RosterHistory:
    name: str
    steam_id: int
    role: MembershipRole
    joined: date
    left: date | None


@dataclass(frozen=True)
class TeamRosterData:
    steam_group: str | None
    history: tuple[RosterHistory, ...]


class MatchResult:
    """Outcome of a scheduled match: ``Played``, ``Pending``, ``Unknown`` or ``ByeWeek``."""

    def match_id(self) -> int | None:
        return getattr(self, "id", None)

    def opponent_team(self) -> TeamRef | None:
        return getattr(self, "opponent", None)


@dataclass(frozen=True)
class Played(MatchResult):
    id: int
    opponent: TeamRef
    score: int
    score_opponent: int
    match_points: float
    match_points_opponent: float


@dataclass(frozen=True)
class Pending(MatchResult):
    """Scheduled and linked, but no match points have been awarded yet."""

    id: int
    opponent: TeamRef
    score: int
    score_opponent: int


@dataclass(frozen=True)
class Unknown(MatchResult):
    """An opponent row without a match link; older pages have none."""

    opponent: TeamRef
    score: int
    score_opponent: int


@dataclass(frozen=True)
class ByeWeek(MatchResult):
    pass


@dataclass(frozen=True)
class MatchInfo:
    team_home: TeamRef
    team_away: TeamRef
    score_home: int
    score_away: int
    comment: str | None
    comment_author: str | None
    map: str
    week: int
    format: GameMode
    default_date: str


@dataclass(frozen=True)
class TeamSeasonMatch:
    division: str
    week: int
    date: str
    side: Side
    result: MatchResult
    map: str

    def resolve_date(self, year: int) -> date | None:
        """Calendar date of the match, ``year`` being the season's year."""
        return parse_match_date(self.date, year)

    def match_info(self, team: TeamRef, format: GameMode) -> MatchInfo | None:
        """Rebuild the match page record for a linked match from the schedule row."""
        result = self.result
        if not isinstance(result, (Played, Pending)):
            return None
        if self.side is Side.HOME:
            home, away = team, result.opponent
            score_home, score_away = result.score, result.score_opponent
        else:
            home, away = result.opponent, team
            score_home, score_away = result.score_opponent, result.score
        return MatchInfo(
            team_home=home,
            team_away=away,
            score_home=score_home,
            score_away=score_away,
            comment=None,
            comment_author=None,
            map=self.map,
            week=self.week,
            format=format,
            default_date=self.date,
        )


@dataclass(frozen=True)
class TeamSeason:
    season: int
    format: GameMode
    matches: tuple[TeamSeasonMatch, ...]


@dataclass(frozen=True)
class TeamMatches:
    team: TeamRef
    seasons: tuple[TeamSeason, ...]


@dataclass(frozen=True)
class Season:
    id: str
    name: str


@dataclass(frozen=True)
class Seasons:
    mode: str
    seasons: tuple[Season, ...]


@dataclass(frozen=True)
class Transaction:
    name: str
    steam_id: int
    action: TransactionAction
    team: TeamRef


@dataclass(frozen=True)
class CurrentSeasonMap:
    week: int
    map: str
    date: str
    regional_date: str | None
    resolved_date: date | None = None


@dataclass(frozen=True)
class CurrentSeasonMapList:
    season: int
    maps: tuple[CurrentSeasonMap, ...]


@dataclass(frozen=True)
class PreviousSeasonMap:
    week: int
    map: str
    date: date


@dataclass(frozen=True)
class PreviousSeasonMapList:
    season: int
    maps: tuple[PreviousSeasonMap, ...]


@dataclass(frozen=True)
class MapWeek:
    season: int
    week: int
    map: str
    date: date


@dataclass(frozen=True)
class MapHistory:
    current: CurrentSeasonMapList
    previous: tuple[PreviousSeasonMapList, ...]

    def weeks(self) -> list[MapWeek]:
        """Every week with a known date, previous seasons first."""
        weeks = [
            MapWeek(season=season.season, week=m.week, map=m.map, date=m.date)
            for season in self.previous
            for m in season.maps
        ]
        weeks.extend(
            MapWeek(season=self.current.season, week=m.week, map=m.map, date=m.resolved_date)
            for m in self.current.maps
            if m.resolved_date is not None
        )
        return weeks
