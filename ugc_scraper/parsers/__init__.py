"""One parser per page kind."""

from __future__ import annotations

from enum import Enum

from ugc_scraper.parsers.base import Parser
from ugc_scraper.parsers.map_history import MapHistoryParser
from ugc_scraper.parsers.match_page import MatchPageParser
from ugc_scraper.parsers.player import PlayerParser
from ugc_scraper.parsers.player_details import PlayerDetailsParser
from ugc_scraper.parsers.seasons import SeasonsParser
from ugc_scraper.parsers.team import TeamParser
from ugc_scraper.parsers.team_lookup import TeamLookupParser
from ugc_scraper.parsers.team_matches import TeamMatchesParser
from ugc_scraper.parsers.team_roster_history import TeamRosterHistoryParser
from ugc_scraper.parsers.transactions import TransactionParser

__all__ = [
    "MapHistoryParser",
    "MatchPageParser",
    "PageKind",
    "Parser",
    "PlayerDetailsParser",
    "PlayerParser",
    "SeasonsParser",
    "TeamLookupParser",
    "TeamMatchesParser",
    "TeamParser",
    "TeamRosterHistoryParser",
    "TransactionParser",
    "parser_for",
]


class PageKind(Enum):
    PLAYER = "player"
    PLAYER_TEAM_HISTORY = "player-team-history"
    TEAM = "team"
    TEAM_ROSTER_HISTORY = "team-roster-history"
    TEAM_MATCHES = "team-matches"
    TEAM_LOOKUP = "team-lookup"
    MATCH = "match"
    SEASONS = "seasons"
    TRANSACTIONS = "transactions"
    MAP_HISTORY = "map-history"


_PARSERS: dict[PageKind, type[Parser]] = {
    PageKind.PLAYER: PlayerParser,
    PageKind.PLAYER_TEAM_HISTORY: PlayerDetailsParser,
    PageKind.TEAM: TeamParser,
    PageKind.TEAM_ROSTER_HISTORY: TeamRosterHistoryParser,
    PageKind.TEAM_MATCHES: TeamMatchesParser,
    PageKind.TEAM_LOOKUP: TeamLookupParser,
    PageKind.MATCH: MatchPageParser,
    PageKind.SEASONS: SeasonsParser,
    PageKind.TRANSACTIONS: TransactionParser,
    PageKind.MAP_HISTORY: MapHistoryParser,
}


def parser_for(kind: PageKind | str) -> Parser:
    """Build the parser for a page kind, given as ``PageKind`` or its value."""
    return _PARSERS[PageKind(kind)]()
