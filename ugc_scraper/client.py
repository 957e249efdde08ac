"""HTTP client for the UGC League website."""

from __future__ import annotations

import logging
import time
from urllib.parse import urljoin

import requests

from ugc_scraper import MapHistory, MatchInfo, MembershipHistory, Player, Seasons, Team, TeamMatches, TeamRef, TeamRosterData, Transaction
from ugc_scraper.config import ClientConfig
from ugc_scraper.errors import NotFoundError, RequestError
from ugc_scraper.parsers import (
    MapHistoryParser,
    MatchPageParser,
    PlayerDetailsParser,
    PlayerParser,
    SeasonsParser,
    TeamLookupParser,
    TeamMatchesParser,
    TeamParser,
    TeamRosterHistoryParser,
    TransactionParser,
)
from ugc_scraper.vocab import GameMode

logger = logging.getLogger(__name__)


class UgcClient:
    """Fetches pages and hands them to the matching parser.

    Missing players, teams and matches are answered by the site with a
    redirect to the front page, which is reported as ``NotFoundError``.
    """

    def __init__(self, config: ClientConfig | None = None, session: requests.Session | None = None) -> None:
        self.config = config or ClientConfig()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})

        self.player_parser = PlayerParser()
        self.player_details_parser = PlayerDetailsParser()
        self.team_parser = TeamParser()
        self.team_roster_history_parser = TeamRosterHistoryParser()
        self.team_matches_parser = TeamMatchesParser()
        self.seasons_parser = SeasonsParser()
        self.team_lookup_parser = TeamLookupParser()
        self.match_page_parser = MatchPageParser()
        self.transaction_parser = TransactionParser()
        self.map_history_parser = MapHistoryParser()

    def _url(self, path: str) -> str:
        return f"{self.config.base_url}/{path}"

    def request(self, url: str) -> str:
        """Fetch a page, retrying once if the request itself failed."""
        try:
            return self._try_request(url)
        except RequestError as e:
            logger.warning("failed to request %s, retrying: %s", url, e.cause)
            time.sleep(self.config.retry_delay)
            return self._try_request(url)

    def _try_request(self, url: str) -> str:
        response = self._get(url)
        if response.status_code == 302:
            location = response.headers.get("Location", "")
            # The matchpage_* pages redirect to each other when the id belongs to another game mode
            if "matchpage_" not in location:
                raise NotFoundError(url)
            response = self._get(urljoin(url, location))
            if response.status_code == 302:
                raise NotFoundError(url)
        if response.status_code == 404:
            raise NotFoundError(url)
        try:
            response.raise_for_status()
        except requests.RequestException as e:
            raise RequestError(url, e) from e
        return response.text

    def _get(self, url: str) -> requests.Response:
        logger.debug("GET %s", url)
        try:
            return self.session.get(url, timeout=self.config.timeout, allow_redirects=False)
        except requests.RequestException as e:
            raise RequestError(url, e) from e

    def player(self, steam_id: int) -> Player:
        """Retrieve player information."""
        body = self.request(self._url(f"players_page.cfm?player_id={steam_id}"))
        return self.player_parser.parse(body)

    def player_team_history(self, steam_id: int) -> tuple[MembershipHistory, ...]:
        body = self.request(self._url(f"players_page_details.cfm?player_id={steam_id}"))
        return self.player_details_parser.parse(body)

    def team(self, id: int) -> Team:
        body = self.request(self._url(f"team_page.cfm?clan_id={id}"))
        return self.team_parser.parse(body)

    def team_roster_history(self, id: int) -> TeamRosterData:
        body = self.request(self._url(f"team_page_rosterhistory.cfm?clan_id={id}"))
        return self.team_roster_history_parser.parse(body)

    def team_matches(self, id: int) -> TeamMatches:
        body = self.request(self._url(f"team_page_matches.cfm?clan_id={id}"))
        return self.team_matches_parser.parse(body)

    def previous_seasons(self) -> tuple[Seasons, ...]:
        body = self.request(self.config.base_url)
        return self.seasons_parser.parse(body)

    def teams(self, format: GameMode) -> tuple[TeamRef, ...]:
        """All teams registered for a game mode."""
        body = self.request(self._url(f"team_lookup_tf2{format.letter}.cfm"))
        return self.team_lookup_parser.parse(body)

    def match_info(self, id: int) -> MatchInfo:
        body = self.request(self._url(f"matchpage_tf2h.cfm?mid={id}"))
        return self.match_page_parser.parse(body)

    def transactions(self, format: GameMode) -> tuple[Transaction, ...]:
        body = self.request(self._url(f"rostertransactions_tf2{format.letter}_all.cfm"))
        return self.transaction_parser.parse(body)

    def map_history(self, format: GameMode, current_season_year: int | None = None) -> MapHistory:
        """Map rotation of a game mode; pass the current season's year to resolve its dates."""
        parser = self.map_history_parser
        if current_season_year is not None:
            parser = MapHistoryParser(current_season_year)
        body = self.request(self._url(f"maplist_tf2{format.letter}.cfm"))
        return parser.parse(body)
