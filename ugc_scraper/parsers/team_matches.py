"""Team match history page (``team_page_matches.cfm``).

The page is one table per team where each season contributes a ``thead`` with
the season title, a ``tbody`` of column headings and a ``tbody`` of matches.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ugc_scraper import ByeWeek, MatchResult, Pending, Played, TeamMatches, TeamRef, TeamSeason, TeamSeasonMatch, Unknown
from ugc_scraper.dom import (
    attr,
    compile_selector,
    element_text,
    first_text,
    match_id_from_link,
    parse_float,
    parse_int,
    require_element,
    require_text,
    select_text,
    team_id_from_link,
)
from ugc_scraper.errors import ElementNotFound, InvalidLink, InvalidText
from ugc_scraper.parsers.base import Parser, normalize
from ugc_scraper.vocab import GameMode, Side

TABLE = ".container table.table.table-condensed.table-striped"


class TeamMatchesParser(Parser):
    def __init__(self) -> None:
        self.title = compile_selector(f"{TABLE} thead h4")
        self.season = compile_selector(f"{TABLE} thead h4 b")
        self.matches = compile_selector(f"{TABLE} tbody:nth-child(3n)")
        self.match = compile_selector("tr:not(:last-child)")
        self.division = compile_selector("td:nth-child(1) small")
        self.week = compile_selector("td:nth-child(2) small")
        self.date = compile_selector("td:nth-child(3) small")
        self.side = compile_selector("td:nth-child(4) small")
        self.opponent = compile_selector("td:nth-child(6) a")
        self.map = compile_selector("td:nth-child(7)")
        self.scores = compile_selector("td:nth-child(8)")
        self.points = compile_selector("td:nth-child(9) small")
        self.points_opponent = compile_selector("td:nth-child(10) small")
        self.match_page = compile_selector('td a[href^="matchpage"]')

        self.team_name = compile_selector("div.col-md-9 > h2 > b")
        self.team_link = compile_selector('h2 > span.pull-right > a[href^="team_page.cfm"]')

    def parse_soup(self, soup: BeautifulSoup) -> TeamMatches:
        seasons = tuple(
            self._season(title, season, matches)
            for title, season, matches in zip(
                self.title.select(soup),
                self.season.select(soup),
                self.matches.select(soup),
            )
        )

        link = require_element(soup, self.team_link, "match team link")
        try:
            team_id = team_id_from_link(attr(link, "href"))
        except InvalidLink as e:
            raise ElementNotFound(self.team_link.pattern, "match team link") from e

        team = TeamRef(id=team_id, name=select_text(soup, self.team_name) or "")
        return TeamMatches(team=team, seasons=seasons)

    def _season(self, title: Tag, season: Tag, matches: Tag) -> TeamSeason:
        format_text = element_text(title, self.title, "season title")
        season_text = element_text(season, self.season, "season title")
        games = [self._match(game) for game in self.match.select(matches)]
        games.sort(key=lambda game: game.week)
        return TeamSeason(
            season=parse_int(season_text.removeprefix("Season "), "season title"),
            format=normalize(GameMode.search, format_text, "season format"),
            matches=tuple(games),
        )

    def _match(self, game: Tag) -> TeamSeasonMatch:
        division = require_text(game, self.division, "match division")
        week = require_text(game, self.week, "match week")
        date = require_text(game, self.date, "match date")
        side = require_text(game, self.side, "match side")
        map = require_text(game, self.map, "match map")
        scores = require_text(game, self.scores, "match scores").strip("()")

        return TeamSeasonMatch(
            division=division,
            week=parse_int(week, "match week"),
            date=date,
            side=normalize(Side.from_str, side, "match side"),
            result=self._result(game, scores),
            map=map,
        )

    def _result(self, game: Tag, scores: str) -> MatchResult:
        score, sep, score_opponent = scores.partition("-")
        if not sep:
            raise InvalidText(scores, "match scores")
        # Unplayed matches show blank scores
        score = self._score(score)
        score_opponent = self._score(score_opponent)

        points = select_text(game, self.points)
        points_opponent = select_text(game, self.points_opponent)
        if points is not None:
            points = parse_float(points, "match points")
        if points_opponent is not None:
            points_opponent = parse_float(points_opponent, "match points opponent")

        match_id = None
        link = self.match_page.select_one(game)
        if link is not None:
            try:
                match_id = match_id_from_link(attr(link, "href"))
            except InvalidLink:
                match_id = None

        opponent_link = self.opponent.select_one(game)
        if opponent_link is None:
            return ByeWeek()
        opponent = TeamRef(
            id=team_id_from_link(attr(opponent_link, "href")),
            name=first_text(opponent_link) or "",
        )

        if match_id is None:
            return Unknown(opponent=opponent, score=score, score_opponent=score_opponent)
        if points is None and points_opponent is None:
            return Pending(id=match_id, opponent=opponent, score=score, score_opponent=score_opponent)
        if points is not None and points_opponent is not None:
            return Played(
                id=match_id,
                opponent=opponent,
                score=score,
                score_opponent=score_opponent,
                match_points=points,
                match_points_opponent=points_opponent,
            )
        # Only one side has points
        return ByeWeek()

    @staticmethod
    def _score(text: str) -> int:
        text = text.strip()
        return int(text) if text.isdecimal() else 0
