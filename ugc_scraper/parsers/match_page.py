"""Match detail page (``matchpage_tf2h.cfm``)."""

from __future__ import annotations

from bs4 import BeautifulSoup

from ugc_scraper import MatchInfo, TeamRef
from ugc_scraper.dom import (
    attr,
    compile_selector,
    element_text,
    parse_int,
    require_text,
    select_last_text,
    select_text,
    team_id_from_link,
)
from ugc_scraper.errors import ElementNotFound
from ugc_scraper.parsers.base import Parser, normalize
from ugc_scraper.vocab import GameMode


class MatchPageParser(Parser):
    def __init__(self) -> None:
        self.format = compile_selector("h3.page-header > strong.styleColor")
        self.author = compile_selector(".row-fluid .col-md-12 span.text-success")
        self.comment = compile_selector(".row-fluid .col-md-12 > .white-row-light-small > p")
        self.team_link = compile_selector('a[href^="team_page"]:not(.btn-large)')
        self.result_team = compile_selector(".table.table-condensed.table-bordered tr:nth-child(2) td:nth-child(1)")
        self.result_score = compile_selector(".table.table-condensed.table-bordered tr:nth-child(2) td:nth-child(2)")
        self.map = compile_selector("h4.text-success.text-center > b")
        self.week = compile_selector("p.muted.text-center.nomargin > small > b:nth-child(1)")
        self.date = compile_selector("p.muted.text-center.nomargin > small > b:nth-child(2)")

    def parse_soup(self, soup: BeautifulSoup) -> MatchInfo:
        links = self.team_link.select(soup, limit=2)
        if len(links) < 2:
            raise ElementNotFound(self.team_link.pattern, "away team link" if links else "home team link")
        home_id = team_id_from_link(attr(links[0], "href"))
        away_id = team_id_from_link(attr(links[1], "href"))

        format_text = require_text(soup, self.format, "match format")

        names = self.result_team.select(soup, limit=2)
        if len(names) < 2:
            raise ElementNotFound(self.result_team.pattern, "away team name" if names else "home team name")
        scores = self.result_score.select(soup, limit=2)
        if len(scores) < 2:
            raise ElementNotFound(self.result_score.pattern, "away team score" if scores else "home team score")

        return MatchInfo(
            team_home=TeamRef(id=home_id, name=element_text(names[0], self.result_team, "home team name")),
            team_away=TeamRef(id=away_id, name=element_text(names[1], self.result_team, "away team name")),
            score_home=parse_int(element_text(scores[0], self.result_score, "home team score"), "home team score"),
            score_away=parse_int(element_text(scores[1], self.result_score, "away team score"), "away team score"),
            comment=select_last_text(soup, self.comment),
            comment_author=select_text(soup, self.author),
            map=require_text(soup, self.map, "match map"),
            week=parse_int(require_text(soup, self.week, "match week"), "match week"),
            format=normalize(GameMode.search, format_text, "match format"),
            default_date=require_text(soup, self.date, "match date"),
        )
