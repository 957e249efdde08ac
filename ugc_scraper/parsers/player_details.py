"""Player team history page (``players_page_details.cfm``)."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ugc_scraper import MembershipHistory, TeamRef
from ugc_scraper.dates import PLAYER_HISTORY_DATE_FORMATS, require_date
from ugc_scraper.dom import attr, compile_selector, element_text, require_element, require_text, select_text, team_id_from_link
from ugc_scraper.errors import InvalidDate
from ugc_scraper.parsers.base import Parser


class PlayerDetailsParser(Parser):
    def __init__(self) -> None:
        self.group = compile_selector(".container .white-row-small table")
        self.format = compile_selector("thead h4")
        self.row = compile_selector("tbody > tr:not(:first-child)")
        self.team_link = compile_selector('td:nth-child(3) a[href^="team_page"]')
        self.division = compile_selector("td:nth-child(3) small")
        self.joined = compile_selector("td:nth-child(5) span")
        self.left = compile_selector("td:nth-child(6) span")

    def parse_soup(self, soup: BeautifulSoup) -> tuple[MembershipHistory, ...]:
        history = []
        for group in self.group.select(soup):
            format = require_text(group, self.format, "team history format")
            history.extend(self._row(row, format) for row in self.row.select(group))
        return tuple(history)

    def _row(self, row: Tag, format: str) -> MembershipHistory:
        link = require_element(row, self.team_link, "team history team")
        joined = require_date(
            require_text(row, self.joined, "team history join date"),
            PLAYER_HISTORY_DATE_FORMATS,
            "team history join date",
        )
        left_text = select_text(row, self.left)
        left = None
        if left_text is not None:
            left = require_date(left_text, PLAYER_HISTORY_DATE_FORMATS, "team history leave date")
            if left < joined:
                raise InvalidDate(left_text, "team history leave date")
        return MembershipHistory(
            format=format,
            team=TeamRef(
                id=team_id_from_link(attr(link, "href")),
                name=element_text(link, self.team_link, "team history team name"),
            ),
            division=require_text(row, self.division, "team history division"),
            joined=joined,
            left=left,
        )
