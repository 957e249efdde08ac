"""Team roster history page (``team_page_rosterhistory.cfm``)."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ugc_scraper import RosterHistory, TeamRosterData
from ugc_scraper.dates import ROSTER_HISTORY_DATE_FORMATS, require_date
from ugc_scraper.dom import compile_selector, require_element, require_text, select_text, steam_group_url, steam_id_from_steam3
from ugc_scraper.parsers.base import Parser
from ugc_scraper.vocab import InvalidMembershipRole, MembershipRole


class TeamRosterHistoryParser(Parser):
    def __init__(self) -> None:
        self.item = compile_selector(".container .white-row-small .row-fluid > .col-md-12 > .clearfix")
        self.name = compile_selector("h5 b")
        self.steam_id = compile_selector("h5 small")
        self.role = compile_selector("div > small")
        self.joined = compile_selector("span.text-success small")
        self.left = compile_selector("span.text-danger small")
        self.steam_group = compile_selector('p.muted a[href*="//steamcommunity.com/groups"]')

    def parse_soup(self, soup: BeautifulSoup) -> TeamRosterData:
        link = self.steam_group.select_one(soup)
        return TeamRosterData(
            steam_group=steam_group_url(link) if link is not None else None,
            history=tuple(self._item(item) for item in self.item.select(soup)),
        )

    def _item(self, item: Tag) -> RosterHistory:
        joined = require_date(
            require_text(item, self.joined, "roster history join date"),
            ROSTER_HISTORY_DATE_FORMATS,
            "roster history join date",
        )
        left_text = select_text(item, self.left)
        left = None
        if left_text is not None:
            left = require_date(left_text, ROSTER_HISTORY_DATE_FORMATS, "roster history leave date")

        return RosterHistory(
            name=require_text(item, self.name, "roster history name"),
            steam_id=steam_id_from_steam3(
                require_text(item, self.steam_id, "roster history steam id"), "roster history steam id"
            ),
            role=self._role(item),
            joined=joined,
            left=left,
        )

    def _role(self, item: Tag) -> MembershipRole:
        # Only the element is required; roles the site no longer uses count as members
        element = require_element(item, self.role, "roster history role")
        text = " ".join(element.stripped_strings)
        text = text.removeprefix("Former ")
        try:
            return MembershipRole.from_str(text)
        except InvalidMembershipRole:
            return MembershipRole.MEMBER
