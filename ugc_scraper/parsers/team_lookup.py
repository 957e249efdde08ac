"""Team listing for one game mode (``team_lookup_tf2h.cfm`` and friends)."""

from __future__ import annotations

from bs4 import BeautifulSoup

from ugc_scraper import TeamRef
from ugc_scraper.dom import attr, compile_selector, first_text, require_element, team_id_from_link
from ugc_scraper.errors import EmptyText
from ugc_scraper.parsers.base import Parser


class TeamLookupParser(Parser):
    def __init__(self) -> None:
        self.select = compile_selector('select[name="clan_select"]')
        self.option = compile_selector('option[value^="team_page"]')

    def parse_soup(self, soup: BeautifulSoup) -> tuple[TeamRef, ...]:
        select = require_element(soup, self.select, "team list")
        teams = []
        for option in self.option.select(select):
            text = first_text(option)
            if text is None:
                raise EmptyText(self.option.pattern, "team name")
            # Options read "<tag> - <name>"
            _, sep, name = text.partition("-")
            teams.append(
                TeamRef(
                    id=team_id_from_link(attr(option, "value")),
                    name=name.strip() if sep else text,
                )
            )
        return tuple(teams)
