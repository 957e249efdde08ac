"""Season listings from the site navigation menu."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ugc_scraper import Season, Seasons
from ugc_scraper.dom import attr, compile_selector, element_text, require_text
from ugc_scraper.parsers.base import Parser

NAME_SUFFIXES = (" Final Standings", " Final Rank", " Final Ranks")


class SeasonsParser(Parser):
    def __init__(self) -> None:
        self.menu = compile_selector(".sub-menu")
        self.name = compile_selector(".mega-menu-sub-title")
        self.link = compile_selector('ul[id$="seasons"] a[href^="rankings_"]')

    def parse_soup(self, soup: BeautifulSoup) -> tuple[Seasons, ...]:
        return tuple(
            self._menu(menu)
            for menu in self.menu.select(soup)
            if self.link.select_one(menu) is not None and self.name.select_one(menu) is not None
        )

    def _menu(self, menu: Tag) -> Seasons:
        mode = require_text(menu, self.name, "game mode name").removesuffix(" Menu")
        seasons = []
        for link in self.link.select(menu):
            name = element_text(link, self.link, "season name")
            for suffix in NAME_SUFFIXES:
                name = name.removesuffix(suffix)
            season_id = attr(link, "href").removeprefix("rankings_").removesuffix(".cfm")
            seasons.append(Season(id=season_id, name=name))
        return Seasons(mode=mode, seasons=tuple(seasons))
