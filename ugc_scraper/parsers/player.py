"""Player profile page (``players_page.cfm``)."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ugc_scraper import Honors, Player, TeamMembership, TeamRef
from ugc_scraper.dates import parse_member_since
from ugc_scraper.dom import (
    attr,
    compile_selector,
    element_text,
    parse_int,
    require_element,
    require_text,
    select_last_text,
    select_text,
    steam_id_from_link,
    team_id_from_link,
)
from ugc_scraper.errors import EmptyText, InvalidText
from ugc_scraper.parsers.base import Parser, normalize
from ugc_scraper.vocab import Class, GameMode


class PlayerParser(Parser):
    def __init__(self) -> None:
        self.name = compile_selector(".col-md-4 > h3 > b")
        self.avatar = compile_selector(".col-md-4 img.img-responsive")
        self.steam_id = compile_selector('a[href^="players_page_details.cfm?player_id="]')
        self.country = compile_selector(".col-md-4 img.flag")
        self.favorite_classes = compile_selector(".col-md-4 .classes img[title]")
        self.honors_header = compile_selector(".col-md-4 .honors h5")
        self.honors_division = compile_selector(".col-md-4 .honors p > small")
        self.honors_team = compile_selector('.col-md-4 .honors p > a[href^="team_page"]')
        self.team_row = compile_selector(".col-md-8 .white-row-small.team-row")
        self.team_link = compile_selector('a[href^="team_page"]')
        self.team_league = compile_selector("small")
        self.team_since = compile_selector(".joined")

    def parse_soup(self, soup: BeautifulSoup) -> Player:
        name = require_text(soup, self.name, "player name")

        avatar_img = require_element(soup, self.avatar, "player avatar")
        avatar = attr(avatar_img, "data-cfsrc") or attr(avatar_img, "src")
        if not avatar:
            raise EmptyText(self.avatar.pattern, "player avatar")

        link = require_element(soup, self.steam_id, "player steam id")
        steam_id = steam_id_from_link(attr(link, "href"))

        flag = self.country.select_one(soup)
        country = (attr(flag, "title") or None) if flag is not None else None

        favorite_classes = frozenset(
            normalize(Class.from_str, attr(img, "title"), "favorite class")
            for img in self.favorite_classes.select(soup)
        )

        return Player(
            name=name,
            avatar=avatar,
            steam_id=steam_id,
            country=country,
            honors=tuple(self._honors(soup)),
            teams=tuple(self._team(row) for row in self.team_row.select(soup)),
            favorite_classes=favorite_classes,
        )

    def _honors(self, soup: BeautifulSoup) -> list[Honors]:
        # The three lists are paired by position; extra entries in any of them are dropped
        honors = []
        for header, division, team in zip(
            self.honors_header.select(soup),
            self.honors_division.select(soup),
            self.honors_team.select(soup),
        ):
            format, season = self._honors_header(element_text(header, self.honors_header, "honors header"))
            honors.append(
                Honors(
                    format=format,
                    season=season,
                    division=element_text(division, self.honors_division, "honors division"),
                    team=TeamRef(
                        id=team_id_from_link(attr(team, "href")),
                        name=element_text(team, self.honors_team, "honors team name"),
                    ),
                )
            )
        return honors

    def _honors_header(self, text: str) -> tuple[GameMode, int]:
        mode, sep, season = text.partition("Season")
        if not sep:
            raise InvalidText(text, "honors header")
        return (
            normalize(GameMode.search, mode.strip(), "honors game mode"),
            parse_int(season, "honors season"),
        )

    def _team(self, row: Tag) -> TeamMembership:
        link = require_element(row, self.team_link, "player team link")
        league = select_text(row, self.team_league)
        if league is None:
            raise EmptyText(self.team_league.pattern, "player team league")
        since = select_last_text(row, self.team_since)
        if since is None:
            raise EmptyText(self.team_since.pattern, "player team join date")
        return TeamMembership(
            team=TeamRef(
                id=team_id_from_link(attr(link, "href")),
                name=element_text(link, self.team_link, "player team name"),
            ),
            league=league,
            since=parse_member_since(since, "player team join date").date(),
        )
