"""Team profile page (``team_page.cfm``)."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ugc_scraper import Membership, NameChange, Record, Team
from ugc_scraper.dates import NAME_CHANGE_DATE_FORMATS, parse_member_since, require_date
from ugc_scraper.dom import (
    attr,
    compile_selector,
    element_text,
    normalize_space,
    parse_int,
    require_element,
    require_text,
    select_text,
    steam_group_url,
    steam_id_from_link,
)
from ugc_scraper.errors import EmptyText, InvalidText
from ugc_scraper.parsers.base import Parser, normalize
from ugc_scraper.vocab import GameMode, MembershipRole, Region

INFO = ".container .col-md-3 .white-row-small"


class TeamParser(Parser):
    def __init__(self) -> None:
        self.name = compile_selector(".container .col-md-12 h1 > b")
        self.tag = compile_selector(".container .col-md-12 h1 > span")
        self.image = compile_selector(".container .col-md-12 a > img")
        self.format = compile_selector(f"{INFO} h5 .text-danger b")
        self.division = compile_selector(f"{INFO} h5 > b")
        self.region = compile_selector(f"{INFO} h5 > small")
        self.timezone = compile_selector(f"{INFO} p > small > b")
        self.description = compile_selector(f"{INFO} p:nth-child(4) > small")
        self.titles = compile_selector(f"{INFO} p > .text-warning")
        self.steam_group = compile_selector('a.btn.btn-xs.btn-default[href*="//steamcommunity.com/groups"]')

        self.member = compile_selector(
            ".container .white-row-small > .row-fluid > .col-md-12 > .white-row-light-small"
        )
        self.member_link = compile_selector('b > a[href^="players_page"]')
        self.member_role = compile_selector(".tinytext")
        self.member_since = compile_selector(".tinytext > em")

        self.record = compile_selector(f"{INFO} .table-responsive > table tbody tr")
        self.record_season = compile_selector("td:nth-child(1) small span b")
        self.record_division = compile_selector("td:nth-child(2) small")
        self.record_score = compile_selector("td:nth-child(3)")

        self.name_change = compile_selector(".white-row-small:nth-child(3) .table-responsive table tbody tr")
        self.from_tag = compile_selector("td:nth-child(1) small")
        self.from_name = compile_selector("td:nth-child(2) small")
        self.to_tag = compile_selector("td:nth-child(3) small")
        self.to_name = compile_selector("td:nth-child(4) small")
        self.change_date = compile_selector("td:nth-child(5) small")

    def parse_soup(self, soup: BeautifulSoup) -> Team:
        # Teams without a display name only show their tag
        tag = select_text(soup, self.tag)
        name = select_text(soup, self.name) or tag
        if name is None:
            raise EmptyText(self.name.pattern, "team name")

        img = require_element(soup, self.image, "team image")
        image = attr(img, "data-cfsrc") or attr(img, "src")
        if not image:
            raise EmptyText(self.image.pattern, "team image")

        format_text = require_text(soup, self.format, "team format")
        region_text = select_text(soup, self.region)

        return Team(
            name=name,
            tag=tag or "",
            image=image,
            format=normalize(GameMode.search, format_text, "team format"),
            region=normalize(Region.from_str, region_text, "team region") if region_text else None,
            timezone=select_text(soup, self.timezone),
            steam_group=self._steam_group(soup),
            division=require_text(soup, self.division, "team division"),
            description=self._description(soup),
            titles=self._titles(soup),
            members=tuple(self._member(el) for el in self.member.select(soup)),
            results=tuple(self._record(row) for row in self.record.select(soup)),
            name_changes=tuple(
                sorted((self._name_change(row) for row in self.name_change.select(soup)), key=lambda c: c.date)
            ),
        )

    def _steam_group(self, soup: BeautifulSoup) -> str | None:
        link = self.steam_group.select_one(soup)
        if link is None:
            return None
        return steam_group_url(link)

    def _description(self, soup: BeautifulSoup) -> str:
        element = self.description.select_one(soup)
        if element is None:
            return ""
        return normalize_space(element.get_text(" "))

    def _titles(self, soup: BeautifulSoup) -> tuple[str, ...]:
        element = self.titles.select_one(soup)
        if element is None:
            return ()
        return tuple(element.stripped_strings)

    def _member(self, element: Tag) -> Membership:
        link = require_element(element, self.member_link, "team member")
        role = require_text(element, self.member_role, "team member role")
        since = require_text(element, self.member_since, "team member join date")
        return Membership(
            name=element_text(link, self.member_link, "team member name"),
            steam_id=steam_id_from_link(attr(link, "href")),
            role=normalize(MembershipRole.from_str, role, "team member role"),
            since=parse_member_since(since, "team member join date"),
        )

    def _record(self, row: Tag) -> Record:
        score = require_text(row, self.record_score, "team record score")
        wins, sep, losses = score.partition("-")
        if not sep:
            raise InvalidText(score, "team record score")
        return Record(
            season=parse_int(require_text(row, self.record_season, "team record season"), "team record season"),
            division=require_text(row, self.record_division, "team record division"),
            wins=parse_int(wins, "team record wins"),
            losses=parse_int(losses, "team record losses"),
        )

    def _name_change(self, row: Tag) -> NameChange:
        return NameChange(
            from_tag=select_text(row, self.from_tag) or "",
            from_name=require_text(row, self.from_name, "name change previous name"),
            to_tag=select_text(row, self.to_tag) or "",
            to_name=require_text(row, self.to_name, "name change new name"),
            date=require_date(
                require_text(row, self.change_date, "name change date"),
                NAME_CHANGE_DATE_FORMATS,
                "name change date",
            ),
        )
