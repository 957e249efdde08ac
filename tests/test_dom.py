"""Tests for the document accessor helpers."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from ugc_scraper.dom import (
    attr,
    compile_selector,
    id_from_link,
    last_text,
    match_id_from_link,
    normalize_space,
    parse_float,
    parse_int,
    require_element,
    require_text,
    select_last_text,
    select_text,
    steam_group_url,
    steam_id_from_link,
    steam_id_from_steam3,
    team_id_from_link,
)
from ugc_scraper.errors import ElementNotFound, EmptyText, InvalidLink, InvalidText
from ugc_scraper.parsers import TeamLookupParser

HTML = """
<div class="card">
  <p class="label">  joined:   <b>Jan 5, 2020</b>  </p>
  <p class="blank">   </p>
  <a class="team" href="team_page.cfm?clan_id=7861" data-x="1">froyotech</a>
</div>
"""


@pytest.fixture
def soup() -> BeautifulSoup:
    return BeautifulSoup(HTML, "html.parser")


class TestSelection:
    def test_select_text_first_node(self, soup: BeautifulSoup) -> None:
        assert select_text(soup, compile_selector("p.label")) == "joined:"

    def test_select_last_text(self, soup: BeautifulSoup) -> None:
        assert select_last_text(soup, compile_selector("p.label")) == "Jan 5, 2020"

    def test_missing_and_blank_are_none(self, soup: BeautifulSoup) -> None:
        assert select_text(soup, compile_selector("p.missing")) is None
        assert select_text(soup, compile_selector("p.blank")) is None
        assert last_text(soup.select_one("p.blank")) is None

    def test_require_element_missing(self, soup: BeautifulSoup) -> None:
        selector = compile_selector("h1 > b")
        with pytest.raises(ElementNotFound) as exc:
            require_element(soup, selector, "team name")
        assert exc.value.selector == "h1 > b"
        assert exc.value.role == "team name"
        assert str(exc.value) == "Couldn't find expected element 'h1 > b' for team name"

    def test_require_text_blank(self, soup: BeautifulSoup) -> None:
        with pytest.raises(EmptyText) as exc:
            require_text(soup, compile_selector("p.blank"), "description")
        assert exc.value.selector == "p.blank"

    def test_require_text(self, soup: BeautifulSoup) -> None:
        assert require_text(soup, compile_selector("a.team"), "team") == "froyotech"

    def test_attr(self, soup: BeautifulSoup) -> None:
        link = soup.select_one("a.team")
        assert attr(link, "href") == "team_page.cfm?clan_id=7861"
        assert attr(link, "class") == "team"
        assert attr(link, "title") == ""


class TestLinks:
    def test_ids(self) -> None:
        assert team_id_from_link("team_page.cfm?clan_id=7861") == 7861
        assert match_id_from_link("matchpage_tf2h.cfm?mid=50001") == 50001
        assert steam_id_from_link("players_page.cfm?player_id=76561197970669109") == 76561197970669109

    @pytest.mark.parametrize(
        "link", ["", "team_page.cfm", "team_page.cfm?clan_id=", "team_page.cfm?clan_id=abc", "team_page.cfm?clan_id=7²"]
    )
    def test_invalid(self, link: str) -> None:
        with pytest.raises(InvalidLink) as exc:
            id_from_link(link, "team id")
        assert exc.value.link == link
        assert exc.value.role == "team id"

    def test_steam3(self) -> None:
        assert steam_id_from_steam3("[U:1:10403381]", "steam id") == 76561197970669109
        assert steam_id_from_steam3(" [U:1:0] ", "steam id") == 76561197960265728

    @pytest.mark.parametrize("text", ["STEAM_0:1:123", "[U:1:]", "[G:1:5]", "76561197970669109", "[U:1:5²]"])
    def test_steam3_invalid(self, text: str) -> None:
        with pytest.raises(InvalidText):
            steam_id_from_steam3(text, "steam id")

    def test_superscript_digit_in_lookup_option(self) -> None:
        html = '<select name="clan_select"><option value="team_page.cfm?clan_id=7²">AB - Team</option></select>'
        with pytest.raises(InvalidLink) as exc:
            TeamLookupParser().parse(html)
        assert exc.value.link == "team_page.cfm?clan_id=7²"

    def test_steam_group_url(self) -> None:
        link = BeautifulSoup('<a href="http://http://steamcommunity.com/groups/froyo">g</a>', "html.parser").a
        assert steam_group_url(link) == "http://steamcommunity.com/groups/froyo"


class TestText:
    def test_normalize_space(self) -> None:
        assert normalize_space("  Top NA\n   team  ") == "Top NA team"

    def test_numbers(self) -> None:
        assert parse_int(" 30 ", "season") == 30
        assert parse_float("1.5", "points") == 1.5
        with pytest.raises(InvalidText) as exc:
            parse_int("Season 30", "season")
        assert exc.value.text == "Season 30"
