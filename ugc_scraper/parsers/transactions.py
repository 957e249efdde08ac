"""Roster transactions for one game mode (``rostertransactions_tf2h_all.cfm``)."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ugc_scraper import TeamRef, Transaction
from ugc_scraper.dom import (
    attr,
    compile_selector,
    element_text,
    require_element,
    require_text,
    select_last_text,
    steam_id_from_link,
    team_id_from_link,
)
from ugc_scraper.errors import EmptyText
from ugc_scraper.parsers.base import Parser, normalize
from ugc_scraper.vocab import TransactionAction


class TransactionParser(Parser):
    def __init__(self) -> None:
        self.row = compile_selector("table.table.table-condensed.table-striped tr")
        self.player = compile_selector('a[href^="players_page"][title^="Roster"]')
        self.action = compile_selector("td:nth-child(4) span b")
        self.team_link = compile_selector('a[href^="team_page"]')
        self.team_name = compile_selector("td:nth-child(5)")

    def parse_soup(self, soup: BeautifulSoup) -> tuple[Transaction, ...]:
        # Heading and spacer rows carry no player link
        return tuple(
            self._row(row)
            for row in self.row.select(soup)
            if self.player.select_one(row) is not None
        )

    def _row(self, row: Tag) -> Transaction:
        player = require_element(row, self.player, "player link")
        action = require_text(row, self.action, "transaction action")
        team_link = require_element(row, self.team_link, "team link")
        team_name = select_last_text(row, self.team_name)
        if team_name is None:
            raise EmptyText(self.team_name.pattern, "team name")
        return Transaction(
            name=element_text(player, self.player, "player name"),
            steam_id=steam_id_from_link(attr(player, "href")),
            action=normalize(TransactionAction.from_str, action, "transaction action"),
            team=TeamRef(id=team_id_from_link(attr(team_link, "href")), name=team_name),
        )
