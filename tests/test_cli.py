"""Tests for the scrape.py command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import scrape
from ugc_scraper.vocab import GameMode

FIXTURE_DIR = Path(__file__).parent / "fixtures"


class TestCli:
    def test_parse_file(self, capsys) -> None:
        code = scrape.main(["team", "--file", str(FIXTURE_DIR / "team_page.html")])
        assert code == 0
        assert json.loads(capsys.readouterr().out)["name"] == "froyotech"

    def test_map_history_year(self, capsys) -> None:
        code = scrape.main(["map-history", "--file", str(FIXTURE_DIR / "map_history_page.html"), "--year", "2024"])
        assert code == 0
        maps = json.loads(capsys.readouterr().out)["current"]["maps"]
        assert maps[0]["resolved_date"] == "2024-10-06"

    def test_parse_error_exits_non_zero(self, capsys) -> None:
        code = scrape.main(["team", "--file", str(FIXTURE_DIR / "seasons_page.html")])
        assert code == 1
        assert "ERROR" in capsys.readouterr().err

    def test_target_required(self) -> None:
        with pytest.raises(SystemExit):
            scrape.main(["team"])

    @pytest.mark.parametrize("text", ["highlander", "9v9", "TF2 Highlander"])
    def test_game_mode_argument(self, text: str) -> None:
        assert scrape.parse_game_mode(text) is GameMode.HIGHLANDER
