"""Tests for the map rotation parser."""

from __future__ import annotations

from datetime import date

import pytest

from ugc_scraper import MapHistory, MapWeek
from ugc_scraper.errors import ElementNotFound, InvalidDate
from ugc_scraper.parsers import MapHistoryParser, PageKind, parser_for
from ugc_scraper.serialize import dumps, to_jsonable


@pytest.fixture
def history(read_fixture) -> MapHistory:
    return MapHistoryParser().parse(read_fixture("map_history_page.html"))


class TestMapHistoryParser:
    def test_matches_snapshot(self, history: MapHistory, snapshot) -> None:
        assert to_jsonable(history) == snapshot("map_history.json")

    def test_current_season(self, history: MapHistory) -> None:
        assert history.current.season == 32
        assert [m.map for m in history.current.maps] == ["koth_product", "pl_upward"]

    def test_regional_date_is_swapped(self, history: MapHistory) -> None:
        week_two = history.current.maps[1]
        assert week_two.date == "Sun, Oct 13"
        assert week_two.regional_date == "Tue, Oct 15"
        assert history.current.maps[0].regional_date is None

    def test_season_grouping(self, history: MapHistory) -> None:
        assert [(s.season, len(s.maps)) for s in history.previous] == [(31, 2), (30, 2), (29, 1)]

    def test_rows_before_first_header_are_ignored(self, history: MapHistory) -> None:
        maps = [m.map for season in history.previous for m in season.maps]
        assert "koth_orphan" not in maps

    def test_last_group_is_flushed(self, history: MapHistory) -> None:
        assert history.previous[-1].maps[0].date == date(2023, 1, 8)

    def test_dates_are_unresolved_without_year(self, history: MapHistory) -> None:
        assert all(m.resolved_date is None for m in history.current.maps)

    def test_resolved_dates(self, read_fixture) -> None:
        history = MapHistoryParser(current_season_year=2024).parse(read_fixture("map_history_page.html"))
        assert [m.resolved_date for m in history.current.maps] == [date(2024, 10, 6), date(2024, 10, 13)]

    def test_weeks(self, read_fixture) -> None:
        history = MapHistoryParser(current_season_year=2024).parse(read_fixture("map_history_page.html"))
        weeks = history.weeks()
        assert len(weeks) == 7
        assert weeks[0] == MapWeek(season=31, week=1, map="koth_lakeside_final", date=date(2024, 1, 7))
        assert weeks[-1] == MapWeek(season=32, week=2, map="pl_upward", date=date(2024, 10, 13))

    def test_weeks_skip_unresolved(self, history: MapHistory) -> None:
        assert {w.season for w in history.weeks()} == {31, 30, 29}

    def test_idempotent(self, read_fixture) -> None:
        parser = parser_for(PageKind.MAP_HISTORY)
        html = read_fixture("map_history_page.html")
        assert dumps(parser.parse(html)) == dumps(parser.parse(html))

    def test_missing_current_season(self) -> None:
        with pytest.raises(ElementNotFound) as exc:
            MapHistoryParser().parse("<div class='row'></div>")
        assert exc.value.role == "current season number"

    def test_bad_previous_date(self, read_fixture) -> None:
        html = read_fixture("map_history_page.html").replace("07/09/23", "July 9")
        with pytest.raises(InvalidDate) as exc:
            MapHistoryParser().parse(html)
        assert exc.value.role == "previous season date"
