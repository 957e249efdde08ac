"""Map rotation page (``maplist_tf2h.cfm``).

The page carries the current season's schedule in one table and every
previous season in a single flat table, where ``top-bar`` rows start a season.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ugc_scraper import CurrentSeasonMap, CurrentSeasonMapList, MapHistory, PreviousSeasonMap, PreviousSeasonMapList
from ugc_scraper.dates import MAP_HISTORY_DATE_FORMATS, parse_match_date, require_date
from ugc_scraper.dom import compile_selector, first_text, has_class, parse_int, require_text, select_text
from ugc_scraper.errors import ElementNotFound
from ugc_scraper.parsers.base import Parser


class MapHistoryParser(Parser):
    """``current_season_year`` lets the parser resolve the current season's dates,
    which the page prints without a year."""

    def __init__(self, current_season_year: int | None = None) -> None:
        self.current_season_year = current_season_year
        self.current_season = compile_selector(
            "div.row > div > div.white-row-small > h5:nth-child(2), "
            "div.row-fluid > div > div.white-row-small > h4:first-child+h5"
        )
        self.current_row = compile_selector("table.table.table-condensed.table-responsive tbody tr")
        self.current_week = compile_selector("td:nth-child(1)")
        self.current_map = compile_selector("td:nth-child(2)")
        self.current_date = compile_selector("td:nth-child(4) small")
        self.current_date_alt = compile_selector("td:nth-child(5) small")
        self.previous_row = compile_selector("table.table.table-condensed.table-bordered tbody tr:not(:first-child)")
        self.previous_week = compile_selector("td:nth-child(1)")
        self.previous_date = compile_selector("td:nth-child(2)")
        self.previous_map = compile_selector("td:nth-child(3)")

    def parse_soup(self, soup: BeautifulSoup) -> MapHistory:
        season_text = require_text(soup, self.current_season, "current season number")
        season = parse_int(season_text.removeprefix("Season"), "current season number")
        current = CurrentSeasonMapList(
            season=season,
            maps=tuple(self._current(row) for row in self.current_row.select(soup)),
        )
        return MapHistory(current=current, previous=tuple(self._previous(soup)))

    def _current(self, row: Tag) -> CurrentSeasonMap:
        week = parse_int(require_text(row, self.current_week, "current season week number"), "current season week number")
        map = require_text(row, self.current_map, "current season map")
        date = select_text(row, self.current_date)
        if date is None:
            raise ElementNotFound(self.current_date.pattern, "current season date")

        # With a second date cell the first one is the regional date
        regional_date = None
        alt_date = select_text(row, self.current_date_alt)
        if alt_date is not None:
            regional_date, date = date, alt_date

        resolved_date = None
        if self.current_season_year is not None:
            resolved_date = parse_match_date(date, self.current_season_year)

        return CurrentSeasonMap(
            week=week,
            map=map,
            date=date,
            regional_date=regional_date,
            resolved_date=resolved_date,
        )

    def _previous(self, soup: BeautifulSoup) -> list[PreviousSeasonMapList]:
        seasons = []
        season = None
        maps: list[PreviousSeasonMap] = []
        for row in self.previous_row.select(soup):
            if has_class(row, "top-bar"):
                if season is not None:
                    seasons.append(PreviousSeasonMapList(season=season, maps=tuple(maps)))
                header = (first_text(row) or "").removeprefix("Season ")
                season = parse_int(header, "previous season number")
                maps = []
            elif len(row.find_all(recursive=False)) == 3:
                if season is None:
                    continue
                week = require_text(row, self.previous_week, "previous season week number")
                # Column headings repeat inside the table
                if week == "Week":
                    continue
                maps.append(
                    PreviousSeasonMap(
                        week=parse_int(week, "previous season week number"),
                        map=require_text(row, self.previous_map, "previous season map"),
                        date=require_date(
                            require_text(row, self.previous_date, "previous season date"),
                            MAP_HISTORY_DATE_FORMATS,
                            "previous season date",
                        ),
                    )
                )
        if season is not None:
            seasons.append(PreviousSeasonMapList(season=season, maps=tuple(maps)))
        return seasons
