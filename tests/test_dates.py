"""Tests for the date normalizer."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from ugc_scraper.dates import (
    MAP_HISTORY_DATE_FORMATS,
    MEMBER_SINCE_FORMATS,
    NAME_CHANGE_DATE_FORMATS,
    PLAYER_HISTORY_DATE_FORMATS,
    ROSTER_HISTORY_DATE_FORMATS,
    SITE_TIMEZONE,
    parse_date,
    parse_date_assume_year,
    parse_datetime,
    parse_match_date,
    parse_member_since,
    require_date,
)
from ugc_scraper.errors import InvalidDate, ParseError


class TestParseDate:
    @pytest.mark.parametrize(
        "text,formats,expected",
        [
            ("Feb 1, 2021", NAME_CHANGE_DATE_FORMATS, date(2021, 2, 1)),
            ("February 1, 2021", NAME_CHANGE_DATE_FORMATS, date(2021, 2, 1)),
            ("02/01/2021", NAME_CHANGE_DATE_FORMATS, date(2021, 2, 1)),
            ("Jan 5, 2020", ROSTER_HISTORY_DATE_FORMATS, date(2020, 1, 5)),
            ("03/14/2021", ROSTER_HISTORY_DATE_FORMATS, date(2021, 3, 14)),
            ("6/23/2011", PLAYER_HISTORY_DATE_FORMATS, date(2011, 6, 23)),
            ("01/07/24", MAP_HISTORY_DATE_FORMATS, date(2024, 1, 7)),
            ("7/9/23", MAP_HISTORY_DATE_FORMATS, date(2023, 7, 9)),
        ],
    )
    def test_layouts(self, text: str, formats: tuple[str, ...], expected: date) -> None:
        assert parse_date(text, formats) == expected

    def test_no_match_returns_none(self) -> None:
        assert parse_date("next tuesday", NAME_CHANGE_DATE_FORMATS) is None

    def test_two_digit_year_is_always_this_century(self) -> None:
        assert parse_date("5/13/99", MAP_HISTORY_DATE_FORMATS) == date(2099, 5, 13)

    def test_first_matching_layout_wins(self) -> None:
        parsed = parse_datetime("01/05/2020 08:30 PM", MEMBER_SINCE_FORMATS)
        assert parsed == datetime(2020, 1, 5, 20, 30)

    def test_assume_year(self) -> None:
        assert parse_date_assume_year("Sun, Oct 06", 2024, ("%a, %b %d %Y",)) == date(2024, 10, 6)


class TestMatchDate:
    def test_legacy_layout_ignores_year(self) -> None:
        assert parse_match_date("Wed, 5/13/09", 2024) == date(2009, 5, 13)

    def test_with_comma(self) -> None:
        assert parse_match_date("Sun, Oct 06", 2024) == date(2024, 10, 6)

    def test_without_comma(self) -> None:
        assert parse_match_date("Sun Oct 06", 2019) == date(2019, 10, 6)

    def test_extra_whitespace(self) -> None:
        assert parse_match_date("  Sun,   Oct 06 ", 2024) == date(2024, 10, 6)

    def test_unparseable(self) -> None:
        assert parse_match_date("TBD", 2024) is None


class TestRequireDate:
    def test_returns_date(self) -> None:
        assert require_date("Jun 10,\n 2019", NAME_CHANGE_DATE_FORMATS, "name change date") == date(2019, 6, 10)

    def test_raises_with_role(self) -> None:
        with pytest.raises(InvalidDate) as exc:
            require_date("soon", NAME_CHANGE_DATE_FORMATS, "name change date")
        assert exc.value.date == "soon"
        assert exc.value.role == "name change date"
        assert "name change date" in str(exc.value)


class TestMemberSince:
    def test_time_of_day_in_site_time(self) -> None:
        since = parse_member_since("01/05/2020 08:30 PM", "join date")
        assert since == datetime(2020, 1, 5, 20, 30, tzinfo=SITE_TIMEZONE)
        assert since.utcoffset() == timedelta(hours=-5)

    def test_month_name_with_time(self) -> None:
        since = parse_member_since("Mar 14, 2021 10:15 AM", "join date")
        assert since == datetime(2021, 3, 14, 10, 15, tzinfo=SITE_TIMEZONE)

    def test_date_only(self) -> None:
        since = parse_member_since("3/14/2021", "join date")
        assert since == datetime(2021, 3, 14, tzinfo=SITE_TIMEZONE)

    def test_range_is_midnight_utc(self) -> None:
        since = parse_member_since("(6/23/2011 - present)", "join date")
        assert since == datetime(2011, 6, 23, tzinfo=timezone.utc)
        assert since.tzinfo is timezone.utc

    def test_range_with_month_name(self) -> None:
        since = parse_member_since("(Jun 23, 2011 - Jul 1, 2012)", "join date")
        assert since.date() == date(2011, 6, 23)

    def test_invalid(self) -> None:
        with pytest.raises(InvalidDate) as exc:
            parse_member_since("yesterday", "join date")
        assert exc.value.role == "join date"

    def test_invalid_range(self) -> None:
        with pytest.raises(ParseError) as exc:
            parse_member_since("(whenever - now)", "join date")
        assert exc.value.role == "join date (alternate format)"
