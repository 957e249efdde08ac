"""Date parsing across the site's historical layouts.

Layouts are tried in the order given and the first structural match wins.
Several old layouts are textual subsets of newer ones, so the order of every
tuple below matters.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone

from ugc_scraper.dom import normalize_space
from ugc_scraper.errors import InvalidDate

logger = logging.getLogger(__name__)

# The site renders member join times in US Eastern standard time
SITE_TIMEZONE = timezone(timedelta(hours=-5))

NAME_CHANGE_DATE_FORMATS = ("%b %d, %Y", "%B %d, %Y", "%m/%d/%Y")
MEMBER_SINCE_FORMATS = (
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %H:%M",
    "%b %d, %Y %I:%M %p",
    "%m/%d/%Y",
    "%b %d, %Y",
    "%B %d, %Y",
)
MEMBER_SINCE_RANGE_FORMATS = ("%m/%d/%Y", "%b %d, %Y")
ROSTER_HISTORY_DATE_FORMATS = ("%b %d, %Y", "%m/%d/%Y")
PLAYER_HISTORY_DATE_FORMATS = ("%m/%d/%Y",)
MAP_HISTORY_DATE_FORMATS = ("%m/%d/%y",)
MATCH_DATE_LEGACY_FORMATS = ("%a, %m/%d/%y",)
MATCH_DATE_FORMATS = ("%a, %b %d %Y", "%a %b %d %Y")


def parse_datetime(text: str, formats: tuple[str, ...]) -> datetime | None:
    """Try each layout in order and return the first match.

    Layouts with a two digit year (``%y``) are always read as 20xx.
    """
    for fmt in formats:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            logger.debug("date %r does not match layout %r", text, fmt)
            continue
        if "%y" in fmt:
            parsed = parsed.replace(year=2000 + parsed.year % 100)
        return parsed
    return None


def parse_date(text: str, formats: tuple[str, ...]) -> date | None:
    parsed = parse_datetime(text, formats)
    return parsed.date() if parsed else None


def parse_date_assume_year(text: str, year: int, formats: tuple[str, ...]) -> date | None:
    """Parse a layout that omits the year, e.g. ``Sun Oct 06``."""
    return parse_date(f"{text} {year}", formats)


def parse_match_date(text: str, year: int) -> date | None:
    """Resolve a schedule date, using ``year`` only when the text has none."""
    text = normalize_space(text)
    legacy = parse_date(text, MATCH_DATE_LEGACY_FORMATS)
    if legacy is not None:
        return legacy
    return parse_date_assume_year(text, year, MATCH_DATE_FORMATS)


def require_date(text: str, formats: tuple[str, ...], role: str) -> date:
    parsed = parse_date(normalize_space(text), formats)
    if parsed is None:
        raise InvalidDate(text, role)
    return parsed


def parse_member_since(text: str, role: str) -> datetime:
    """Parse the join cell of a team member.

    Older pages render ``(start - end)`` with a bare date, taken as midnight
    UTC. Newer pages render a single date with time of day in site time.
    """
    since = normalize_space(text)
    if since.startswith("("):
        start = since.split("-", 1)[0].strip().lstrip("(").strip()
        parsed = parse_datetime(start, MEMBER_SINCE_RANGE_FORMATS)
        if parsed is None:
            raise InvalidDate(text, f"{role} (alternate format)")
        return datetime.combine(parsed.date(), time.min, tzinfo=timezone.utc)

    parsed = parse_datetime(since, MEMBER_SINCE_FORMATS)
    if parsed is None:
        raise InvalidDate(text, role)
    return parsed.replace(tzinfo=SITE_TIMEZONE)
