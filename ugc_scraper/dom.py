"""Helpers for pulling text, links and ids out of a parsed page."""

from __future__ import annotations

import soupsieve
from bs4 import Tag
from soupsieve import SoupSieve

from ugc_scraper.errors import ElementNotFound, EmptyText, InvalidLink, InvalidText

STEAM_ID64_BASE = 76561197960265728


def compile_selector(css: str) -> SoupSieve:
    """Compile a constant selector; a syntax error here is a bug, not bad input."""
    return soupsieve.compile(css)


def first_text(element: Tag) -> str | None:
    """First non-blank text node below ``element``, trimmed."""
    return next(element.stripped_strings, None)


def last_text(element: Tag) -> str | None:
    """Last non-blank text node below ``element``, trimmed.

    Used where the value follows a label inside the same element,
    e.g. ``joined: <b>x</b>``.
    """
    text = None
    for text in element.stripped_strings:
        pass
    return text


def select_text(root: Tag, selector: SoupSieve) -> str | None:
    element = selector.select_one(root)
    if element is None:
        return None
    return first_text(element)


def select_last_text(root: Tag, selector: SoupSieve) -> str | None:
    element = selector.select_one(root)
    if element is None:
        return None
    return last_text(element)


def require_element(root: Tag, selector: SoupSieve, role: str) -> Tag:
    element = selector.select_one(root)
    if element is None:
        raise ElementNotFound(selector.pattern, role)
    return element


def require_text(root: Tag, selector: SoupSieve, role: str) -> str:
    """Text of the first match; missing element and blank text are separate errors."""
    text = first_text(require_element(root, selector, role))
    if text is None:
        raise EmptyText(selector.pattern, role)
    return text


def element_text(element: Tag, selector: SoupSieve, role: str) -> str:
    """``first_text`` of an element already selected with ``selector``."""
    text = first_text(element)
    if text is None:
        raise EmptyText(selector.pattern, role)
    return text


def attr(element: Tag, name: str) -> str:
    value = element.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return value


def has_class(element: Tag, name: str) -> bool:
    return name in (element.get("class") or [])


def steam_group_url(link: Tag) -> str:
    """Steam group href, with the doubled scheme some team pages carry removed."""
    return attr(link, "href").replace("http://http", "http")


def normalize_space(text: str) -> str:
    return " ".join(text.split())


def id_from_link(link: str, role: str) -> int:
    """Numeric id at the end of a link like ``team_page.cfm?clan_id=7861``."""
    _, sep, tail = link.rpartition("=")
    if not sep or not tail.isdecimal():
        raise InvalidLink(link, role)
    return int(tail)


def team_id_from_link(link: str) -> int:
    return id_from_link(link, "team id")


def match_id_from_link(link: str) -> int:
    return id_from_link(link, "match id")


def steam_id_from_link(link: str) -> int:
    return id_from_link(link, "steam id")


def steam_id_from_steam3(text: str, role: str) -> int:
    """Convert ``[U:1:64229260]`` to the 64 bit steam id."""
    inner = text.strip().strip("[]")
    parts = inner.split(":")
    if len(parts) != 3 or parts[0] != "U" or not parts[2].isdecimal():
        raise InvalidText(text, role)
    return STEAM_ID64_BASE + int(parts[2])


def parse_int(text: str, role: str) -> int:
    try:
        return int(text.strip())
    except ValueError as e:
        raise InvalidText(text, role) from e


def parse_float(text: str, role: str) -> float:
    try:
        return float(text.strip())
    except ValueError as e:
        raise InvalidText(text, role) from e
