"""Common parser contract."""

from __future__ import annotations

from typing import Callable, TypeVar

from bs4 import BeautifulSoup

from ugc_scraper.errors import InvalidText
from ugc_scraper.vocab import VocabularyError

T = TypeVar("T")


class Parser:
    """Turns the raw text of one kind of page into a record.

    Subclasses compile their selectors in ``__init__`` and implement
    ``parse_soup``. An instance holds no per-document state and can be reused.
    """

    def parse(self, document: str):
        return self.parse_soup(BeautifulSoup(document, "html.parser"))

    def parse_soup(self, soup: BeautifulSoup):
        raise NotImplementedError


def normalize(lookup: Callable[[str], T], text: str, role: str) -> T:
    """Run a vocabulary lookup, reporting unknown text as a parse error."""
    try:
        return lookup(text)
    except VocabularyError as e:
        raise InvalidText(text, role) from e
