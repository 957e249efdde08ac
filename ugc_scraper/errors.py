"""Scrape and parse errors.

Every parse failure carries the selector or offending value plus the role the
value was filling, so a markup change can be tracked down without the page.
"""

from __future__ import annotations


class ScrapeError(Exception):
    """Base exception for everything that can go wrong getting a record."""


class RequestError(ScrapeError):
    """Raised when a page could not be fetched."""

    def __init__(self, url: str, cause: Exception | None = None) -> None:
        self.url = url
        self.cause = cause
        message = f"Failed to request {url}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class NotFoundError(ScrapeError):
    """Raised when the site redirects away from, or 404s, a requested page."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Page not found: {url}")


class ParseError(ScrapeError):
    """A page was fetched but could not be turned into a record."""

    def __init__(self, message: str, role: str) -> None:
        super().__init__(message)
        self.role = role

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{self.__class__.__name__}({fields})"


class ElementNotFound(ParseError):
    def __init__(self, selector: str, role: str) -> None:
        super().__init__(f"Couldn't find expected element '{selector}' for {role}", role)
        self.selector = selector


class EmptyText(ParseError):
    def __init__(self, selector: str, role: str) -> None:
        super().__init__(f"Element '{selector}' does not contain text for {role}", role)
        self.selector = selector


class InvalidLink(ParseError):
    def __init__(self, link: str, role: str) -> None:
        super().__init__(f"Invalid link for {role}: {link}", role)
        self.link = link


class InvalidDate(ParseError):
    def __init__(self, date: str, role: str) -> None:
        super().__init__(f"Invalid date for {role}: {date}", role)
        self.date = date


class InvalidText(ParseError):
    def __init__(self, text: str, role: str) -> None:
        super().__init__(f"Invalid text for {role}: {text}", role)
        self.text = text
