#!/usr/bin/env python3
"""
UGC League Scraper: command line

Fetches one page from ugcleague.com, or parses a saved copy of it, and prints
the parsed record as JSON.

Usage:
    python scrape.py team 7861                      # Fetch and parse a team page
    python scrape.py team-lookup 9v9                # All highlander teams
    python scrape.py map-history sixes --year 2024  # Resolve current season dates
    python scrape.py match --file matchpage.html    # Parse a saved page
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ugc_scraper.client import UgcClient
from ugc_scraper.config import ClientConfig
from ugc_scraper.errors import ScrapeError
from ugc_scraper.parsers import MapHistoryParser, PageKind, parser_for
from ugc_scraper.serialize import dumps
from ugc_scraper.vocab import GameMode

FORMAT_KINDS = {PageKind.TEAM_LOOKUP, PageKind.TRANSACTIONS, PageKind.MAP_HISTORY}


def parse_game_mode(text: str) -> GameMode:
    """Accept both the canonical value (``highlander``) and any site alias (``9v9``)."""
    try:
        return GameMode(text)
    except ValueError:
        return GameMode.from_str(text)


def fetch(client: UgcClient, kind: PageKind, target: str, year: int | None):
    if kind in FORMAT_KINDS:
        format = parse_game_mode(target)
        if kind is PageKind.TEAM_LOOKUP:
            return client.teams(format)
        if kind is PageKind.TRANSACTIONS:
            return client.transactions(format)
        return client.map_history(format, year)
    if kind is PageKind.SEASONS:
        return client.previous_seasons()

    id = int(target)
    return {
        PageKind.PLAYER: client.player,
        PageKind.PLAYER_TEAM_HISTORY: client.player_team_history,
        PageKind.TEAM: client.team,
        PageKind.TEAM_ROSTER_HISTORY: client.team_roster_history,
        PageKind.TEAM_MATCHES: client.team_matches,
        PageKind.MATCH: client.match_info,
    }[kind](id)


def parse_file(kind: PageKind, path: Path, year: int | None):
    parser = MapHistoryParser(year) if kind is PageKind.MAP_HISTORY else parser_for(kind)
    return parser.parse(path.read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Scrape a ugcleague.com page into JSON")
    parser.add_argument("kind", choices=[kind.value for kind in PageKind])
    parser.add_argument("target", nargs="?", help="player steam id, team id, match id or game mode")
    parser.add_argument("--file", type=Path, help="parse a saved page instead of fetching")
    parser.add_argument("--year", type=int, help="year of the current season, for map-history")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    kind = PageKind(args.kind)
    if args.file is None and args.target is None and kind is not PageKind.SEASONS:
        parser.error(f"{kind.value} needs a target or --file")

    try:
        if args.file is not None:
            record = parse_file(kind, args.file, args.year)
        else:
            record = fetch(UgcClient(ClientConfig.from_env()), kind, args.target, args.year)
    except (ScrapeError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(dumps(record))
    return 0


if __name__ == "__main__":
    sys.exit(main())
