"""JSON projection of parsed records."""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from datetime import date
from enum import Enum

from ugc_scraper import ByeWeek, MatchResult

# Steam ids exceed the integer range of JavaScript consumers
STRING_FIELDS = {"steam_id"}


def _result_type(result: MatchResult) -> str:
    if isinstance(result, ByeWeek):
        return "bye_week"
    return type(result).__name__.lower()


def to_jsonable(value):
    """Convert a record, or a tuple of records, into plain JSON values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if is_dataclass(value):
        data = {}
        if isinstance(value, MatchResult):
            data["type"] = _result_type(value)
        for field in fields(value):
            item = getattr(value, field.name)
            if field.name in STRING_FIELDS:
                data[field.name] = str(item)
            else:
                data[field.name] = to_jsonable(item)
        return data
    if isinstance(value, frozenset):
        return sorted(to_jsonable(item) for item in value)
    if isinstance(value, (tuple, list)):
        return [to_jsonable(item) for item in value]
    return value


def dumps(value, indent: int | None = 2) -> str:
    return json.dumps(to_jsonable(value), indent=indent, ensure_ascii=False)
