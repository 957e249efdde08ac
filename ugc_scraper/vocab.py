"""Controlled vocabularies for free-form site text.

Each vocabulary maps every spelling the site has used over the years onto one
canonical member. Alias tables are ordered tuples and are scanned top to
bottom; unknown text raises the matching ``Invalid*`` error.
"""

from __future__ import annotations

from enum import Enum


class VocabularyError(ValueError):
    """Text did not match any known alias."""

    kind = "value"

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid {self.kind}: {text}")
        self.text = text


class InvalidGameMode(VocabularyError):
    kind = "game mode"


class InvalidRegion(VocabularyError):
    kind = "team region"


class InvalidClass(VocabularyError):
    kind = "class"


class InvalidMembershipRole(VocabularyError):
    kind = "membership role"


class InvalidTransactionAction(VocabularyError):
    kind = "transaction action"


class InvalidSide(VocabularyError):
    kind = "match side"


def _lookup(text: str, aliases: tuple, error: type[VocabularyError]):
    for alias, member in aliases:
        if alias == text:
            return member
    raise error(text)


class GameMode(Enum):
    HIGHLANDER = "highlander"
    SIXES = "sixes"
    FOURS = "fours"
    ULTIDUO = "ultiduo"

    @classmethod
    def from_str(cls, text: str) -> GameMode:
        return _lookup(text, _GAME_MODE_ALIASES, InvalidGameMode)

    @classmethod
    def search(cls, text: str) -> GameMode:
        """Find the game mode in a heading like ``"TF2 Highlander Match"``.

        The whole text is tried first, then each space separated word.
        """
        try:
            return cls.from_str(text)
        except InvalidGameMode:
            pass
        for part in text.split(" "):
            try:
                return cls.from_str(part)
            except InvalidGameMode:
                continue
        raise InvalidGameMode(text)

    @property
    def letter(self) -> str:
        """Letter used in page urls, e.g. ``team_lookup_tf2h.cfm``."""
        return _GAME_MODE_LETTERS[self]

    @property
    def short(self) -> str:
        return _GAME_MODE_SHORT[self]

    def __str__(self) -> str:
        return self.short


_GAME_MODE_ALIASES: tuple[tuple[str, GameMode], ...] = (
    ("9v9", GameMode.HIGHLANDER),
    ("6v6", GameMode.SIXES),
    ("4v4", GameMode.FOURS),
    ("2v2", GameMode.ULTIDUO),
    ("9vs9", GameMode.HIGHLANDER),
    ("6vs6", GameMode.SIXES),
    ("4vs4", GameMode.FOURS),
    ("2vs2", GameMode.ULTIDUO),
    ("Highlander", GameMode.HIGHLANDER),
    ("Sixes", GameMode.SIXES),
    ("Fours", GameMode.FOURS),
    ("Ultiduo", GameMode.ULTIDUO),
    ("HL", GameMode.HIGHLANDER),
    ("TF2 Highlander", GameMode.HIGHLANDER),
    ("TF2 HL", GameMode.HIGHLANDER),
    ("TF2 9vs9", GameMode.HIGHLANDER),
    ("TF2-H", GameMode.HIGHLANDER),
    ("ASIA TF2-H", GameMode.HIGHLANDER),
    ("TF2 6vs6", GameMode.SIXES),
    ("TF2 6v6", GameMode.SIXES),
    ("TF2-6", GameMode.SIXES),
    ("ASIA TF2-6", GameMode.SIXES),
    ("TF2 4vs4", GameMode.FOURS),
    ("TF2 4v4", GameMode.FOURS),
    ("TF2-4", GameMode.FOURS),
    ("TF2 2vs2", GameMode.ULTIDUO),
    ("TF2 Ultiduo", GameMode.ULTIDUO),
    ("TF2-2", GameMode.ULTIDUO),
)

_GAME_MODE_LETTERS = {
    GameMode.HIGHLANDER: "h",
    GameMode.SIXES: "6",
    GameMode.FOURS: "4",
    GameMode.ULTIDUO: "2",
}

_GAME_MODE_SHORT = {
    GameMode.HIGHLANDER: "9v9",
    GameMode.SIXES: "6v6",
    GameMode.FOURS: "4v4",
    GameMode.ULTIDUO: "2v2",
}


class Region(Enum):
    EUROPE = "europe"
    NORTH_AMERICA = "north-america"
    SOUTH_AMERICA = "south-america"
    ASIA = "asia"
    AUSTRALIA = "australia"

    @classmethod
    def from_str(cls, text: str) -> Region:
        """Parse a region label; wrapping ``*``, ``(`` and ``)`` are ignored."""
        return _lookup(text.strip("*()"), _REGION_ALIASES, InvalidRegion)

    @property
    def short(self) -> str:
        return _REGION_SHORT[self]


_REGION_ALIASES: tuple[tuple[str, Region], ...] = (
    ("Euro", Region.EUROPE),
    ("Europe", Region.EUROPE),
    ("EU", Region.EUROPE),
    ("Asia", Region.ASIA),
    ("ASIA", Region.ASIA),
    ("NA", Region.NORTH_AMERICA),
    ("North America", Region.NORTH_AMERICA),
    ("N.Amer", Region.NORTH_AMERICA),
    ("South American", Region.SOUTH_AMERICA),
    ("SA", Region.SOUTH_AMERICA),
    ("AUS", Region.AUSTRALIA),
    ("AUS/NZ", Region.AUSTRALIA),
)

_REGION_SHORT = {
    Region.EUROPE: "EU",
    Region.NORTH_AMERICA: "NA",
    Region.SOUTH_AMERICA: "SA",
    Region.ASIA: "ASIA",
    Region.AUSTRALIA: "AUS",
}


class Class(Enum):
    SCOUT = "scout"
    SOLDIER = "soldier"
    PYRO = "pyro"
    DEMOMAN = "demoman"
    HEAVY = "heavy"
    ENGINEER = "engineer"
    MEDIC = "medic"
    SNIPER = "sniper"
    SPY = "spy"

    @classmethod
    def from_str(cls, text: str) -> Class:
        return _lookup(text.strip().lower(), _CLASS_ALIASES, InvalidClass)

    @property
    def short(self) -> str:
        return self.value


_CLASS_ALIASES: tuple[tuple[str, Class], ...] = (
    ("scout", Class.SCOUT),
    ("soldier", Class.SOLDIER),
    ("pyro", Class.PYRO),
    ("demoman", Class.DEMOMAN),
    ("demo", Class.DEMOMAN),
    ("heavy", Class.HEAVY),
    ("heavyweapons", Class.HEAVY),
    ("engineer", Class.ENGINEER),
    ("engy", Class.ENGINEER),
    ("medic", Class.MEDIC),
    ("sniper", Class.SNIPER),
    ("spy", Class.SPY),
)


class MembershipRole(Enum):
    LEADER = "leader"
    ADMIN = "admin"
    MEMBER = "member"

    @classmethod
    def from_str(cls, text: str) -> MembershipRole:
        return _lookup(text, _ROLE_ALIASES, InvalidMembershipRole)

    @property
    def short(self) -> str:
        return self.value


_ROLE_ALIASES: tuple[tuple[str, MembershipRole], ...] = (
    ("Leader", MembershipRole.LEADER),
    ("Team Leader", MembershipRole.LEADER),
    ("Captain", MembershipRole.LEADER),
    ("Admin", MembershipRole.ADMIN),
    ("Team Admin", MembershipRole.ADMIN),
    ("Co-Leader", MembershipRole.ADMIN),
    ("Member", MembershipRole.MEMBER),
    ("Team Member", MembershipRole.MEMBER),
    ("Roster Member", MembershipRole.MEMBER),
    ("Player", MembershipRole.MEMBER),
)


class TransactionAction(Enum):
    JOINED = "joined"
    LEFT = "left"

    @classmethod
    def from_str(cls, text: str) -> TransactionAction:
        return _lookup(text, _ACTION_ALIASES, InvalidTransactionAction)

    @property
    def short(self) -> str:
        return self.value


_ACTION_ALIASES: tuple[tuple[str, TransactionAction], ...] = (
    ("Joined", TransactionAction.JOINED),
    ("Joins", TransactionAction.JOINED),
    ("Added", TransactionAction.JOINED),
    ("Left", TransactionAction.LEFT),
    ("Leaves", TransactionAction.LEFT),
    ("Removed", TransactionAction.LEFT),
)


class Side(Enum):
    HOME = "home"
    AWAY = "away"

    @classmethod
    def from_str(cls, text: str) -> Side:
        return _lookup(text, _SIDE_ALIASES, InvalidSide)

    @property
    def short(self) -> str:
        return self.value


_SIDE_ALIASES: tuple[tuple[str, Side], ...] = (
    ("Home", Side.HOME),
    ("home", Side.HOME),
    ("H", Side.HOME),
    ("Away", Side.AWAY),
    ("away", Side.AWAY),
    ("A", Side.AWAY),
)
