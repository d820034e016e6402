"""Conference and division identities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Conference:
    """A built-in or custom conference."""

    name: str
    is_custom: bool = False

    @classmethod
    def east(cls) -> Conference:
        return cls("East")

    @classmethod
    def west(cls) -> Conference:
        return cls("West")

    @classmethod
    def custom(cls, name: str) -> Conference:
        return cls(str(name), is_custom=True)


@dataclass(frozen=True)
class Division:
    """A built-in or custom division; built-in ones hold eight teams."""

    name: str
    team_count: int | None = None
    is_custom: bool = False

    @classmethod
    def atlantic(cls) -> Division:
        return cls("Atlantic", 8)

    @classmethod
    def pacific(cls) -> Division:
        return cls("Pacific", 8)

    @classmethod
    def custom(cls, name: str, team_count: int | None) -> Division:
        return cls(str(name), team_count, is_custom=True)