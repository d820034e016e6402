"""Draft status of a player."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DraftData:
    """Where and when a player was drafted."""

    draft_year: int
    draft_round: int
    overall_pick: int
    team: str


@dataclass(frozen=True)
class DraftStatus:
    """Either undrafted, or drafted with the details of the pick."""

    draft_data: DraftData | None = None

    @classmethod
    def undrafted(cls) -> DraftStatus:
        return cls(None)

    @classmethod
    def drafted(cls, draft_data: DraftData) -> DraftStatus:
        return cls(draft_data)

    def is_drafted(self) -> bool:
        return self.draft_data is not None