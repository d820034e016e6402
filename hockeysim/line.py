"""Line-up assignments: forward lines, defence pairs and goalies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

_FORWARD_LINES = 4
_DEFENSE_PAIRS = 3


def _as_tuple(values: Sequence[int], size: int, what: str) -> tuple[int, ...]:
    result = tuple(values)
    if len(result) != size:
        raise ValueError(f"{what} must hold {size} entries, got {len(result)}")
    return result


@dataclass
class Loadout:
    """Roster indices for each line slot; -1 marks an empty slot."""

    forward_lines: list[tuple[int, int, int]]
    defense_pairs: list[tuple[int, int]]
    goalies: tuple[int, int]
    starter_share: int

    def __post_init__(self) -> None:
        if len(self.forward_lines) != _FORWARD_LINES:
            raise ValueError(f"a loadout needs {_FORWARD_LINES} forward lines")
        if len(self.defense_pairs) != _DEFENSE_PAIRS:
            raise ValueError(f"a loadout needs {_DEFENSE_PAIRS} defence pairs")
        self.forward_lines = [_as_tuple(line, 3, "forward line") for line in self.forward_lines]
        self.defense_pairs = [_as_tuple(pair, 2, "defence pair") for pair in self.defense_pairs]
        self.goalies = _as_tuple(self.goalies, 2, "goalies")

    @classmethod
    def none(cls) -> Loadout:
        """An empty loadout."""
        return cls([(0, 0, 0)] * _FORWARD_LINES, [(0, 0)] * _DEFENSE_PAIRS, (0, 0), 1)

    def set_forward_line(self, index: int, line: Sequence[int]) -> None:
        """Replace a forward line; an index out of range is ignored."""
        new_line = _as_tuple(line, 3, "forward line")
        if 0 <= index < len(self.forward_lines):
            self.forward_lines[index] = new_line

    def set_defense_pair(self, index: int, pair: Sequence[int]) -> None:
        """Replace a defence pair; an index out of range is ignored."""
        new_pair = _as_tuple(pair, 2, "defence pair")
        if 0 <= index < len(self.defense_pairs):
            self.defense_pairs[index] = new_pair