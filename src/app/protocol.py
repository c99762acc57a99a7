from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, Literal

Outcome = Literal["win", "lose", "draw"]

MIN_MOVES = 3


class ConfigurationError(ValueError):
    """The move list given at startup cannot be played."""


class InputError(ValueError):
    """A line typed at the menu is not a recognized choice."""


def determine_outcome(player: int, computer: int, move_count: int) -> Outcome:
    # Each move beats the `half` moves before it on the circle and loses to the `half` after it.
    half = move_count // 2
    diff = (player - computer + half + move_count) % move_count - half
    if diff == 0:
        return "draw"
    return "win" if diff > 0 else "lose"


def mirror(outcome: Outcome) -> Outcome:
    if outcome == "win":
        return "lose"
    if outcome == "lose":
        return "win"
    return "draw"


@dataclass(frozen=True)
class MoveSet:
    names: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.names) < MIN_MOVES:
            raise ConfigurationError(f"Please enter at least {MIN_MOVES} arguments!")
        if len(self.names) % 2 != 1:
            raise ConfigurationError("Please enter an odd number of arguments!")
        duplicates = sorted(name for name, count in Counter(self.names).items() if count > 1)
        if duplicates:
            raise ConfigurationError("Please enter unique arguments! Repeated: " + ", ".join(duplicates))

    @classmethod
    def from_args(cls, args: Iterable[str]) -> "MoveSet":
        return cls(names=tuple(args))

    def __len__(self) -> int:
        return len(self.names)

    def __getitem__(self, index: int) -> str:
        return self.names[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def outcome(self, player: int, computer: int) -> Outcome:
        return determine_outcome(player, computer, len(self.names))
