from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from protocol import (  # type: ignore[import-not-found]  # noqa: E402
    ConfigurationError,
    MoveSet,
    determine_outcome,
    mirror,
)

ODD_COUNTS = [3, 5, 7, 9, 11]


def test_classic_three_moves() -> None:
    moves = MoveSet.from_args(["Rock", "Paper", "Scissors"])
    assert moves.outcome(0, 2) == "win"
    assert moves.outcome(0, 1) == "lose"
    assert moves.outcome(1, 0) == "win"
    assert moves.outcome(2, 1) == "win"
    assert moves.outcome(2, 0) == "lose"
    assert moves.outcome(1, 1) == "draw"


@pytest.mark.parametrize("n", ODD_COUNTS)
def test_outcomes_are_mirrored(n: int) -> None:
    for a in range(n):
        assert determine_outcome(a, a, n) == "draw"
        for b in range(n):
            assert determine_outcome(b, a, n) == mirror(determine_outcome(a, b, n))


@pytest.mark.parametrize("n", ODD_COUNTS)
def test_every_move_is_balanced(n: int) -> None:
    for a in range(n):
        results = [determine_outcome(a, b, n) for b in range(n)]
        assert results.count("win") == (n - 1) // 2
        assert results.count("lose") == (n - 1) // 2
        assert results.count("draw") == 1


def test_move_beats_the_half_before_it() -> None:
    # With 5 moves, move 3 beats 2 and 1, loses to 4 and 0.
    assert [determine_outcome(3, b, 5) for b in range(5)] == ["lose", "win", "win", "draw", "lose"]


def test_mirror() -> None:
    assert mirror("win") == "lose"
    assert mirror("lose") == "win"
    assert mirror("draw") == "draw"


def test_too_few_moves() -> None:
    with pytest.raises(ConfigurationError, match="at least 3"):
        MoveSet.from_args(["Rock", "Paper"])
    with pytest.raises(ConfigurationError, match="at least 3"):
        MoveSet.from_args([])


def test_even_move_count() -> None:
    with pytest.raises(ConfigurationError, match="odd number"):
        MoveSet.from_args(["A", "B", "C", "D"])


def test_duplicate_moves() -> None:
    with pytest.raises(ConfigurationError, match="unique") as info:
        MoveSet.from_args(["A", "B", "A"])
    assert "Repeated: A" in str(info.value)


def test_duplicates_are_case_sensitive() -> None:
    moves = MoveSet.from_args(["rock", "Rock", "ROCK"])
    assert list(moves) == ["rock", "Rock", "ROCK"]


def test_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        MoveSet.from_args(["A"])


def test_move_set_sequence_access() -> None:
    moves = MoveSet.from_args(iter(["a", "b", "c", "d", "e"]))
    assert len(moves) == 5
    assert moves[4] == "e"
    assert moves.names == ("a", "b", "c", "d", "e")
