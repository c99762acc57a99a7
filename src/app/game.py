from __future__ import annotations

import enum
import logging
import secrets
import sys
from dataclasses import asdict, dataclass
from typing import Any, Callable, Literal

from commit_reveal import Commitment, generate_key
from outcome_table import build_grid, format_table
from protocol import InputError, MoveSet, Outcome

logger = logging.getLogger(__name__)

BANNER_START = "=" * 20 + "Start" + "=" * 20
BANNER_FINISH = "=" * 20 + "Finish" + "=" * 20

EXIT_INPUT = "0"
HELP_INPUT = "?"

RESULT_TEXT: dict[Outcome, str] = {
    "win": "You Win!",
    "lose": "Computer Wins!",
    "draw": "Draw!",
}

Choice = tuple[Literal["exit", "help", "move"], int | None]


class SessionState(enum.Enum):
    INIT = "init"
    AWAITING_MOVE = "awaiting_move"
    RESOLVED = "resolved"
    EXITED = "exited"


@dataclass(frozen=True)
class RoundResult:
    player_index: int
    player_move: str
    computer_index: int
    computer_move: str
    outcome: Outcome
    key: str
    digest: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def parse_choice(text: str, move_count: int) -> Choice:
    """Map one menu line to a choice; menu numbers are 1-based."""
    value = text.strip()
    if value == EXIT_INPUT:
        return ("exit", None)
    if value == HELP_INPUT:
        return ("help", None)
    if not (value.isascii() and value.isdigit()):
        raise InputError(f"unrecognized input {value!r}")
    # Longer than the biggest menu number can never match; keeps int() off huge strings.
    digits = value.lstrip("0")
    if len(digits) > len(str(move_count)):
        raise InputError(f"no move numbered {digits[:20]}...")
    number = int(digits or "0")
    if not 1 <= number <= move_count:
        raise InputError(f"no move numbered {number}")
    return ("move", number - 1)


def _print_error(*parts: object) -> None:
    print(*parts, file=sys.stderr)


class GameSession:
    """One round against the computer.

    The computer's move and its commitment are fixed when the session is
    built; only the digest is shown until the player has picked a move.
    """

    def __init__(
        self,
        moves: MoveSet,
        *,
        input_fn: Callable[[str], str] = input,
        output: Callable[..., None] = print,
        error: Callable[..., None] = _print_error,
        choose_index: Callable[[int], int] = secrets.randbelow,
        key_factory: Callable[[], str] = generate_key,
    ) -> None:
        self.moves = moves
        self._input = input_fn
        self._output = output
        self._error = error
        self.computer_index = choose_index(len(moves))
        if not 0 <= self.computer_index < len(moves):
            raise ValueError(f"computer move index {self.computer_index} out of range")
        self.commitment = Commitment.create(moves[self.computer_index], key_factory=key_factory)
        self.table = format_table(build_grid(moves))
        self.state = SessionState.INIT
        logger.debug("session created with %d moves", len(moves))

    @property
    def computer_move(self) -> str:
        return self.moves[self.computer_index]

    def start(self) -> None:
        self._require(SessionState.INIT)
        self._output(BANNER_START)
        self._output(f"HMAC: {self.commitment.digest}")
        self._set_state(SessionState.AWAITING_MOVE)

    def prompt(self) -> int | None:
        """Ask until the player picks a move (its index) or exits (None)."""
        self._require(SessionState.AWAITING_MOVE)
        while True:
            self._print_menu()
            try:
                line = self._input("Enter your move: ")
            except EOFError:
                line = EXIT_INPUT

            try:
                kind, index = parse_choice(line, len(self.moves))
            except InputError as exc:
                logger.debug("rejected input: %s", exc)
                self._error("Error. Please choose from available moves!")
                continue

            if kind == "help":
                self._output(self.table)
                continue
            if kind == "exit":
                self._output(BANNER_FINISH)
                self._set_state(SessionState.EXITED)
                return None
            return index

    def resolve(self, player_index: int) -> RoundResult:
        self._require(SessionState.AWAITING_MOVE)
        outcome = self.moves.outcome(player_index, self.computer_index)
        result = RoundResult(
            player_index=player_index,
            player_move=self.moves[player_index],
            computer_index=self.computer_index,
            computer_move=self.computer_move,
            outcome=outcome,
            key=self.commitment.key,
            digest=self.commitment.digest,
        )
        self._set_state(SessionState.RESOLVED)

        self._output(f"Your move: {result.player_move}")
        self._output(f"Computer's move: {result.computer_move}")
        self._output(f"Result: {RESULT_TEXT[outcome]}")
        self._output(f"HMAC key: {result.key}")
        self._output(BANNER_FINISH)
        logger.debug("round resolved: %s", result.to_dict())
        return result

    def run(self) -> int:
        self.start()
        index = self.prompt()
        if index is None:
            return 1
        self.resolve(index)
        return 0

    def _print_menu(self) -> None:
        self._output("Available moves:")
        for number, name in enumerate(self.moves, 1):
            self._output(f"{number} - {name}")
        self._output(f"{EXIT_INPUT} - exit")
        self._output(f"{HELP_INPUT} - help")

    def _require(self, state: SessionState) -> None:
        if self.state is not state:
            raise RuntimeError(f"session is {self.state.value}, expected {state.value}")

    def _set_state(self, state: SessionState) -> None:
        logger.debug("session %s -> %s", self.state.value, state.value)
        self.state = state
