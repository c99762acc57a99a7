from __future__ import annotations

import argparse
import logging

from commit_reveal import verify_commitment
from game import GameSession
from protocol import ConfigurationError, MoveSet

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rps",
        description="Rock-paper-scissors over any odd number of moves, with an HMAC proving the computer's move was fixed first.",
    )
    parser.add_argument("moves", nargs="*", help="Move names in dominance order (odd count, at least 3, all distinct)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    try:
        moves = MoveSet.from_args(args.moves)
    except ConfigurationError as exc:
        logger.debug("rejected move list %r", args.moves)
        print(f"Error. {exc}")
        return 1

    return GameSession(moves).run()


def verify_main(argv: list[str] | None = None) -> int:
    """Check a finished game: does the revealed key reproduce the published HMAC?"""
    parser = argparse.ArgumentParser(prog="rps-verify")
    parser.add_argument("--key", required=True, help="The 'HMAC key' printed at the end of the game")
    parser.add_argument("--move", required=True, help="The computer's move as printed at the end of the game")
    parser.add_argument("--hmac", required=True, help="The 'HMAC' printed at the start of the game")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    if verify_commitment(expected_commitment=args.hmac, key=args.key, move=args.move):
        print("OK")
        return 0
    print("MISMATCH")
    return 1


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    raise SystemExit(main())
