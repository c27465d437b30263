"""Command-line front end for board analysis.

Usage:
    territory analyze <fen> [--no-pins]
    territory moves <fen> <square> [--legal]
    territory check <fen> <move>

Prints JSON on stdout. Invalid input exits with status 2.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from territory.analysis import analyze
from territory.config import Settings
from territory.errors import TerritoryError
from territory.fen import position_from_fen
from territory.geometry import parse_square
from territory.legality import check_move, legal_moves
from territory.model import Move
from territory.moves import pseudo_legal_moves
from territory.report import serialize_analysis, serialize_moves, serialize_verdict

logger = logging.getLogger(__name__)


def _run(args: argparse.Namespace, settings: Settings):
    position = position_from_fen(args.fen)

    if args.command == "analyze":
        include_pins = settings.include_pins and not args.no_pins
        return serialize_analysis(analyze(position.board), include_pins=include_pins)

    if args.command == "moves":
        square = parse_square(args.square)
        if args.legal:
            moves = legal_moves(position, square)
        else:
            moves = pseudo_legal_moves(square, position.board)
        return {"square": args.square, "moves": serialize_moves(moves)}

    verdict = check_move(position, Move.parse(args.move))
    return serialize_verdict(verdict)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="territory",
        description="Square control, pins and move legality for a chess position",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_analyze = sub.add_parser("analyze", help="Territory, attacked pieces and pins")
    p_analyze.add_argument("fen", help="Position FEN (quote the full string)")
    p_analyze.add_argument("--no-pins", action="store_true", help="Omit pins from the output")

    p_moves = sub.add_parser("moves", help="Moves for the piece on a square")
    p_moves.add_argument("fen", help="Position FEN (quote the full string)")
    p_moves.add_argument("square", help="Square of the piece, e.g. e2")
    p_moves.add_argument(
        "--legal", action="store_true",
        help="Drop moves that leave the mover's king attacked",
    )

    p_check = sub.add_parser("check", help="Legality verdict for one move")
    p_check.add_argument("fen", help="Position FEN (quote the full string)")
    p_check.add_argument("move", help="Move in coordinate notation, e.g. e2e4 or e7e8q")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"error: invalid settings: {e}", file=sys.stderr)
        sys.exit(2)
    logging.basicConfig(level=settings.log_level)

    try:
        result = _run(args, settings)
    except TerritoryError as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    json.dump(result, sys.stdout, indent=settings.json_indent)
    print()


if __name__ == "__main__":
    main()
