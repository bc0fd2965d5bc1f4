from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

from tiny_towns.core.engine.board import Board, empty_board, legend
from tiny_towns.core.engine.config import RulesConfig
from tiny_towns.core.engine.patterns import pattern
from tiny_towns.core.engine.rules import Match, buildable, find_matches
from tiny_towns.core.engine.types import Building, Resource

HELP_TEXT = """
Commands:
  help                         Show this help text
  board                        Show the board
  legend                       Show coordinates and cell indices
  patterns                     Show every building pattern
  place <resource> <x> <y>     Place a resource cube (brick, glass, stone, wheat, wood)
  put <building> <x> <y>       Mark a cell with a building, ignoring its pattern
  check <building> <x> <y>     Check whether a building's pattern covers x,y
  build <building> <x> <y>     Build on x,y, clearing the matched cubes
  matches [building]           List pattern matches on the board
  reset                        Clear the board
  quit                         Exit
""".strip()


def _parse_coord(parts: List[str]) -> Tuple[int, int]:
    if len(parts) < 2:
        raise ValueError("expected <x> <y>")
    return int(parts[0]), int(parts[1])


def _parse_building(name: str) -> Building:
    return Building(name.lower())


def _describe_match(match: Match) -> str:
    cells = " ".join(f"{x},{y}" for x, y in match.cells())
    return f"{match.building.value} at origin {match.origin[0]},{match.origin[1]} | cells {cells}"


def _print_patterns() -> None:
    for building in Building:
        print(f"{building.value}:")
        print(pattern(building).pretty())


def _print_matches(board: Board, building: Optional[Building]) -> None:
    if building is not None:
        found = {building: find_matches(board, building)}
    else:
        found = buildable(board)
    total = sum(len(matches) for matches in found.values())
    print(f"Matches: {total}")
    for matches in found.values():
        for match in matches:
            print(f"- {_describe_match(match)}")


def run_command(board: Board, raw: str) -> Optional[Board]:
    """Apply one command line; returns the board to continue with, or None to exit."""
    parts = raw.split()
    if not parts:
        return board
    cmd = parts[0].lower()
    args = parts[1:]

    if cmd == "help":
        print(HELP_TEXT)
    elif cmd == "board":
        print(board.pretty())
    elif cmd == "legend":
        print(legend())
    elif cmd == "patterns":
        _print_patterns()
    elif cmd == "place":
        resource = Resource(args[0].lower())
        x, y = _parse_coord(args[1:])
        board.place_piece(x, y, resource)
    elif cmd == "put":
        building = _parse_building(args[0])
        x, y = _parse_coord(args[1:])
        board.place_building(x, y, building)
    elif cmd == "check":
        building = _parse_building(args[0])
        x, y = _parse_coord(args[1:])
        match = board.check_building(x, y, building)
        if match is None:
            print(f"No {building.value} pattern covers {x},{y}")
        else:
            print(f"Match: {_describe_match(match)}")
    elif cmd == "build":
        building = _parse_building(args[0])
        x, y = _parse_coord(args[1:])
        match = board.construct_building(x, y, building)
        print(f"Built {_describe_match(match)}")
    elif cmd == "matches":
        _print_matches(board, _parse_building(args[0]) if args else None)
    elif cmd == "reset":
        return empty_board(board.config)
    elif cmd == "quit":
        return None
    else:
        print("Unknown command. Type 'help'.")
    return board


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Tiny Towns board CLI")
    parser.add_argument("--no-rotations", action="store_true", help="Only match patterns as printed")
    parser.add_argument("--no-mirrors", action="store_true", help="Do not match mirrored patterns")
    args = parser.parse_args(argv)

    config = RulesConfig(
        allow_rotations=not args.no_rotations,
        allow_mirrors=not args.no_mirrors,
    )
    board: Optional[Board] = empty_board(config)
    print("Tiny Towns CLI - type 'help' for commands")

    while board is not None:
        try:
            raw = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting")
            return 0
        try:
            board = run_command(board, raw)
        except (ValueError, IndexError) as exc:
            print(f"Error: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
