from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from catan_lite.engine.board import pip_count
from catan_lite.engine.errors import CatanError
from catan_lite.session import GameSession, SessionSpec

HELP_TEXT = """
Commands:
  help                         Show this help text
  state                        Show current game state summary
  tiles                        List tiles (id, resource, number, pips)
  board                        Show the board row by row
  neighbors <tile_id>          List tiles adjacent to a tile
  roll                         Roll the dice
  build <road|settlement|city> Build for the current player
  events [n]                   Show the last n events (default 10)
  end                          End turn
  quit                         Exit
""".strip()


def _print_state(session: GameSession) -> None:
    state = session.engine.state
    print(state.status_line())
    if state.last_roll is not None:
        print(f"Last roll: {state.last_roll}")
    for pid, player in enumerate(state.players):
        marker = "*" if pid == state.current_player else " "
        crown = " (winner)" if state.winner == pid else ""
        print(
            f"{marker} {player.name}{crown} | VP {player.score} | "
            f"Roads {player.buildings.roads} | Settlements {player.buildings.settlements} | "
            f"Cities {player.buildings.cities} | Resources: {player.hand_str()}"
        )


def _print_tiles(session: GameSession) -> None:
    for tile in session.board.tiles:
        number = "-" if tile.number_token is None else tile.number_token
        dots = "." * pip_count(tile.number_token)
        print(f"Tile {tile.tile_id:2} | {tile.resource.value:6} | {number:>2} {dots}")


def _print_board(session: GameSession) -> None:
    rows = session.board.graph.rows()
    width = max(len(row) for row in rows)
    for row in rows:
        cells = []
        for tile_id in row:
            tile = session.board[tile_id]
            number = "--" if tile.number_token is None else f"{tile.number_token:2}"
            cells.append(f"{tile.resource.value[:2].upper()}{number}")
        print("   " * (width - len(row)) + "  ".join(cells))
    if session.board.degraded:
        print("Warning: number layout is degraded (6/8 tiles may touch)")


def _print_events(session: GameSession, count: int) -> None:
    events = list(session.events)[-count:]
    for event in events:
        print(f"[{event.kind.value}] {event.text}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a simplified Catan economy in the terminal")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--players", nargs="*", default=[], help="Player names (default: sample table)")
    parser.add_argument("--strict", action="store_true", help="Refuse degraded board layouts")
    parser.add_argument("--environment", default="development", choices=["development", "production"])
    parser.add_argument("--log-events", action="store_true", help="Mirror game events to structlog")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    spec = SessionSpec(
        player_names=tuple(args.players),
        seed=args.seed,
        strict_layout=args.strict,
        environment=args.environment,
    )
    session = GameSession(spec, log_events=args.log_events)
    try:
        session.reset()
    except CatanError as exc:
        print(f"Error: {exc}")
        return 1
    print("Catan CLI - type 'help' for commands")
    seen = len(session.events)

    while True:
        state = session.engine.state
        prompt = f"{state.current.name}:{state.phase.value}> "
        try:
            raw = input(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting")
            return 0
        if not raw:
            continue
        parts = raw.split()
        cmd = parts[0].lower()

        try:
            if cmd == "help":
                print(HELP_TEXT)
            elif cmd == "state":
                _print_state(session)
            elif cmd == "tiles":
                _print_tiles(session)
            elif cmd == "board":
                _print_board(session)
            elif cmd == "neighbors":
                print(sorted(session.board.graph.neighbors(int(parts[1]))))
            elif cmd == "roll":
                session.roll()
            elif cmd == "build":
                session.build(parts[1].lower())
            elif cmd == "events":
                _print_events(session, int(parts[1]) if len(parts) > 1 else 10)
            elif cmd in {"end", "pass"}:
                session.end_turn()
            elif cmd == "quit":
                return 0
            else:
                print("Unknown command. Type 'help'.")
        except (CatanError, ValueError, IndexError) as exc:
            print(f"Error: {exc}")

        new_events = list(session.events)[seen:]
        for event in new_events:
            print(f"  {event.text}")
        seen = len(session.events)


if __name__ == "__main__":
    sys.exit(main())
