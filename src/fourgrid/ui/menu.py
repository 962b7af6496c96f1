from __future__ import annotations

from fourgrid.config import DEFAULT_DEPTH, MAX_DEPTH, MIN_DEPTH
from fourgrid.game.controller import Game, run_game
from fourgrid.ui.prompts import parse_depth


def _ask_depth() -> int:
    while True:
        raw = input(f"Search depth {MIN_DEPTH}-{MAX_DEPTH} [{DEFAULT_DEPTH}]: ")
        try:
            return parse_depth(raw)
        except ValueError as e:
            print(e)


def run_menu() -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs Computer")
    print("3) Run depth benchmark")

    choice = input("Choice: ").strip()

    if choice == "1":
        print("\nStarting game: Human (X) vs Human (O)\n")
        run_game(Game(vs_engine=False))
        return

    if choice == "2":
        depth = _ask_depth()
        print(f"\nStarting game: Human (X) vs Computer (O, depth {depth})\n")
        run_game(Game(vs_engine=True, depth=depth))
        return

    if choice == "3":
        from fourgrid.scripts.bench import main as bench_main

        bench_main([])
        return

    print("\nInvalid choice. Defaulting to Human vs Human.\n")
    run_game(Game(vs_engine=False))
