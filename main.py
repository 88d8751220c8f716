from __future__ import annotations

import argparse
import random

from colorama import just_fix_windows_console

from game.mastermind import Mastermind
from game.ruleset import DEFAULT_RULES, DIFFICULTIES, ConfigurationError
from players.guesser import ComputerGuesser, HumanGuesser
from players.maker import ComputerMaker, HumanMaker
from ui.renderer import BoardRenderer

GUESSERS = {"human": HumanGuesser, "computer": ComputerGuesser}
MAKERS = {"human": HumanMaker, "computer": ComputerMaker}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Mastermind in the terminal.")
    ap.add_argument("--guesser", choices=GUESSERS, default="human",
                    help="Who cracks the code.")
    ap.add_argument("--maker", choices=MAKERS, default="computer",
                    help="Who hides the code.")
    ap.add_argument("--difficulty", default=DEFAULT_RULES["name"],
                    help=f"One of: {', '.join(DIFFICULTIES)}.")
    ap.add_argument("--turns", type=int, default=DEFAULT_RULES["max_turns"],
                    help="Guesses per round.")
    ap.add_argument("--rounds", type=int, default=DEFAULT_RULES["rounds"],
                    help="Rounds per game, must be even.")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for reproducible games.")
    ap.add_argument("--plain", action="store_true",
                    help="Draw the board with emoji instead of ANSI colors.")
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.seed is not None:
        random.seed(args.seed)

    just_fix_windows_console()

    try:
        game = Mastermind(
            GUESSERS[args.guesser](),
            MAKERS[args.maker](),
            args.difficulty,
            args.turns,
            args.rounds,
            renderer=BoardRenderer(plain=args.plain),
        )
    except ConfigurationError as e:
        ap.error(str(e))

    print("=== Mastermind ===")
    points = game.play_game()

    for result in game.results:
        outcome = "cracked" if result.won else "not cracked"
        print(
            f"Round {result.round}: code {outcome} after {result.turns} turns, "
            f"maker scored {result.points} points."
        )
    print(f"Maker scored {points} points.")


if __name__ == "__main__":
    main()
