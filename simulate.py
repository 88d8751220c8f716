from __future__ import annotations

import argparse
import json
import random
from pathlib import Path

from game.mastermind import Mastermind
from game.ruleset import DEFAULT_RULES, ConfigurationError
from players.guesser import ComputerGuesser
from players.maker import ComputerMaker


# drop-in helper for progress and log line
def progress_print(msg: str) -> None:
    # overwrite same line, no newline
    print(f"\r\033[K{msg}", end="", flush=True)


def log_print(msg: str) -> None:
    # first terminate the progress line, then print normally
    print("\r\033[K", end="", flush=True)
    print(msg, flush=True)


def run_games(games: int, turns: int, rounds: int, seed=None) -> dict:
    """
    Play computer against computer and record every round.

    Args:
        games (int): Number of game sessions.
        turns (int): Turn limit per round.
        rounds (int): Rounds per session.
        seed (int, optional): Seed for reproducible runs.
    Returns:
        dict: Column lists "game", "round", "turns", "won", "points",
        "time_s" (one entry per round) and "maker_points" (one per game).
    """
    rng = random.Random(seed)
    records = {
        "turns_limit": turns,
        "game": [],
        "round": [],
        "turns": [],
        "won": [],
        "points": [],
        "time_s": [],
        "maker_points": [],
    }

    for game_idx in range(1, games + 1):
        progress_print(f"Game {game_idx}/{games}")
        game = Mastermind(
            ComputerGuesser(rng=rng),
            ComputerMaker(rng=rng),
            turns=turns,
            rounds=rounds,
            rng=rng,
        )

        game.play_game()
        for result in game.results:
            records["game"].append(game_idx)
            records["round"].append(result.round)
            records["turns"].append(result.turns)
            records["won"].append(result.won)
            records["points"].append(result.points)
            records["time_s"].append(result.time_s)

        records["maker_points"].append(game.maker.points)

    log_print(f"Played {games} games.")
    return records


def print_statistics(records: dict) -> None:
    turns = records["turns"]
    won = [t for t, w in zip(turns, records["won"]) if w]
    times = records["time_s"]
    n = len(turns)

    print(f"\nRounds won: {len(won)} of {n}.")
    if won:
        print(f"Average turns over {len(won)} won rounds: {sum(won) / len(won):.2f} turns.")
        print(f"Max turns over {len(won)} won rounds: {max(won)} turns.")
        print(f"Min turns over {len(won)} won rounds: {min(won)} turns.")
    if times:
        print(f"Average time over {n} rounds: {sum(times) / n * 1000:.3f} ms.")
    maker_points = records["maker_points"]
    if maker_points:
        avg_points = sum(maker_points) / len(maker_points)
        print(f"Average maker score over {len(maker_points)} games: {avg_points:.2f} points.")


def main(argv=None):
    ap = argparse.ArgumentParser(description="Benchmark the computer guesser.")
    ap.add_argument("--games", type=int, default=100, help="Number of games to play")
    ap.add_argument("--turns", type=int, default=DEFAULT_RULES["max_turns"])
    ap.add_argument("--rounds", type=int, default=DEFAULT_RULES["rounds"])
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--out", default=None, help="Write the records to this JSON file")
    args = ap.parse_args(argv)

    try:
        records = run_games(args.games, args.turns, args.rounds, seed=args.seed)
    except ConfigurationError as e:
        ap.error(str(e))
    print_statistics(records)

    if args.out:
        path = Path(args.out)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2)
        print(f"Records written to {path}.")
    return records


if __name__ == "__main__":
    main()
