import argparse
import json
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt


def _annotate_points(ax, xs, ys, *, fmt="{:.2f}", dx=0, dy=6, fontsize=8):
    """
    Annotate points (x, y) on ax with formatted y values.

    Args:
        ax: matplotlib Axes
        xs: list of x coordinates
        ys: list of y coordinates
        fmt: format string for y values
        dx: x offset in points
        dy: y offset in points
        fontsize: font size for annotations
    """

    for x, y in zip(xs, ys):
        if y is None or np.isnan(y):
            continue
        ax.annotate(
            fmt.format(y),
            (x, y),
            textcoords="offset points",
            xytext=(dx, dy),
            ha="center",
            va="center",
            fontsize=fontsize,
        )


def compute_run_stats(records: dict):
    """
    Returns:
      turn_counts (dict[int, int]) number of won rounds per winning turn
      avg_turns (float, np.nan if no won rounds)
      min_turns (float, np.nan if no won rounds)
      max_turns (float, np.nan if no won rounds)
      avg_points_per_game (list[float]) running average of the maker score
      n_won (int)
      n_rounds (int)
    """
    won = np.array(records.get("won", []), dtype=bool)
    turns = np.array(records.get("turns", []), dtype=np.int32)

    # Guard against length mismatches
    n = min(len(won), len(turns))
    won = won[:n]
    turns = turns[:n]

    won_turns = turns[won]
    n_won = int(won_turns.size)
    avg_turns = float(np.mean(won_turns)) if n_won > 0 else np.nan
    min_turns = float(np.min(won_turns)) if n_won > 0 else np.nan
    max_turns = float(np.max(won_turns)) if n_won > 0 else np.nan

    values, counts = np.unique(won_turns, return_counts=True)
    turn_counts = {int(v): int(c) for v, c in zip(values, counts)}

    # running average of maker points per game
    maker_points = np.array(records.get("maker_points", []), dtype=np.float32)
    if maker_points.size > 0:
        running = np.cumsum(maker_points) / np.arange(1, maker_points.size + 1)
        avg_points_per_game = [float(v) for v in running]
    else:
        avg_points_per_game = []

    return (
        turn_counts,
        avg_turns,
        min_turns,
        max_turns,
        avg_points_per_game,
        n_won,
        n,
    )


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--file", default="simulation.json", help="Path to records JSON written by simulate.py")
    ap.add_argument("--outdir", default="./results", help="Output directory for PNGs")
    args = ap.parse_args(argv)

    path = Path(args.file)
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    with path.open("r", encoding="utf-8") as f:
        records = json.load(f)

    if not records.get("turns"):
        raise ValueError(f"No rounds found in {path}.")

    (turn_counts,
    avg_turns,
    min_turns,
    max_turns,
    avg_points_per_game,
    n_won,
    n_rounds,
    ) = compute_run_stats(records)
    turns_limit = records.get("turns_limit", max(records["turns"]))

    # Plot configuration:
    plt.rcParams["lines.solid_capstyle"] = "round"
    plt.rcParams["lines.solid_joinstyle"] = "round"
    plt.rcParams["lines.linewidth"] = 1.0

    # Plot 1: Won rounds per winning turn
    plt.figure(figsize=(10, 6))
    x = np.arange(1, turns_limit + 1)
    y = [turn_counts.get(int(t), 0) for t in x]
    plt.bar(x, y, label="Won rounds")
    if n_won > 0:
        plt.axvline(avg_turns, color="black", linestyle="--", label=f"Average: {avg_turns:.2f} turns")
    # Titles and labels
    plt.title(f"Turns needed to crack the code\n Rounds won: {n_won} of {n_rounds} "
              f"(min {min_turns:.0f}, max {max_turns:.0f})")
    plt.xlabel("Turn Number")
    plt.ylabel("Won Rounds")
    plt.xticks(x)
    plt.grid(True, axis="y")
    plt.legend()
    # Save plot
    out1 = outdir / "turns_per_round.png"
    plt.savefig(out1, dpi=200, bbox_inches="tight")
    plt.close()

    # Plot 2: Running average of the maker score
    if avg_points_per_game:
        plt.figure(figsize=(10, 6))
        games = np.arange(1, len(avg_points_per_game) + 1)
        plt.plot(games, avg_points_per_game, marker="o", markersize=3, label="Average Maker Score")
        _annotate_points(plt.gca(), games[-1:], avg_points_per_game[-1:], fmt="{:.2f}", dy=8)
        # Titles and labels
        plt.title(f"Average Maker Score over {len(games)} games")
        plt.xlabel("Game")
        plt.ylabel("Average Maker Score")
        plt.grid(True)
        plt.legend()
        out2 = outdir / "maker_score.png"
        plt.savefig(out2, dpi=200, bbox_inches="tight")
        plt.close()


if __name__ == "__main__":
    main()
