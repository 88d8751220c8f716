import enum
import random

from .ruleset import CODE_LENGTH


class Hint(enum.Enum):
    """Feedback marker for a single guessed peg. Absent pegs are None."""

    EXACT = "exact"  # correct color in the correct position
    PRESENT = "present"  # correct color in a wrong position


def grade_guess(answer, guess, rng=None) -> list:
    """
    Compare a guess with the hidden answer and compute Mastermind feedback.

    Args:
        answer (list[str]): The hidden sequence of colors.
        guess (list[str]): The guessed sequence of colors.
        rng (random.Random, optional): Source of randomness for scrambling
        the result. Defaults to the global random module.

    Returns:
        list[Hint | None]: One entry per peg, Hint.EXACT, Hint.PRESENT or
        None, scrambled so the order does not reveal which peg a hint
        belongs to.

    Notes:
        Exact matches are handled first and consume their color from the
        pool, so a color is never counted both as exact and present.
        Colors are removed from the pool by value (first match), which
        limits credit when the answer holds duplicates.
    """

    if len(answer) != CODE_LENGTH or len(guess) != CODE_LENGTH:
        raise ValueError(
            f"Sequences must have {CODE_LENGTH} colors, "
            f"but got {len(answer)} and {len(guess)}."
        )

    colors_left = list(answer)
    grade = [None] * CODE_LENGTH

    # Count colors in the correct position.
    for i, color in enumerate(guess):
        if color == answer[i]:
            colors_left.remove(color)
            grade[i] = Hint.EXACT

    # Count correct colors in the wrong position.
    for i, color in enumerate(guess):
        if grade[i] is None and color in colors_left:
            colors_left.remove(color)
            grade[i] = Hint.PRESENT

    return shuffle_differently(grade, rng=rng)


def shuffle_differently(hints, rng=None) -> list:
    """
    Return the hints in an order different from the given one.

    Args:
        hints (list): The hints to reorder.
        rng (random.Random, optional): Source of randomness.

    Returns:
        list: A new list. Unchanged order when fewer than two distinct
        values are present, since no other order exists.

    Notes:
        Absent slots (None) count as a value, so a single marker among
        empty slots is moved as well. The markers themselves never change.
    """
    hints = list(hints)
    if len(set(hints)) <= 1:
        return hints

    rng = rng or random
    shuffled = list(hints)
    while shuffled == hints:
        rng.shuffle(shuffled)
    return shuffled


def count_markers(hints) -> int:
    """Number of visible markers (exact or present)."""
    return sum(1 for hint in hints if hint is not None)


def guesser_won(hints) -> bool:
    """True if all pegs of the guess are in the correct position."""
    return count_markers(hints) == CODE_LENGTH and all(
        hint is Hint.EXACT for hint in hints
    )
