import random
from collections import Counter

import pytest

from game.grading import Hint, count_markers, grade_guess, guesser_won, shuffle_differently

EXACT = Hint.EXACT
PRESENT = Hint.PRESENT


def unscrambled(monkeypatch):
    monkeypatch.setattr("game.grading.shuffle_differently", lambda hints, rng=None: list(hints))


def test_grade_returns_four_slots_with_expected_markers():
    answer = ["red", "green", "yellow", "magenta"]
    guess = ["blue", "blue", "red", "magenta"]

    actual = grade_guess(answer, guess)

    assert len(actual) == 4
    assert Counter(actual) == Counter([None, None, PRESENT, EXACT])


def test_grade_does_not_depict_positions():
    answer = ["red", "green", "yellow", "magenta"]
    guess = ["blue", "blue", "red", "magenta"]

    for _ in range(20):
        assert grade_guess(answer, guess) != [None, None, PRESENT, EXACT]


@pytest.mark.parametrize(
    "answer, guess, expected",
    [
        (
            ["red", "red", "blue", "blue"],
            ["red", "red", "red", "blue"],
            [EXACT, EXACT, None, EXACT],
        ),
        (
            ["red", "red", "blue", "blue"],
            ["blue", "red", "red", "red"],
            [PRESENT, EXACT, PRESENT, None],
        ),
        (
            ["red", "red", "red", "blue"],
            ["blue", "blue", "red", "red"],
            [PRESENT, None, EXACT, PRESENT],
        ),
        (
            ["yellow", "yellow", "magenta", "magenta"],
            ["magenta", "magenta", "yellow", "magenta"],
            [PRESENT, None, PRESENT, EXACT],
        ),
        (
            ["yellow", "yellow", "magenta", "magenta"],
            ["magenta", "yellow", "magenta", "magenta"],
            [None, EXACT, EXACT, EXACT],
        ),
        (
            ["yellow", "yellow", "magenta", "magenta"],
            ["magenta", "magenta", "yellow", "yellow"],
            [PRESENT] * 4,
        ),
    ],
)
def test_duplicate_colors(monkeypatch, answer, guess, expected):
    unscrambled(monkeypatch)
    assert grade_guess(answer, guess) == expected


def test_identical_guess_wins():
    answer = ["cyan", "blue", "cyan", "red"]
    hints = grade_guess(answer, list(answer))

    assert hints == [EXACT] * 4
    assert guesser_won(hints)


def test_grading_follows_original_positions():
    rng = random.Random(7)
    colors = ["red", "magenta", "yellow", "green", "cyan", "blue"]

    for _ in range(200):
        answer = rng.choices(colors, k=4)
        guess = rng.choices(colors, k=4)
        order = rng.sample(range(4), k=4)

        permuted = grade_guess([answer[i] for i in order], [guess[i] for i in order])
        assert Counter(permuted) == Counter(grade_guess(answer, guess))


def test_markers_never_exceed_shared_colors():
    rng = random.Random(11)
    colors = ["red", "magenta", "yellow", "green", "cyan", "blue"]

    for _ in range(200):
        answer = rng.choices(colors, k=4)
        guess = rng.choices(colors, k=4)
        shared = sum((Counter(answer) & Counter(guess)).values())
        hints = grade_guess(answer, guess)

        assert hints.count(EXACT) <= 4
        assert count_markers(hints) <= min(4, shared)


def test_wrong_length_is_rejected():
    with pytest.raises(ValueError):
        grade_guess(["red"] * 4, ["red"] * 3)


def test_shuffle_differently_changes_order():
    hints = [PRESENT, None, EXACT, PRESENT]
    for seed in range(10):
        assert shuffle_differently(hints, rng=random.Random(seed)) != hints


@pytest.mark.parametrize("hints", [[EXACT] * 4, [None] * 4, [PRESENT], []])
def test_shuffle_differently_keeps_uniform_hints(hints):
    assert shuffle_differently(hints) == hints


def test_shuffle_is_reproducible_with_seed():
    hints = [PRESENT, None, EXACT, PRESENT]
    assert shuffle_differently(hints, rng=random.Random(3)) == shuffle_differently(
        hints, rng=random.Random(3)
    )


def test_guesser_won_needs_four_exact_markers():
    assert not guesser_won([EXACT, EXACT, EXACT, None])
    assert not guesser_won([EXACT, EXACT, EXACT, PRESENT])
    assert not guesser_won([EXACT, EXACT, EXACT])


def test_single_marker_among_empty_slots_keeps_its_count():
    hints = [EXACT, None, None, None]
    for seed in range(10):
        shuffled = shuffle_differently(hints, rng=random.Random(seed))
        assert shuffled != hints
        assert Counter(shuffled) == Counter(hints)
