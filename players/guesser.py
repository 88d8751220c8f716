import random
from dataclasses import dataclass, field
from itertools import permutations

from game.grading import Hint, count_markers
from game.ruleset import CODE_LENGTH
from ui.cli import input_option, yes_no_input
from ui.renderer import format_colors

from .base import Guesser


class HumanGuesser(Guesser):
    """Asks a person at the terminal for every slot of a guess."""

    def supply_color(self, colors, slot):
        print("Available colors:")
        print(format_colors(colors))
        return input_option(f"Please enter your guess for slot {slot}: ", colors)

    def confirm_guess(self):
        return yes_no_input("Are you ready to end your turn?")

    def receive_hints(self, hints):
        # Hints are shown on the board.
        pass


@dataclass
class DiscoveryState:
    """
        What the computer guesser knows within the current round.
    Attributes:
        last_feedback (list): Hints of the previous guess.
        found (list[int]): Palette indices known to be in the code, one
        entry per occurrence.
        guess_indices (list): Palette indices of the previous guess.
        candidates (list[tuple] | None): Orders of the found colors that are
        still possible, None until all four colors are found."""

    last_feedback: list = field(default_factory=lambda: [None] * CODE_LENGTH)
    found: list = field(default_factory=list)
    guess_indices: list = field(default_factory=lambda: [None] * CODE_LENGTH)
    candidates: list = None


class ComputerGuesser(Guesser):
    """
    Finds the colors of the code first, then their order.

    Discovery: the first guess is four times the first palette color. Every
    following guess keeps the colors found so far and fills the other slots
    with the next palette color, so the number of markers tells how many
    copies of that color the code holds.

    Ordering: once four colors are known, try orders of them, dropping
    every order whose exact count against the last guess disagrees with the
    feedback received for it.
    """

    def __init__(self, rng=None):
        super().__init__()
        self.rng = rng or random
        self.state = DiscoveryState()

    def start_round(self):
        self.state = DiscoveryState()

    def supply_color(self, colors, slot):
        if slot == 1:
            self._prepare_guess()
        return colors[self.state.guess_indices[slot - 1]]

    def confirm_guess(self):
        return True

    def receive_hints(self, hints):
        self.state.last_feedback = list(hints)

    def _prepare_guess(self):
        state = self.state
        old_guess = list(state.guess_indices)
        correct = count_markers(state.last_feedback)

        # Separate found colors from the tested one
        border = len(state.found)

        # Each discovery guess tests one new color, starting at border
        newly_found = correct - border
        if newly_found > 0:
            state.found.extend([old_guess[border]] * newly_found)

        if old_guess == [None] * CODE_LENGTH:
            state.guess_indices = [0] * CODE_LENGTH
        elif None in state.last_feedback:
            left_to_guess = CODE_LENGTH - correct
            state.guess_indices = state.found + [old_guess[border] + 1] * left_to_guess
        else:
            state.guess_indices = self._next_order(old_guess)

    def _next_order(self, last_guess) -> list:
        state = self.state
        if state.candidates is None:
            state.candidates = sorted(set(permutations(state.found)))

        exact = state.last_feedback.count(Hint.EXACT)
        state.candidates = [
            candidate
            for candidate in state.candidates
            if sum(a == b for a, b in zip(candidate, last_guess)) == exact
        ]
        return list(self.rng.choice(state.candidates))
