import random

from game.ruleset import CODE_LENGTH
from ui.cli import input_option
from ui.renderer import format_colors

from .base import Maker


class ComputerMaker(Maker):
    """Picks the hidden code at random, duplicates allowed."""

    def __init__(self, rng=None):
        super().__init__()
        self.rng = rng or random

    def supply_answer(self, colors):
        return self.rng.choices(colors, k=CODE_LENGTH)


class HumanMaker(Maker):
    """Asks a person at the terminal for the hidden code."""

    def supply_answer(self, colors):
        print("Available colors:")
        print(format_colors(colors))

        return [
            input_option(f"Please set a color for slot {slot}: ", colors)
            for slot in range(1, CODE_LENGTH + 1)
        ]
