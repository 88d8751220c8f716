# Capability interfaces for the two roles of a game.
from abc import ABC, abstractmethod


class Player(ABC):
    """
        Anything taking part in a game.
    Attributes:
        points (int): Points gathered so far, changed only by round scoring."""

    def __init__(self):
        self.points = 0


class Guesser(Player):
    """Role that proposes guesses until the hidden code is found."""

    def start_round(self):
        """Called before the first guess of every round."""

    @abstractmethod
    def supply_color(self, colors: list[str], slot: int) -> str:
        """
        Choose the color for one slot of the current guess.
        Args:
            colors (list[str]): The colors available in this game.
            slot (int): The 1-based slot number, 1 to 4.
        Returns:
            str: One of the given colors.
        """

    @abstractmethod
    def confirm_guess(self) -> bool:
        """Return False to enter all four slots of the guess again."""

    @abstractmethod
    def receive_hints(self, hints: list):
        """Take the feedback of the last graded guess."""


class Maker(Player):
    """Role that chooses the hidden code."""

    @abstractmethod
    def supply_answer(self, colors: list[str]) -> list[str]:
        """
        Choose the hidden code.
        Args:
            colors (list[str]): The colors available in this game.
        Returns:
            list[str]: Four colors out of the given ones.
        """
