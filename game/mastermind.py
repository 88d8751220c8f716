from __future__ import annotations

import time
from dataclasses import dataclass, field

from .board import Board
from .grading import grade_guess, guesser_won
from .ruleset import CODE_LENGTH, EXHAUSTION_SCORE, ConfigurationError, rules_for_difficulty


@dataclass(frozen=True)
class RoundResult:
    round: int
    turns: int
    won: bool
    points: int
    time_s: float = field(default=0.0, compare=False)


class Mastermind:
    """
    A game session: a maker hides a code, a guesser tries to crack it.

    Attributes:
        guesser (Guesser): Supplies guesses and receives hints.
        maker (Maker): Supplies the hidden code and collects the points.
        rules (dict): The ruleset of the chosen difficulty.
        colors (list[str]): Colors available in this game.
        turns (int): Turn limit of a round.
        rounds (int): Number of rounds, always even.
        board (Board): Board of the current round.
        renderer: Optional object with a show(board) method, called whenever
        the board changes.
        results (list[RoundResult]): One entry per finished round.
    """

    def __init__(
        self,
        guesser,
        maker,
        difficulty="medium",
        turns=None,
        rounds=None,
        *,
        renderer=None,
        rng=None,
    ):
        self.rules = rules_for_difficulty(difficulty)
        turns = self.rules["max_turns"] if turns is None else turns
        rounds = self.rules["rounds"] if rounds is None else rounds

        if rounds % 2 != 0:
            raise ConfigurationError("Number of rounds must be even!")
        if turns < 1:
            raise ConfigurationError(
                f"Number of turns must be at least 1, but got {turns}."
            )

        self.guesser = guesser
        self.maker = maker
        self.colors = list(self.rules["colors"])
        self.turns = turns
        self.rounds = rounds
        self.renderer = renderer
        self.rng = rng
        self.board = Board(number_of_rows=turns)
        self.results = []

    def play_game(self) -> int:
        """Play all rounds and return the maker's total points."""
        for round_number in range(1, self.rounds + 1):
            self.results.append(self.play_round(round_number))
        return self.maker.points

    def play_round(self, round_number=1) -> RoundResult:
        """
        Play one round until the code is cracked or the turns run out.

        Args:
            round_number (int): 1-based number of this round.
        Returns:
            RoundResult: How the round ended and what the maker scored.
        """
        start_time = time.perf_counter()
        self.board = Board(number_of_rows=self.turns)
        self.guesser.start_round()
        answer = self.maker.supply_answer(self.colors)
        self.show_board()

        won = False
        for turn in range(1, self.turns + 1):
            hints = grade_guess(answer, self.guessed_colors(), rng=self.rng)
            self.board.insert_hints(hints)
            self.guesser.receive_hints(hints)
            self.show_board()

            won = guesser_won(hints)
            if won or turn == self.turns:
                break

            self.board.increment_turn()

        points = self.allocate_score(turn, won)
        return RoundResult(
            round=round_number,
            turns=turn,
            won=won,
            points=points,
            time_s=time.perf_counter() - start_time,
        )

    def guessed_colors(self) -> list[str]:
        """Collect a full guess, again from scratch until it is confirmed."""
        while True:
            guess = self.take_guesses()
            if self.guesser.confirm_guess():
                return guess

    def take_guesses(self) -> list[str]:
        guess = []
        for i in range(CODE_LENGTH):
            color = self.guesser.supply_color(self.colors, i + 1)
            self.board.place_color(color, i)
            self.show_board()
            guess.append(color)
        return guess

    def allocate_score(self, turns: int, won: bool) -> int:
        """Award the maker the winning turn, or the fixed bonus if never cracked."""
        points = turns if won else EXHAUSTION_SCORE
        self.maker.points += points
        return points

    def show_board(self):
        if self.renderer is not None:
            self.renderer.show(self.board)
