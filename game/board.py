from dataclasses import dataclass, field

from .ruleset import CODE_LENGTH, DEFAULT_RULES


def pad_list(items, size: int) -> list:
    """Pad a list with None up to size, truncating longer lists."""
    items = list(items or [])[:size]
    return items + [None] * (size - len(items))


@dataclass
class Row:
    """
        One turn on the board.
    Attributes:
        colors (list[str | None]): The placed colors, None for empty slots.
        hints (list[Hint | None]): The feedback for this turn."""

    colors: list = field(default_factory=lambda: [None] * CODE_LENGTH)
    hints: list = field(default_factory=lambda: [None] * CODE_LENGTH)


class Board:
    """Game board: a fixed number of rows and a cursor on the active one."""

    def __init__(self, number_of_rows=None, size: int = CODE_LENGTH):
        """
        Initialize an empty board.

        Args:
            number_of_rows (int, optional): Number of turns the board holds.
            Defaults to the max_turns of the default rules.
            size (int): Number of color and hint slots per row.
        """
        if number_of_rows is None:
            number_of_rows = DEFAULT_RULES["max_turns"]
        if number_of_rows < 1:
            raise ValueError(
                f"A board needs at least one row, but got {number_of_rows}."
            )
        self.number_of_rows = number_of_rows
        self.size = size
        self.rows = [
            Row([None] * size, [None] * size)
            for _ in range(self.number_of_rows)
        ]
        self.current_row = 0

    @property
    def current(self) -> Row:
        """Return the row of the active turn."""
        return self.rows[self.current_row]

    def place_color(self, color, index: int):
        """
        Put a color into a slot of the current row, replacing what was there.

        Args:
            color (str): The color to place.
            index (int): The 0-based slot index.
        """
        if not 0 <= index < self.size:
            raise ValueError(
                f"Slot index must be between 0 and {self.size - 1}, "
                f"but got {index}."
            )
        self.current.colors[index] = color

    def insert_hints(self, hints):
        """Replace all hints of the current row."""
        hints = list(hints)
        if len(hints) > self.size:
            raise ValueError(
                f"A row holds at most {self.size} hints, but got {len(hints)}."
            )
        self.current.hints = pad_list(hints, self.size)

    def increment_turn(self):
        """Move to the next row. Stays on the last row once it is reached."""
        if self.current_row < self.number_of_rows - 1:
            self.current_row += 1
