# Terminal rendering of the board (presentation only, no game logic)
from colorama import Back, Fore, Style

from game.board import pad_list
from game.grading import Hint
from game.ruleset import DEFAULT_RULES

SEPARATOR = "        "

BACKGROUNDS = {
    "red": Back.RED,
    "magenta": Back.MAGENTA,
    "yellow": Back.YELLOW,
    "green": Back.GREEN,
    "cyan": Back.CYAN,
    "blue": Back.BLUE,
    Hint.EXACT: Back.RED,
    Hint.PRESENT: Back.WHITE,
}

FOREGROUNDS = {
    "red": Fore.RED,
    "magenta": Fore.MAGENTA,
    "yellow": Fore.YELLOW,
    "green": Fore.GREEN,
    "cyan": Fore.CYAN,
    "blue": Fore.BLUE,
}

ROW_TEMPLATE = (
    "---------------------------",
    "|{}|{}|{}|{}||{}|{}",
    "|{}|{}|{}|{}||-----",
    "---------------------|{}|{}",
)


def format_colors(colors) -> str:
    """Return the color names in bold, each in its own color."""
    return SEPARATOR.join(
        f"{FOREGROUNDS.get(color, '')}{Style.BRIGHT}{color}{Style.RESET_ALL}"
        for color in colors
    )


def paint(value, width: int) -> str:
    """Return a cell of the given width with the value as background."""
    cell = " " * width
    if value is None:
        return cell
    return f"{BACKGROUNDS[value]}{cell}{Style.RESET_ALL}"


class BoardRenderer:
    """
        Turns a board into text, newest row on top.
    Attributes:
        plain (bool): Use emoji instead of ANSI background colors.
        color_size (int): Width of a color cell in the ANSI layout.
        hint_size (int): Width of a hint cell in the ANSI layout."""

    def __init__(self, plain=False, color_size=4, hint_size=2, rules=None):
        self.plain = plain
        self.color_size = color_size
        self.hint_size = hint_size
        self.rules = rules or DEFAULT_RULES

    def render(self, board) -> str:
        """Return the whole board as a string."""
        return "\n".join(self.format_row(row) for row in reversed(board.rows))

    def show(self, board):
        """Print the whole board."""
        print(self.render(board))

    def format_row(self, row) -> str:
        if self.plain:
            return self._format_plain_row(row)

        colors = pad_list(row.colors, 4)
        hints = pad_list(row.hints, 4)
        color_cells = [paint(c, self.color_size) for c in colors]
        hint_cells = [paint(h, self.hint_size) for h in hints]

        return "\n".join(
            (
                ROW_TEMPLATE[0],
                ROW_TEMPLATE[1].format(*color_cells, *hint_cells[:2]),
                ROW_TEMPLATE[2].format(*color_cells),
                ROW_TEMPLATE[3].format(*hint_cells[2:]),
            )
        )

    def _format_plain_row(self, row) -> str:
        emoji = self.rules["display"]["emoji_map"]
        hint_emoji = self.rules["display"]["hint_map"]
        line = "+----" * 8 + "+"

        attempt_line = ""
        for color in pad_list(row.colors, 4):
            attempt_line += "| " + emoji[color] + " " if color else "|    "
        # Hints are unordered, show exact markers first.
        hints = [h for h in row.hints if h is Hint.EXACT]
        hints += [h for h in row.hints if h is Hint.PRESENT]
        for hint in pad_list(hints, 4):
            attempt_line += "| " + hint_emoji[hint.value] + " " if hint else "|    "
        return attempt_line + "|\n" + line
