# Configuration: colors, code length, turn limit, scoring, display, etc.


class ConfigurationError(ValueError):
    """Raised when a game session is set up with invalid options."""


CLASSIC_COLORS = ["red", "magenta", "yellow", "green", "cyan", "blue"]

DEFAULT_RULES = {
    "name": "medium",  # Identifier for this ruleset
    "code_length": 4,  # Number of pegs in the code
    "num_colors": 6,  # Available colors (see color set below)
    "allow_duplicates": True,  # Can the code contain repeated colors?
    "max_turns": 12,  # Number of guesses per round
    "rounds": 2,  # Number of rounds per game, must be even
    "exhaustion_score": 13,  # Maker points when the code is never cracked
    "colors": CLASSIC_COLORS,
    "display": {
        "emoji_map": {  # Used by the plain renderer
            "red": "🔴",
            "magenta": "🟣",
            "yellow": "🟡",
            "green": "🟢",
            "cyan": "🩵",
            "blue": "🔵",
        },
        "hint_map": {
            "exact": "⚫",
            "present": "⚪",
        },
    },
}

DIFFICULTIES = {
    "medium": DEFAULT_RULES,
}

CODE_LENGTH = DEFAULT_RULES["code_length"]
EXHAUSTION_SCORE = DEFAULT_RULES["exhaustion_score"]


def rules_for_difficulty(difficulty: str) -> dict:
    """
    Look up the ruleset for a difficulty identifier.
    Args:
        difficulty (str): The difficulty name, e.g. "medium".
    Returns:
        dict: The matching ruleset.
    Raises:
        ConfigurationError: If the difficulty is not known.
    """
    try:
        return DIFFICULTIES[str(difficulty).lower()]
    except KeyError:
        allowed = ", ".join(DIFFICULTIES)
        raise ConfigurationError(
            f"Invalid difficulty level '{difficulty}'. Allowed: {allowed}."
        ) from None
