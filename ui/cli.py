# Command-line input helpers (text-based play)


def put_blank_line():
    print()


def input_option(message: str, options) -> str:
    """
    Ask until the user types one of the options (case-insensitive).

    Args:
        message (str): The prompt to show.
        options (list[str]): The accepted answers, in lower case.
    Returns:
        str: The chosen option.
    """
    options = list(options)
    user_input = None

    while True:
        if user_input is not None:
            print("Invalid input. Please input one of the following:")
            print(", ".join(options))
            put_blank_line()

        user_input = input(message).strip().lower()
        if user_input in options:
            return user_input


def yes_no_input(message: str) -> bool:
    """Ask a yes/no question. Returns True for yes."""
    answer = input_option(message + " [Y/n]: ", ["yes", "y", "no", "n"])
    return answer in ("yes", "y")
