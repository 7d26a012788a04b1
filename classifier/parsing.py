"""
Parsing of the age token typed by the user
"""

import re

# Optional sign, ASCII digits only. int() alone would also take "1_000" and
# non-ASCII digits.
_AGE_TOKEN = re.compile(r"[+-]?[0-9]+")


class AgeParseError(ValueError):
    """The age token is not a whole number"""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"'{token}' is not a whole number.")


class MissingAgeError(EOFError):
    """Input ended before an age token was read"""

    def __init__(self):
        super().__init__("No age entered.")


def parse_age(token: str) -> int:
    """
    Parse one whitespace-delimited token as an age

    Args:
        token: Token as read from input

    Returns:
        int: The age

    Raises:
        AgeParseError: if the token is not an optionally signed run of digits
    """
    if not _AGE_TOKEN.fullmatch(token):
        raise AgeParseError(token)
    return int(token)
