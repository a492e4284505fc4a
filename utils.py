"""
Input helpers shared by the services.
"""
import re

# SQLite INTEGER is a signed 64-bit value
MIN_ID = -2 ** 63
MAX_ID = 2 ** 63 - 1

INTEGER_PATTERN = re.compile(r'-?[0-9]+')


def is_blank(value):
    """True for None and for strings holding only whitespace."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_id(value):
    """
    Coerce an integer ID, returning None when it is not one.

    Accepts ints and plain decimal strings ("12", "-3"). Anything else,
    including values outside the 64-bit range the database can hold,
    gives None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        if not INTEGER_PATTERN.fullmatch(value):
            return None
        value = int(value)
    if not isinstance(value, int):
        return None
    if not MIN_ID <= value <= MAX_ID:
        return None
    return value
