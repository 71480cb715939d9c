"""English number words used in generated doc comments and method names."""

from .errors import UnsupportedValueError

CARDINAL_WORDS: dict[int, str] = {
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "eleven",
    12: "twelve",
    13: "thirteen",
    14: "fourteen",
    15: "fifteen",
    16: "sixteen",
    17: "seventeen",
    18: "eighteen",
    19: "nineteen",
    20: "twenty",
}

ORDINAL_WORDS: dict[int, str] = {
    1: "first",
    2: "second",
    3: "third",
    4: "fourth",
    5: "fifth",
    6: "sixth",
    7: "seventh",
    8: "eighth",
    9: "ninth",
    10: "tenth",
    11: "eleventh",
    12: "twelfth",
    13: "thirteenth",
    14: "fourteenth",
    15: "fifteenth",
    16: "sixteenth",
    17: "seventeenth",
    18: "eighteenth",
    19: "nineteenth",
    20: "twentieth",
}


def _lookup(table: dict[int, str], n: int, kind: str) -> str:
    # bool is an int subclass; True must not render as "one"
    if isinstance(n, bool) or not isinstance(n, int):
        raise UnsupportedValueError(n, kind)
    try:
        return table[n]
    except KeyError:
        raise UnsupportedValueError(n, kind) from None


def to_cardinal_word(n: int) -> str:
    """Return the English cardinal word for n (1 -> "one").

    Args:
        n: An integer between 1 and 20 inclusive.

    Returns:
        The lowercase cardinal word.

    Raises:
        UnsupportedValueError: If n is outside the lookup table.
    """
    return _lookup(CARDINAL_WORDS, n, "cardinal")


def to_ordinal_word(n: int) -> str:
    """Return the English ordinal word for n (1 -> "first").

    Args:
        n: An integer between 1 and 20 inclusive.

    Returns:
        The lowercase ordinal word.

    Raises:
        UnsupportedValueError: If n is outside the lookup table.
    """
    return _lookup(ORDINAL_WORDS, n, "ordinal")


def title_case(s: str) -> str:
    """Uppercase the first character of s and leave the rest unchanged."""
    if not s:
        raise ValueError("Cannot title-case an empty string")
    return s[0].upper() + s[1:]
