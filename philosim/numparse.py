"""Lenient decimal integer parsing for command-line arguments."""

_SPACE_CHARS = frozenset("\t\n\v\f\r ")


def is_space(char: str) -> bool:
    """Return True for a tab, newline, vertical tab, form feed, carriage return or space."""
    return char in _SPACE_CHARS and len(char) == 1


def is_digit(char: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return len(char) == 1 and "0" <= char <= "9"


def parse_prefix(text: str) -> tuple[int, bool]:
    """Parse the leading integer of ``text``.

    Leading whitespace and a single sign are accepted. Returns the value read
    and whether the whole string was consumed. On failure the value is the
    number obtained before the first offending character.
    """
    pos = 0
    end = len(text)
    while pos < end and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    number = 0
    while pos < end and is_digit(text[pos]):
        number = number * 10 + int(text[pos])
        pos += 1
    return number * sign, pos == end


def parse_int(text: str) -> int:
    """Parse ``text`` as an integer, raising ValueError on trailing garbage."""
    number, complete = parse_prefix(text)
    if not complete:
        raise ValueError(f"invalid integer: {text!r}")
    return number