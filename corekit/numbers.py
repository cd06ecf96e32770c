"""Parsing and formatting helpers for numbers written as text."""

from __future__ import annotations

DECIMAL_SEPARATOR = "."
THOUSANDS_SEPARATOR = ","
DEFAULT_MAX_INT = 1_000_000

_SIGNS = "+-"
_BLANKS = " \t\n\r"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_numeric(text: str, tolerate_signs: bool = True) -> bool:
    """Return True if ``text`` holds only digits, thousands separators and at most one decimal point.

    Leading ``+``/``-`` signs are skipped when ``tolerate_signs`` is true.
    An empty string counts as numeric.
    """
    body = text.lstrip(_SIGNS) if tolerate_signs else text
    decimal_points = 0
    for ch in body:
        if ch == DECIMAL_SEPARATOR:
            decimal_points += 1
            if decimal_points > 1:
                return False
        elif ch != THOUSANDS_SEPARATOR and not _is_digit(ch):
            return False
    return True


def zero_if_not_numeric(text: str, tolerate_signs: bool = True) -> str:
    """Return ``text`` if it is numeric, otherwise ``"0"``."""
    return text if is_numeric(text, tolerate_signs) else "0"


def padded(value: int, width_marker: int, padding: str = " ") -> str:
    """Left-pad the absolute value of ``value`` so it is as wide as ``width_marker``.

    ``padded(3, 100, "0") == "003"``, ``padded(0, 100, "0") == "000"``.
    """
    magnitude = abs(value)
    marker = width_marker
    pieces = []
    while marker > magnitude:
        pieces.append(padding)
        marker //= 10
    if magnitude > 0:
        pieces.append(str(magnitude))
    return "".join(pieces)


def remove_line_breaks(text: str, replace_with: str = "") -> str:
    """Replace every carriage return and line feed with ``replace_with``."""
    return "".join(replace_with if ch in "\r\n" else ch for ch in text)


def clean_spaces(text: str, remove_all: bool = False, remove_line_breaks: bool = True) -> str:
    """Collapse runs of blanks into their first character and drop leading blanks.

    With ``remove_all`` every blank is removed.  Line breaks are removed
    beforehand unless ``remove_line_breaks`` is false.
    """
    if remove_line_breaks:
        text = text.replace("\r", "").replace("\n", "")
    out = []
    after_blank = True
    for ch in text:
        if ch in _BLANKS:
            if not after_blank and not remove_all:
                out.append(ch)
            after_blank = True
        else:
            out.append(ch)
            after_blank = False
    return "".join(out)


def clean_all_spaces(text: str) -> str:
    """Remove every blank and line break from ``text``."""
    return clean_spaces(text, remove_all=True)


def string_to_integer(text: str) -> int:
    """Read an integer, ignoring blanks and thousands separators.

    Any number of leading signs is accepted; each ``-`` flips the sign.
    """
    compact = clean_spaces(text, remove_all=True)
    body = compact.lstrip(_SIGNS)
    signs = compact[: len(compact) - len(body)]
    sign = -1 if signs.count("-") % 2 else 1
    value = 0
    zero = ord("0")
    for ch in body:
        if ch != THOUSANDS_SEPARATOR:
            value = value * 10 + ord(ch) - zero
    return sign * value


def remove_non_numeric_start(text: str) -> str:
    """Return the decimal digits of ``text`` in order, dropping everything else."""
    return "".join(ch for ch in text if _is_digit(ch))


def string_to_integer_remove_start(text: str) -> int:
    """Read the integer formed by the digits of ``text``; 0 if there are none."""
    return string_to_integer(remove_non_numeric_start(text))


def string_to_integer_remove_start_and_end(text: str, max_int: int = DEFAULT_MAX_INT) -> int:
    """Read the first run of digits in ``text``, reduced modulo ``max_int``.

    A ``max_int`` below 1 falls back to the default of one million.
    """
    if max_int < 1:
        max_int = DEFAULT_MAX_INT
    value = 0
    started = False
    for ch in text:
        if _is_digit(ch):
            started = True
            value = (value * 10 + ord(ch) - ord("0")) % max_int
        elif started:
            break
    return value