"""
Decodes SPICE numeric literals with single-letter scale suffixes.

Only one suffix character is recognized; anything after it is ignored, so
multi-letter units such as 'Meg' are read as 'M'.
"""

import math

from spicescan.errors import ValueDecodeError

__all__ = ["UNIT_MULTIPLIERS", "parse_value", "split_value"]

# Case-sensitive: 'M' is mega and 'm' is milli; there is no lowercase 'k'.
UNIT_MULTIPLIERS: dict[str, float] = {
    "T": 1e12,
    "G": 1e9,
    "M": 1e6,
    "K": 1e3,
    "m": 1e-3,
    "u": 1e-6,
    "n": 1e-9,
    "p": 1e-12,
}

_NUMERIC_CHARS = frozenset("0123456789.-")


def split_value(token: str) -> tuple[str, str | None]:
    """
    Splits a literal into its numeric prefix and optional suffix character.

    :param token: Raw value token (e.g., '3.3m').
    :return: Tuple of (numeric prefix, suffix character or None).
    """
    for index, char in enumerate(token):
        if char not in _NUMERIC_CHARS:
            return token[:index], char
    return token, None


def parse_value(token: str) -> float:
    """
    Converts a value token into a float magnitude.

    :param token: Raw value token (e.g., '10K', '-5n', '0.25').
    :return: Scaled floating-point value.
    :raises ValueDecodeError: If the numeric prefix or the suffix is invalid,
        or the scaled value is out of range.
    """
    number, suffix = split_value(token)
    try:
        value = float(number)
    except ValueError:
        raise ValueDecodeError(f"invalid numeric value: '{number}'") from None
    if suffix is not None:
        try:
            value *= UNIT_MULTIPLIERS[suffix]
        except KeyError:
            raise ValueDecodeError(f"unknown unit: {suffix}") from None
    if math.isinf(value):
        raise ValueDecodeError(f"invalid numeric value: '{number}' (out of range)")
    return value
