"""Roman numeral table and conversions between Roman numerals and integers."""
from types import MappingProxyType
from typing import List, Mapping

from roman_arabic_calculator.common.errors import (
    NonPositiveRomanResultError,
    UnrecognizedOperandError,
)

MIN_OPERAND: int = 1
MAX_OPERAND: int = 10

# Canonical numerals for the operand range plus the subtractive helpers
# needed to encode every result reachable from two operands (at most 100)
ROMAN_NUMERALS: Mapping[int, str] = MappingProxyType({
    1: "I",
    2: "II",
    3: "III",
    4: "IV",
    5: "V",
    6: "VI",
    7: "VII",
    8: "VIII",
    9: "IX",
    10: "X",
    40: "XL",
    50: "L",
    90: "XC",
    100: "C",
})

# Numerals accepted as operands, keyed by their uppercase spelling
OPERAND_NUMERALS: Mapping[str, int] = MappingProxyType({
    numeral: value
    for value, numeral in ROMAN_NUMERALS.items()
    if MIN_OPERAND <= value <= MAX_OPERAND
})


def is_roman(token: str) -> bool:
    """
    Tell whether a token is one of the canonical numerals I to X.

    The comparison is case-insensitive over ASCII letters only, so
    look-alikes such as the dotless i are not numerals.

    :param str token: Operand token

    :return: True if the token is a supported Roman numeral
    :rtype: bool
    """
    return token.isascii() and token.upper() in OPERAND_NUMERALS


def from_roman(numeral: str) -> int:
    """
    Decode a Roman operand into its integer value.

    :param str numeral: Roman numeral between I and X, any case

    :return: Integer value of the numeral
    :rtype: int
    :raises UnrecognizedOperandError: If the numeral is not in the operand table
    """
    if not is_roman(numeral):
        raise UnrecognizedOperandError(
            f"'{numeral}' is not a Roman numeral between {ROMAN_NUMERALS[MIN_OPERAND]} "
            f"and {ROMAN_NUMERALS[MAX_OPERAND]}"
        )
    return OPERAND_NUMERALS[numeral.upper()]


def _digit_groups(number: int) -> List[int]:
    """
    Split a positive integer into its decimal digit groups, least significant first.

    Example: 64 -> [4, 60]
    """
    groups: List[int] = []
    divisor = 10
    while number > 0:
        group = number % divisor
        groups.append(group)
        number -= group
        divisor *= 10
    return groups


def _encode_group(group: int) -> str:
    """Greedily encode one digit group using the largest table keys first."""
    encoded = ""
    while group > 0:
        key = max(value for value in ROMAN_NUMERALS if value <= group)
        encoded += ROMAN_NUMERALS[key]
        group -= key
    return encoded


def to_roman(number: int) -> str:
    """
    Encode a positive integer as a Roman numeral.

    The number is decomposed into digit groups (ones, tens, hundreds, ...),
    each group is encoded greedily against the numeral table and the groups
    are concatenated most significant first.

    :param int number: Positive integer to encode

    :return: Uppercase Roman numeral
    :rtype: str
    :raises NonPositiveRomanResultError: If the number is zero or negative
    """
    if number <= 0:
        raise NonPositiveRomanResultError(
            f"The result is {number} and cannot be written in Roman numerals"
        )

    return "".join(_encode_group(group) for group in reversed(_digit_groups(number)))
