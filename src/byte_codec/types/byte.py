"""Byte Type"""

from __future__ import annotations

from typing_extensions import Self

from .constants import HEX_ALPHABET
from .exceptions import InvalidHexCharacterError
from .uint import Uint8


def hex_digit_value(char: str, *, position: int = 0) -> int:
    """
    Look up the nibble value of a single hex character.

    The lookup is case-insensitive: the character is upper-cased before it is
    searched for in `HEX_ALPHABET`.

    Args:
        char: Exactly one character.
        position: Reported in the error if the lookup fails.

    Raises:
        InvalidHexCharacterError: If `char` is not one hex digit.
    """
    # `str.find` returns 0 for "" and a match for multi-character needles.
    if len(char) != 1:
        raise InvalidHexCharacterError(char, position=position)

    index = HEX_ALPHABET.find(char.upper())
    if index < 0:
        raise InvalidHexCharacterError(char, position=position)
    return index


class Byte(Uint8):
    """
    The `byte` type, represented as a subclass of `Uint8`.

    While it has the same validation rules as `Uint8`, this distinct type
    separates raw byte data from a numerical `uint8` value. It is the unit of
    the hex codec: one byte is always two hex characters.
    """

    def to_hex(self) -> tuple[str, str]:
        """
        Render the byte as two upper-case hex characters, high nibble first.

        Example:
            >>> Byte(123).to_hex()
            ('7', 'B')
        """
        value = int(self)
        return HEX_ALPHABET[value >> 4], HEX_ALPHABET[value & 0x0F]

    @classmethod
    def from_hex(cls, high: str, low: str) -> Self:
        """
        Build a byte from its two hex characters (case-insensitive).

        Raises:
            InvalidHexCharacterError: If either character is not a hex digit.
                `position` is 0 for `high` and 1 for `low`.
        """
        high_value = hex_digit_value(high, position=0)
        low_value = hex_digit_value(low, position=1)
        return cls((high_value << 4) | low_value)

    def __repr__(self) -> str:
        """Return the official string representation as a hex value."""
        return f"Byte({hex(self)})"
