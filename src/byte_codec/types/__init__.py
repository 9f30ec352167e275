"""Value types and errors of the byte codec."""

from .base import CamelModel, StrictBaseModel
from .byte import Byte, hex_digit_value
from .byte_string import ByteString
from .constants import BASE64_ALPHABET, BASE64_PAD, HEX_ALPHABET
from .exceptions import (
    CodecError,
    CodecOverflowError,
    CodecTypeError,
    CodecValueError,
    InvalidHexCharacterError,
    KnownAnswerMismatchError,
    NonMultipleOfThreeLengthError,
    OddLengthInputError,
)
from .uint import BaseUint, Uint8

__all__ = [
    # Core types
    "Byte",
    "ByteString",
    "BaseUint",
    "Uint8",
    "CamelModel",
    "StrictBaseModel",
    "hex_digit_value",
    # Alphabets
    "HEX_ALPHABET",
    "BASE64_ALPHABET",
    "BASE64_PAD",
    # Exceptions
    "CodecError",
    "CodecTypeError",
    "CodecValueError",
    "CodecOverflowError",
    "InvalidHexCharacterError",
    "OddLengthInputError",
    "NonMultipleOfThreeLengthError",
    "KnownAnswerMismatchError",
]
