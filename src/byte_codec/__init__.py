"""Hex to Base64 conversion over raw bytes.

Text is only a presentation format: input hex is decoded to bytes, and
Base64 is produced from those bytes.

Usage::

    from byte_codec import ByteString

    bs = ByteString.from_hex("49276d206b696c6c")
    bs.to_b64(pad=True)  # 'SSdtIGtpbGw='
"""

from __future__ import annotations

from .types import (
    BASE64_ALPHABET,
    HEX_ALPHABET,
    Byte,
    ByteString,
    CodecError,
    InvalidHexCharacterError,
    KnownAnswerMismatchError,
    NonMultipleOfThreeLengthError,
    OddLengthInputError,
)

__all__ = [
    # Core API
    "Byte",
    "ByteString",
    # Alphabets
    "HEX_ALPHABET",
    "BASE64_ALPHABET",
    # Exceptions
    "CodecError",
    "InvalidHexCharacterError",
    "OddLengthInputError",
    "NonMultipleOfThreeLengthError",
    "KnownAnswerMismatchError",
]
