"""Exception hierarchy for the byte codec."""

from __future__ import annotations


class CodecError(Exception):
    """
    Base exception for all codec errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class CodecTypeError(CodecError, TypeError):
    """Raised when a value of the wrong Python type reaches a codec type."""


class CodecValueError(CodecError, ValueError):
    """
    Base class for value-related errors.

    Raised when the input has the right type but cannot be converted.
    """


class CodecOverflowError(CodecValueError):
    """
    Raised when an integer is outside the range of its type.

    Attributes:
        value: The value that caused the overflow.
        type_name: The type that couldn't hold the value.
        min_value: The minimum allowed value (inclusive).
        max_value: The maximum allowed value (inclusive).
    """

    def __init__(
        self,
        value: int,
        type_name: str,
        *,
        min_value: int = 0,
        max_value: int,
    ) -> None:
        self.value = value
        self.type_name = type_name
        self.min_value = min_value
        self.max_value = max_value

        super().__init__(
            f"{value} is out of range for {type_name} (valid range: [{min_value}, {max_value}])"
        )


class InvalidHexCharacterError(CodecValueError):
    """
    Raised when a character outside the hex alphabet is decoded.

    Attributes:
        character: The offending input (normally a single character).
        position: Index of the character in the decoded input.
    """

    def __init__(self, character: str, *, position: int) -> None:
        self.character = character
        self.position = position

        super().__init__(f"Invalid hex character {character!r} at position {position}")


class OddLengthInputError(CodecValueError):
    """
    Raised when a hex string cannot be split into whole bytes.

    Attributes:
        length: Number of characters in the rejected input.
    """

    def __init__(self, length: int) -> None:
        self.length = length

        super().__init__(f"Hex input must have an even number of characters, got {length}")


class NonMultipleOfThreeLengthError(CodecValueError):
    """
    Raised when unpadded Base64 is requested for a partial final group.

    Attributes:
        length: Number of bytes in the rejected input.
    """

    def __init__(self, length: int) -> None:
        self.length = length

        super().__init__(
            f"Unpadded Base64 requires a byte count divisible by 3, got {length} "
            f"({length % 3} trailing)"
        )


class KnownAnswerMismatchError(CodecValueError):
    """
    Raised when the reference input does not encode to the reference output.

    Attributes:
        expected: The reference Base64 string.
        actual: What the codec produced.
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual

        super().__init__(f"Known-answer check failed: expected {expected!r}, got {actual!r}")
