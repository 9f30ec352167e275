"""
Byte string type.

A `ByteString` is an ordered, immutable sequence of `Byte` values. It is the
pivot of every conversion in the codec: text formats (hex, Base64) are only
ever produced from, or parsed into, raw bytes.

- hex:    2 characters per byte, case-insensitive on input, upper-case on output.
- Base64: 3 bytes per 4 characters (RFC 4648 alphabet), encode only.
"""

from __future__ import annotations

from typing import Any, Iterator

from pydantic import Field, field_serializer, field_validator
from typing_extensions import Self

from byte_codec import config

from .base import StrictBaseModel
from .byte import Byte
from .constants import (
    B64_BLOCK_BYTES,
    B64_BLOCK_CHARS,
    BASE64_ALPHABET,
    BASE64_PAD,
    HEX_CHARS_PER_BYTE,
)
from .exceptions import (
    InvalidHexCharacterError,
    NonMultipleOfThreeLengthError,
    OddLengthInputError,
)


def _encode_block(t1: int, t2: int, t3: int) -> list[str]:
    """Regroup 3 bytes (24 bits) into 4 sextets and map each to the Base64 alphabet."""
    sextets = (
        t1 >> 2,
        ((t1 & 0x03) << 4) | (t2 >> 4),
        ((t2 & 0x0F) << 2) | (t3 >> 6),
        t3 & 0x3F,
    )
    return [BASE64_ALPHABET[v] for v in sextets]


class ByteString(StrictBaseModel):
    """
    An ordered, immutable sequence of bytes.

    `data` accepts:
      - tuples, lists or iterators of `Byte` / `int` in [0, 255]
      - `bytes` / `bytearray`
      - a hex string (decoded with `from_hex`)

    and is stored as a `tuple[Byte, ...]`.
    """

    data: tuple[Byte, ...] = Field(default_factory=tuple)
    """The bytes, in stream order."""

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, v: Any) -> Any:
        """Normalize the accepted inputs to a tuple; items are checked by `Byte`."""
        if isinstance(v, str):
            return cls.from_hex(v).data
        if isinstance(v, (tuple, list, bytes, bytearray)) or isinstance(v, Iterator):
            return tuple(v)
        # Anything else is left for the strict tuple schema to reject.
        return v

    @field_serializer("data", when_used="json")
    def _serialize_data(self, value: tuple[Byte, ...]) -> str:
        """Serialize as a hex string in JSON."""
        return self.to_hex()

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> Self:
        """Wrap raw Python bytes."""
        return cls(data=tuple(data))

    @classmethod
    def from_hex(cls, value: str) -> Self:
        """
        Decode a hex string into a byte string.

        The input is split into consecutive character pairs, each decoded by
        `Byte.from_hex`. Digits are case-insensitive and there is no prefix
        or separator support.

        Raises:
            OddLengthInputError: If the input has an odd number of characters.
            InvalidHexCharacterError: If a character is not a hex digit.
                `position` indexes into `value`.
        """
        if len(value) % HEX_CHARS_PER_BYTE != 0:
            raise OddLengthInputError(len(value))

        result: list[Byte] = []
        for offset in range(0, len(value), HEX_CHARS_PER_BYTE):
            try:
                result.append(Byte.from_hex(value[offset], value[offset + 1]))
            except InvalidHexCharacterError as e:
                raise InvalidHexCharacterError(e.character, position=offset + e.position) from e

        return cls(data=tuple(result))

    def to_hex(self) -> str:
        """Encode as upper-case hex, two characters per byte."""
        return "".join(high + low for high, low in (b.to_hex() for b in self.data))

    def to_b64(self, pad: bool | None = None) -> str:
        """
        Encode as Base64.

        Args:
            pad: With `True`, a trailing group of 1 or 2 bytes is encoded and
                completed with `=` as in RFC 4648. With `False`, such a group
                is an error. `None` uses `config.B64_PAD_DEFAULT`.

        Raises:
            NonMultipleOfThreeLengthError: If padding is off and the byte
                count is not divisible by 3.
        """
        if pad is None:
            pad = config.B64_PAD_DEFAULT

        length = len(self.data)
        if length % B64_BLOCK_BYTES != 0 and not pad:
            raise NonMultipleOfThreeLengthError(length)

        values = [int(b) for b in self.data]
        chars: list[str] = []
        for start in range(0, length, B64_BLOCK_BYTES):
            block = values[start : start + B64_BLOCK_BYTES]
            missing = B64_BLOCK_BYTES - len(block)

            # Missing bytes encode as zero bits, then their sextets become padding.
            t1, t2, t3 = block + [0] * missing
            encoded = _encode_block(t1, t2, t3)
            if missing:
                encoded[B64_BLOCK_CHARS - missing :] = [BASE64_PAD] * missing
            chars.extend(encoded)

        return "".join(chars)

    def __bytes__(self) -> bytes:
        """Return the byte string as a bytes object."""
        return bytes(int(b) for b in self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Byte]:  # type: ignore[override]
        """Iterate over the bytes rather than the model fields."""
        return iter(self.data)

    def __getitem__(self, index: int) -> Byte:
        return self.data[index]

    def __repr__(self) -> str:
        """Return a string representation of the byte string."""
        return f"{type(self).__name__}({bytes(self).hex()})"
