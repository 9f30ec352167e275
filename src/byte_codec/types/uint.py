"""Unsigned Integer Type Specification."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from .exceptions import CodecOverflowError, CodecTypeError


class BaseUint(int):
    """
    A base class for fixed-width unsigned integers that inherits from `int`.

    Operators only accept operands of the exact same type. Mixing widths,
    or mixing with plain `int`, raises `CodecTypeError` so that a bit
    manipulation never silently leaves the type's range.
    """

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: int) -> Self:
        """
        Create and validate a new Uint instance.

        Raises:
            CodecTypeError: If `value` is not an `int` (bools are rejected).
            CodecOverflowError: If `value` is outside [0, 2**BITS - 1].
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise CodecTypeError(f"Expected int, got {type(value).__name__}")

        int_value = int(value)
        if not (0 <= int_value <= cls.max_value_int()):
            raise CodecOverflowError(int_value, cls.__name__, max_value=cls.max_value_int())
        return super().__new__(cls, int_value)

    @classmethod
    def max_value_int(cls) -> int:
        """The largest representable value, as a plain `int`."""
        return (1 << cls.BITS) - 1

    @classmethod
    def max_value(cls) -> Self:
        """The largest representable value."""
        return cls(cls.max_value_int())

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            """Pydantic validation function that calls the class constructor."""
            try:
                return cls(value)
            except (CodecOverflowError, CodecTypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.int_schema(ge=0, le=cls.max_value_int()),
                    core_schema.no_info_plain_validator_function(validate),
                ]
            ),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        # The JSON branch of the core schema already carries the integer bounds.
        json_schema = handler(core_schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    def _check_operand(self, other: Any, op_symbol: str) -> None:
        """Raise a consistent CodecTypeError unless `other` has our exact type."""
        if not isinstance(other, type(self)):
            raise CodecTypeError(
                f"Unsupported operand type(s) for {op_symbol}: "
                f"'{type(self).__name__}' and '{type(other).__name__}'"
            )

    def __and__(self, other: Any) -> Self:
        """Handle the bitwise AND operator (`&`)."""
        self._check_operand(other, "&")
        return type(self)(int(self) & int(other))

    def __rand__(self, other: Any) -> Self:
        return self.__and__(other)

    def __or__(self, other: Any) -> Self:
        """Handle the bitwise OR operator (`|`)."""
        self._check_operand(other, "|")
        return type(self)(int(self) | int(other))

    def __ror__(self, other: Any) -> Self:
        return self.__or__(other)

    def __xor__(self, other: Any) -> Self:
        """Handle the bitwise XOR operator (`^`)."""
        self._check_operand(other, "^")
        return type(self)(int(self) ^ int(other))

    def __rxor__(self, other: Any) -> Self:
        return self.__xor__(other)

    def __lshift__(self, other: Any) -> Self:
        """
        Handle the left bit-shift operator (`<<`).

        Raises:
            CodecOverflowError: If bits would be shifted past the type's width.
        """
        self._check_operand(other, "<<")
        return type(self)(int(self) << int(other))

    def __rshift__(self, other: Any) -> Self:
        """Handle the right bit-shift operator (`>>`)."""
        self._check_operand(other, ">>")
        return type(self)(int(self) >> int(other))

    def __eq__(self, other: object) -> bool:
        """Handle the equality operator (`==`)"""
        self._check_operand(other, "==")
        return int(self) == int(other)  # type: ignore[call-overload]

    def __ne__(self, other: object) -> bool:
        """Handle the inequality operator (`!=`)"""
        self._check_operand(other, "!=")
        return int(self) != int(other)  # type: ignore[call-overload]

    def __lt__(self, other: Any) -> bool:
        self._check_operand(other, "<")
        return int(self) < int(other)

    def __le__(self, other: Any) -> bool:
        self._check_operand(other, "<=")
        return int(self) <= int(other)

    def __gt__(self, other: Any) -> bool:
        self._check_operand(other, ">")
        return int(self) > int(other)

    def __ge__(self, other: Any) -> bool:
        self._check_operand(other, ">=")
        return int(self) >= int(other)

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))

    def __hash__(self) -> int:
        """Return a distinct hash for the object."""
        return hash((type(self), int(self)))


class Uint8(BaseUint):
    """A type representing an 8-bit unsigned integer (uint8)."""

    BITS = 8
