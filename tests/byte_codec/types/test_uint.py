"""Unsigned Integer Type Tests."""

from typing import Any

import pytest
from pydantic import ValidationError, create_model

from byte_codec.types.exceptions import CodecOverflowError, CodecTypeError
from byte_codec.types.uint import BaseUint, Uint8


def test_pydantic_validation_accepts_valid_int() -> None:
    """Tests that Pydantic validation correctly accepts a valid integer."""
    model = create_model("Model", value=(Uint8, ...))

    instance: Any = model(value=10)
    assert isinstance(instance.value, Uint8)
    assert instance.value == Uint8(10)


@pytest.mark.parametrize("invalid_value", [256, -1, 1.0, "1", True, None])
def test_pydantic_validation_rejects_invalid_values(invalid_value: Any) -> None:
    """Range and type errors surface as pydantic ValidationErrors."""
    model = create_model("Model", value=(Uint8, ...))

    with pytest.raises(ValidationError):
        model(value=invalid_value)


def test_pydantic_serializes_as_plain_int() -> None:
    model = create_model("Model", value=(Uint8, ...))

    dumped = model(value=200).model_dump()
    assert dumped == {"value": 200}
    assert type(dumped["value"]) is int


@pytest.mark.parametrize(
    "invalid_value, expected_type_name",
    [
        (1.0, "float"),
        ("1", "str"),
        (True, "bool"),
        (False, "bool"),
        (b"1", "bytes"),
        (None, "NoneType"),
    ],
)
def test_instantiation_from_invalid_types_raises_error(
    invalid_value: Any, expected_type_name: str
) -> None:
    """Tests that instantiating with non-integer types raises a CodecTypeError."""
    with pytest.raises(CodecTypeError, match=f"Expected int, got {expected_type_name}"):
        Uint8(invalid_value)


def test_type_errors_are_builtin_type_errors() -> None:
    with pytest.raises(TypeError):
        Uint8("1")  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [-1, 256, 2**64])
def test_instantiation_out_of_range(value: int) -> None:
    with pytest.raises(CodecOverflowError) as exc_info:
        Uint8(value)

    assert exc_info.value.value == value
    assert exc_info.value.type_name == "Uint8"
    assert exc_info.value.max_value == 255
    assert isinstance(exc_info.value, ValueError)


def test_instantiation_and_type() -> None:
    value = Uint8(5)
    assert isinstance(value, int)
    assert isinstance(value, BaseUint)


def test_max_value() -> None:
    assert Uint8.max_value() == Uint8(255)
    assert Uint8.max_value_int() == 255


def test_bitwise_operators() -> None:
    a = Uint8(0b1100_1010)
    b = Uint8(0b0101_0110)

    assert a & b == Uint8(0b0100_0010)
    assert a | b == Uint8(0b1101_1110)
    assert a ^ b == Uint8(0b1001_1100)
    assert a >> Uint8(4) == Uint8(0b1100)
    assert Uint8(0b1111) << Uint8(4) == Uint8(0b1111_0000)


def test_left_shift_overflow() -> None:
    """Shifting bits past the width is an overflow, not a silent truncation."""
    with pytest.raises(CodecOverflowError):
        Uint8(0x80) << Uint8(1)


@pytest.mark.parametrize("other", [1, 1.0, "1"])
def test_operators_reject_other_types(other: Any) -> None:
    """Mixing with plain ints or other Python types is rejected."""
    value = Uint8(1)
    with pytest.raises(CodecTypeError, match="Unsupported operand type"):
        value & other
    with pytest.raises(CodecTypeError):
        value == other  # noqa: B015
    with pytest.raises(CodecTypeError):
        value < other  # noqa: B015


def test_comparisons() -> None:
    assert Uint8(1) < Uint8(2)
    assert Uint8(2) <= Uint8(2)
    assert Uint8(3) > Uint8(2)
    assert Uint8(3) >= Uint8(3)
    assert Uint8(3) != Uint8(4)


def test_hash_and_repr() -> None:
    assert hash(Uint8(7)) == hash(Uint8(7))
    assert len({Uint8(7), Uint8(7), Uint8(8)}) == 2
    assert repr(Uint8(7)) == "Uint8(7)"
    assert str(Uint8(7)) == "7"
