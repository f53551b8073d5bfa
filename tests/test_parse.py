import pytest

from netnaming.core.errors import InvalidValueError
from netnaming.core.parse import parse_boolean, parse_int, parse_unsigned


@pytest.mark.parametrize("value", ["1", "yes", "Y", "true", "T", "on", "ON"])
def test_parse_boolean_true(value: str) -> None:
    assert parse_boolean(value) is True


@pytest.mark.parametrize("value", ["0", "no", "N", "false", "f", "Off"])
def test_parse_boolean_false(value: str) -> None:
    assert parse_boolean(value) is False


@pytest.mark.parametrize("value", ["", "2", "maybe", " 1"])
def test_parse_boolean_rejects_other_values(value: str) -> None:
    with pytest.raises(InvalidValueError):
        parse_boolean(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("42", 42), (" 7", 7), ("\t\n12", 12), ("-3", -3), ("+5", 5), ("0x1f", 31), ("010", 8), ("0", 0), ("2147483647", 2147483647)],
)
def test_parse_int(value: str, expected: int) -> None:
    assert parse_int(value) == expected


@pytest.mark.parametrize(
    "value",
    ["", "abc", "1_000", "1 2", "7 ", "0x", "09", "0x0x1", "0x0X1f", "00o7", "0b1", "+-5", "2147483648", "-2147483649"],
)
def test_parse_int_rejects(value: str) -> None:
    with pytest.raises(InvalidValueError):
        parse_int(value)


def test_parse_unsigned() -> None:
    assert parse_unsigned("4294967295") == 4294967295
    assert parse_unsigned("0x10") == 16
    with pytest.raises(InvalidValueError):
        parse_unsigned("-1")
    with pytest.raises(InvalidValueError):
        parse_unsigned(" -0")
    with pytest.raises(InvalidValueError):
        parse_unsigned("4294967296")


@pytest.mark.parametrize("value", ["0x0x10", "0o17", "10\n"])
def test_parse_unsigned_rejects_malformed(value: str) -> None:
    with pytest.raises(InvalidValueError):
        parse_unsigned(value)
