"""Unit tests for column data type codecs."""

import datetime
import struct
from decimal import Decimal
from ipaddress import IPv4Address, IPv6Address
from uuid import UUID

import pytest

from querylog.core import DataType, types


@pytest.mark.parametrize(
    ("data_type", "value", "expected"),
    [
        (types.TEXT, "foo", "foo"),
        (types.VARCHAR, "héllo", "héllo"),
        (types.ASCII, "abc", "abc"),
        (types.INT, 42, "42"),
        (types.INT, -123456, "-123456"),
        (types.BIGINT, 2**40, str(2**40)),
        (types.SMALLINT, -7, "-7"),
        (types.TINYINT, 127, "127"),
        (types.DOUBLE, 1.5, "1.5"),
        (types.FLOAT, 0.25, "0.25"),
        (types.VARINT, 2**80 + 1, str(2**80 + 1)),
        (types.VARINT, -129, "-129"),
        (types.DECIMAL, Decimal("12.34"), "12.34"),
        (types.DECIMAL, Decimal("-0.001"), "-0.001"),
        (types.BOOLEAN, True, "true"),
        (types.BOOLEAN, False, "false"),
        (types.BLOB, b"\x01\xab", "0x01ab"),
        (types.UUID_TYPE, UUID("12345678-1234-5678-1234-567812345678"), "12345678-1234-5678-1234-567812345678"),
        (types.INET, "127.0.0.1", "127.0.0.1"),
        (types.INET, "::1", "::1"),
    ],
)
def test_to_string_of_serialized_value(data_type: DataType, value: object, expected: str) -> None:
    assert data_type.to_string(data_type.serialize(value)) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.1, "0.1"), (1.0, "1.0"), (3.14, "3.14"), (-2.5e-07, "-2.5e-07"), (16777216.0, "16777216.0")],
)
def test_float_renders_shortest_single_precision_text(value: float, expected: str) -> None:
    assert types.FLOAT.to_string(types.FLOAT.serialize(value)) == expected


def test_float_keeps_special_values() -> None:
    assert types.FLOAT.to_string(types.FLOAT.serialize(float("inf"))) == "inf"
    assert types.FLOAT.to_string(types.FLOAT.serialize(float("nan"))) == "nan"


def test_int_uses_big_endian_four_bytes() -> None:
    assert types.INT.serialize(42) == b"\x00\x00\x00\x2a"
    assert types.INT.deserialize(b"\x00\x00\x00\x2a") == 42


def test_timestamp_is_milliseconds_since_epoch() -> None:
    moment = datetime.datetime(2020, 1, 2, 3, 4, 5, 678000, tzinfo=datetime.timezone.utc)
    raw = types.TIMESTAMP.serialize(moment)
    assert struct.unpack(">q", raw)[0] == 1577934245678
    assert types.TIMESTAMP.deserialize(raw) == moment
    assert types.TIMESTAMP.to_string(raw) == "2020-01-02T03:04:05.678+00:00"


def test_timestamp_accepts_naive_datetime_as_utc() -> None:
    naive = datetime.datetime(1970, 1, 1, 0, 0, 1)
    assert types.TIMESTAMP.serialize(naive) == struct.pack(">q", 1000)


def test_inet_deserializes_to_address_objects() -> None:
    assert types.INET.deserialize(types.INET.serialize("10.0.0.1")) == IPv4Address("10.0.0.1")
    assert types.INET.deserialize(types.INET.serialize("fe80::1")) == IPv6Address("fe80::1")


def test_decimal_rejects_non_finite_values() -> None:
    with pytest.raises(ValueError, match="non-finite"):
        types.DECIMAL.serialize(Decimal("NaN"))


def test_malformed_bytes_raise() -> None:
    with pytest.raises(struct.error):
        types.INT.to_string(b"\x01")


def test_by_name_is_case_insensitive() -> None:
    assert DataType.by_name("INT") is types.INT
    assert DataType.by_name("timeuuid") is types.TIMEUUID


def test_by_name_unknown_type() -> None:
    with pytest.raises(KeyError):
        DataType.by_name("geometry")


def test_all_primitive_types_are_unique_and_named() -> None:
    primitive = types.all_primitive_types()
    names = [data_type.name for data_type in primitive]
    assert len(names) == len(set(names))
    assert {"text", "int", "bigint", "blob", "uuid", "timestamp"} <= set(names)
    assert str(types.BIGINT) == "bigint"
