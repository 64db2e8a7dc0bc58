"""Column data types and their wire codecs.

Each :class:`DataType` knows how to turn raw bound bytes back into a Python
value and how to print that value. The query logger only ever needs
:meth:`DataType.to_string`; ``serialize`` exists so prepared statements can be
bound from plain Python values.
"""

import datetime
import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal
from ipaddress import ip_address
from typing import Any, Final
from uuid import UUID

__all__ = (
    "ASCII",
    "BIGINT",
    "BLOB",
    "BOOLEAN",
    "COUNTER",
    "DECIMAL",
    "DOUBLE",
    "FLOAT",
    "INET",
    "INT",
    "SMALLINT",
    "TEXT",
    "TIMESTAMP",
    "TIMEUUID",
    "TINYINT",
    "UUID_TYPE",
    "VARCHAR",
    "VARINT",
    "DataType",
    "all_primitive_types",
)

_EPOCH: Final = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
_ONE_MS: Final = datetime.timedelta(milliseconds=1)

_REGISTRY: "dict[str, DataType]" = {}


@dataclass(frozen=True, slots=True)
class DataType:
    """A named column type with its binary codec."""

    name: str
    decode: "Callable[[bytes], Any]" = field(repr=False, compare=False)
    encode: "Callable[[Any], bytes]" = field(repr=False, compare=False)
    render: "Callable[[Any], str]" = field(default=str, repr=False, compare=False)

    def deserialize(self, raw: bytes) -> Any:
        return self.decode(raw)

    def serialize(self, value: Any) -> bytes:
        return self.encode(value)

    def to_string(self, raw: bytes) -> str:
        """Deserialize ``raw`` and return its printable form."""
        return self.render(self.decode(raw))

    @staticmethod
    def by_name(name: str) -> "DataType":
        """Look up a registered type by its (case-insensitive) name.

        Raises:
            KeyError: If no type is registered under ``name``.
        """
        return _REGISTRY[name.lower()]

    def __str__(self) -> str:
        return self.name


def _register(data_type: DataType) -> DataType:
    _REGISTRY[data_type.name] = data_type
    return data_type


def _fixed(fmt: str) -> "tuple[Callable[[bytes], Any], Callable[[Any], bytes]]":
    codec = struct.Struct(fmt)

    def decode(raw: bytes) -> Any:
        return codec.unpack(raw)[0]

    def encode(value: Any) -> bytes:
        return codec.pack(value)

    return decode, encode


_FLOAT32: Final = struct.Struct(">f")


def _render_float(value: float) -> str:
    """Shortest text that reads back as the same single-precision value."""
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if _FLOAT32.unpack(_FLOAT32.pack(float(text)))[0] == value:
            return repr(float(text))
    return repr(value)


def _decode_varint(raw: bytes) -> int:
    return int.from_bytes(raw, "big", signed=True)


def _encode_varint(value: int) -> bytes:
    length = value.bit_length() // 8 + 1
    return int(value).to_bytes(length, "big", signed=True)


def _decode_decimal(raw: bytes) -> Decimal:
    scale = struct.unpack(">i", raw[:4])[0]
    return Decimal(_decode_varint(raw[4:])).scaleb(-scale)


def _encode_decimal(value: Any) -> bytes:
    sign, digits, exponent = Decimal(value).as_tuple()
    if not isinstance(exponent, int):
        msg = f"Cannot encode non-finite decimal {value!r}"
        raise ValueError(msg)
    unscaled = int("".join(map(str, digits)) or "0")
    if sign:
        unscaled = -unscaled
    return struct.pack(">i", -exponent) + _encode_varint(unscaled)


def _decode_boolean(raw: bytes) -> bool:
    return raw != b"\x00"


def _encode_boolean(value: Any) -> bytes:
    return b"\x01" if value else b"\x00"


def _decode_timestamp(raw: bytes) -> datetime.datetime:
    return _EPOCH + struct.unpack(">q", raw)[0] * _ONE_MS


def _encode_timestamp(value: Any) -> bytes:
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        value = (value - _EPOCH) // _ONE_MS
    return struct.pack(">q", value)


def _encode_text(value: Any) -> bytes:
    return str(value).encode("utf-8")


def _encode_ascii(value: Any) -> bytes:
    return str(value).encode("ascii")


def _encode_blob(value: Any) -> bytes:
    return bytes(value)


def _encode_uuid(value: Any) -> bytes:
    return (value if isinstance(value, UUID) else UUID(str(value))).bytes


def _encode_inet(value: Any) -> bytes:
    return ip_address(value).packed


ASCII: Final = _register(DataType("ascii", lambda raw: raw.decode("ascii"), _encode_ascii))
TEXT: Final = _register(DataType("text", lambda raw: raw.decode("utf-8"), _encode_text))
VARCHAR: Final = _register(DataType("varchar", lambda raw: raw.decode("utf-8"), _encode_text))
INT: Final = _register(DataType("int", *_fixed(">i")))
BIGINT: Final = _register(DataType("bigint", *_fixed(">q")))
COUNTER: Final = _register(DataType("counter", *_fixed(">q")))
SMALLINT: Final = _register(DataType("smallint", *_fixed(">h")))
TINYINT: Final = _register(DataType("tinyint", *_fixed(">b")))
FLOAT: Final = _register(DataType("float", *_fixed(">f"), _render_float))
DOUBLE: Final = _register(DataType("double", *_fixed(">d")))
VARINT: Final = _register(DataType("varint", _decode_varint, _encode_varint))
DECIMAL: Final = _register(DataType("decimal", _decode_decimal, _encode_decimal))
BOOLEAN: Final = _register(
    DataType("boolean", _decode_boolean, _encode_boolean, lambda value: "true" if value else "false")
)
BLOB: Final = _register(DataType("blob", bytes, _encode_blob, lambda value: "0x" + value.hex()))
UUID_TYPE: Final = _register(DataType("uuid", lambda raw: UUID(bytes=raw), _encode_uuid))
TIMEUUID: Final = _register(DataType("timeuuid", lambda raw: UUID(bytes=raw), _encode_uuid))
TIMESTAMP: Final = _register(
    DataType("timestamp", _decode_timestamp, _encode_timestamp, lambda value: value.isoformat(timespec="milliseconds"))
)
INET: Final = _register(DataType("inet", ip_address, _encode_inet))


def all_primitive_types() -> "tuple[DataType, ...]":
    """Return every registered primitive type in registration order."""
    return tuple(_REGISTRY.values())
