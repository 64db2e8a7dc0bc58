"""JSON encoding used by the structured log formatter."""

from typing import Any, Literal, overload

import msgspec

from querylog.exceptions import SerializationError

__all__ = ("decode_json", "encode_json")


def _enc_hook(value: Any) -> Any:
    # Decimal, UUID, datetime, enums and bytes are native to msgspec
    if isinstance(value, BaseException):
        return repr(value)
    return str(value)


_encoder = msgspec.json.Encoder(enc_hook=_enc_hook)
_decoder = msgspec.json.Decoder()


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> "str | bytes":
    """Encode data to JSON.

    Args:
        data: Data to encode.
        as_bytes: Return raw bytes instead of a decoded string.

    Raises:
        SerializationError: If msgspec cannot encode the value.

    Returns:
        JSON representation of ``data``.
    """
    try:
        encoded = _encoder.encode(data)
    except (msgspec.EncodeError, TypeError, ValueError) as exc:
        msg = f"Unable to encode {type(data).__name__} as JSON"
        raise SerializationError(msg) from exc
    if as_bytes:
        return encoded
    return encoded.decode("utf-8")


def decode_json(data: "str | bytes") -> Any:
    """Decode JSON text into Python objects.

    Raises:
        SerializationError: If the payload is not valid JSON.
    """
    try:
        return _decoder.decode(data)
    except msgspec.DecodeError as exc:
        msg = "Unable to decode JSON payload"
        raise SerializationError(msg) from exc
