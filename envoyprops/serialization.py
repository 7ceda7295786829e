"""Binary encodings used by the proxy host for property values."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator, Mapping, Sequence
from datetime import datetime, timedelta, timezone

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_I64 = struct.Struct("<q")
_F64 = struct.Struct("<d")
_BOOL = struct.Struct("<?")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MAX_U64 = 2**64 - 1


def _unpack(fmt: struct.Struct, data: bytes, offset: int = 0):
    end = offset + fmt.size
    if end > len(data):
        raise ValueError(f"truncated data: need {end} bytes, got {len(data)}")
    return fmt.unpack_from(data, offset)[0]


def _take(data: bytes, start: int, length: int) -> bytes:
    end = start + length
    if end > len(data):
        raise ValueError(f"truncated data: need {end} bytes, got {len(data)}")
    return bytes(data[start:end])


def _encode_pairs(pairs: list[tuple[bytes, bytes]]) -> bytes:
    sizes = bytearray(_U32.pack(len(pairs)))
    payload = bytearray()
    for key, value in pairs:
        sizes += _U32.pack(len(key))
        sizes += _U32.pack(len(value))
        payload += key + b"\x00" + value + b"\x00"
    return bytes(sizes + payload)


def _decode_pairs(data: bytes) -> Iterator[tuple[bytes, bytes]]:
    count = _unpack(_U32, data)
    size_index = 4
    data_index = 4 + 8 * count
    for _ in range(count):
        key_size = _unpack(_U32, data, size_index)
        value_size = _unpack(_U32, data, size_index + 4)
        size_index += 8
        key = _take(data, data_index, key_size)
        data_index += key_size + 1
        value = _take(data, data_index, value_size)
        data_index += value_size + 1
        yield key, value


def _encode_slices(items: Iterable[bytes]) -> bytes:
    items = list(items)
    header = bytearray(_U32.pack(len(items)))
    payload = bytearray()
    for item in items:
        header += _U64.pack(len(item))
        payload += item + b"\x00\x00"
    return bytes(header + payload)


def _decode_slices(data: bytes) -> list[bytes]:
    count = _unpack(_U32, data)
    index = 4
    data_index = 4 + 8 * count
    result = []
    for _ in range(count):
        length = _unpack(_U64, data, index)
        index += 8
        result.append(_take(data, data_index, length))
        data_index += length + 2
    return result


def serialize_bool(value: bool) -> bytes:
    """Encode a boolean as a single byte."""
    return _BOOL.pack(bool(value))


def deserialize_bool(data: bytes) -> bool:
    """Decode a boolean; empty input means False."""
    if len(data) == 0:
        return False
    if len(data) != 1:
        raise ValueError("invalid byte slice length for boolean deserialization")
    return data[0] != 0


def serialize_byte_slice_map(mapping: Mapping[str, bytes]) -> bytes:
    """Encode a map of string keys to raw byte values."""
    if not mapping:
        return b""
    return _encode_pairs([(key.encode(), bytes(value)) for key, value in mapping.items()])


def deserialize_byte_slice_map(data: bytes) -> dict[str, bytes]:
    """Decode a map of string keys to raw byte values."""
    if len(data) == 0:
        return {}
    return {key.decode(): value for key, value in _decode_pairs(data)}


def serialize_byte_slice_slice(slices: Sequence[bytes]) -> bytes:
    """Encode a list of byte strings, each prefixed by its length."""
    if not slices:
        return b""
    return _encode_slices(bytes(item) for item in slices)


def deserialize_byte_slice_slice(data: bytes) -> list[bytes]:
    """Decode a list of byte strings."""
    if len(data) == 0:
        return []
    return _decode_slices(data)


def serialize_float64(value: float) -> bytes:
    """Encode a float as 8 little-endian bytes."""
    return _F64.pack(value)


def deserialize_float64(data: bytes) -> float:
    """Decode a float from 8 little-endian bytes."""
    return _unpack(_F64, data)


def serialize_proto_string_slice(strings: Sequence[str]) -> bytes:
    """Encode strings as protobuf-like length-delimited fields."""
    out = bytearray()
    for text in strings:
        encoded = text.encode()
        if len(encoded) > 255:
            raise ValueError("string length exceeds 255 characters")
        out += bytes((0x00, len(encoded))) + encoded
    return bytes(out)


def deserialize_proto_string_slice(data: bytes) -> list[str]:
    """Decode protobuf-like length-delimited string fields."""
    result = []
    index = 0
    while index < len(data):
        index += 1
        if index >= len(data):
            raise ValueError("truncated data: missing string length")
        length = data[index]
        index += 1
        result.append(_take(data, index, length).decode())
        index += length
    return result


def serialize_string_map(mapping: Mapping[str, str]) -> bytes:
    """Encode a map of strings; an empty map is four zero bytes."""
    if not mapping:
        return bytes(4)
    return _encode_pairs([(key.encode(), value.encode()) for key, value in mapping.items()])


def deserialize_string_map(data: bytes) -> dict[str, str]:
    """Decode a map of strings."""
    return {key.decode(): value.decode() for key, value in _decode_pairs(data)}


def serialize_string_slice(strings: Sequence[str]) -> bytes:
    """Encode a list of strings; an empty list is four zero bytes."""
    if not strings:
        return bytes(4)
    return _encode_slices(text.encode() for text in strings)


def deserialize_string_slice(data: bytes) -> list[str]:
    """Decode a list of strings."""
    return [item.decode() for item in _decode_slices(data)]


def serialize_timestamp(timestamp: datetime) -> bytes:
    """Encode a datetime as nanoseconds since the Unix epoch; naive values are UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    nanos = (timestamp - _EPOCH) // timedelta(microseconds=1) * 1000
    return _I64.pack(nanos)


def deserialize_timestamp(data: bytes) -> datetime:
    """Decode nanoseconds since the Unix epoch into a UTC datetime."""
    nanos = _unpack(_I64, data)
    return _EPOCH + timedelta(microseconds=nanos // 1000)


def serialize_uint64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as 8 little-endian bytes."""
    if not 0 <= value <= _MAX_U64:
        raise ValueError(f"value out of range for uint64: {value}")
    return _U64.pack(value)


def deserialize_uint64(data: bytes) -> int:
    """Decode an unsigned 64-bit integer from 8 little-endian bytes."""
    return _unpack(_U64, data)