import math
import sys
from datetime import datetime, timezone

import pytest

from envoyprops.serialization import (
    deserialize_bool,
    deserialize_byte_slice_map,
    deserialize_byte_slice_slice,
    deserialize_float64,
    deserialize_proto_string_slice,
    deserialize_string_map,
    deserialize_string_slice,
    deserialize_timestamp,
    deserialize_uint64,
    serialize_bool,
    serialize_byte_slice_map,
    serialize_byte_slice_slice,
    serialize_float64,
    serialize_proto_string_slice,
    serialize_string_map,
    serialize_string_slice,
    serialize_timestamp,
    serialize_uint64,
)


@pytest.mark.parametrize("value, expected", [(True, b"\x01"), (False, b"\x00")])
def test_serialize_bool(value, expected):
    assert serialize_bool(value) == expected


@pytest.mark.parametrize("data, expected", [(b"\x01", True), (b"\x00", False), (b"", False)])
def test_deserialize_bool(data, expected):
    assert deserialize_bool(data) is expected


def test_deserialize_bool_rejects_long_input():
    with pytest.raises(ValueError, match="invalid byte slice length for boolean deserialization"):
        deserialize_bool(b"\x01\x00")


@pytest.mark.parametrize(
    "mapping",
    [
        {"key1": b"value1", "key2": b"value2"},
        {"hello": b"world", "foo": b"bar"},
        {},
    ],
)
def test_byte_slice_map_round_trip(mapping):
    assert deserialize_byte_slice_map(serialize_byte_slice_map(mapping)) == mapping


def test_empty_byte_slice_map_is_empty_bytes():
    assert serialize_byte_slice_map({}) == b""


@pytest.mark.parametrize(
    "slices",
    [
        [b"slice1", b"slice2"],
        [b"hello", b"world", b"foo", b"bar"],
        [],
    ],
)
def test_byte_slice_slice_round_trip(slices):
    assert deserialize_byte_slice_slice(serialize_byte_slice_slice(slices)) == slices


@pytest.mark.parametrize(
    "value", [123.456, 0.0, -987.654, math.pi, sys.float_info.max, 5e-324]
)
def test_float64_round_trip(value):
    assert deserialize_float64(serialize_float64(value)) == value


def test_float64_layout():
    assert serialize_float64(1.0) == b"\x00\x00\x00\x00\x00\x00\xf0\x3f"


@pytest.mark.parametrize(
    "strings",
    [
        ["hello", "world"],
        [
            "envoy.formatter.metadata",
            "envoy.formatter",
            "envoy.extensions.formatter.metadata.v3.Metadata",
        ],
        ["a", "ab", "abc", "abcd"],
        [],
        ["", "empty", ""],
    ],
)
def test_proto_string_slice_round_trip(strings):
    assert deserialize_proto_string_slice(serialize_proto_string_slice(strings)) == strings


def test_proto_string_slice_layout():
    assert serialize_proto_string_slice(["ab", "c"]) == b"\x00\x02ab\x00\x01c"


def test_proto_string_slice_rejects_long_string():
    with pytest.raises(ValueError, match="exceeds 255"):
        serialize_proto_string_slice(["x" * 256])


def test_proto_string_slice_truncated():
    with pytest.raises(ValueError):
        deserialize_proto_string_slice(b"\x00\x05ab")


@pytest.mark.parametrize(
    "mapping",
    [
        {"hello": "world", "foo": "bar"},
        {"key": "value"},
        {},
        {"empty": "", "": "empty"},
    ],
)
def test_string_map_round_trip(mapping):
    assert deserialize_string_map(serialize_string_map(mapping)) == mapping


def test_string_map_layout():
    expected = (
        b"\x01\x00\x00\x00"
        b"\x01\x00\x00\x00\x01\x00\x00\x00"
        b"k\x00v\x00"
    )
    assert serialize_string_map({"k": "v"}) == expected


def test_empty_string_map_is_zero_count():
    assert serialize_string_map({}) == b"\x00\x00\x00\x00"


def test_string_map_truncated():
    with pytest.raises(ValueError):
        deserialize_string_map(b"\x01\x00\x00\x00\x05\x00\x00\x00")


@pytest.mark.parametrize(
    "strings",
    [
        ["hello", "world", "foo", "bar"],
        ["key", "value"],
        [],
        ["", "empty", ""],
    ],
)
def test_string_slice_round_trip(strings):
    assert deserialize_string_slice(serialize_string_slice(strings)) == strings


def test_string_slice_layout():
    expected = b"\x01\x00\x00\x00" + b"\x02" + b"\x00" * 7 + b"ab\x00\x00"
    assert serialize_string_slice(["ab"]) == expected


def test_empty_string_slice_is_zero_count():
    assert serialize_string_slice([]) == b"\x00\x00\x00\x00"


@pytest.mark.parametrize(
    "timestamp",
    [
        datetime(2023, 10, 13, 11, 38, 1, 174733, tzinfo=timezone.utc),
        datetime(2020, 1, 1, tzinfo=timezone.utc),
        datetime(1990, 5, 15, 5, 5, 5, 5, tzinfo=timezone.utc),
    ],
)
def test_timestamp_round_trip(timestamp):
    assert deserialize_timestamp(serialize_timestamp(timestamp)) == timestamp


def test_timestamp_is_nanoseconds_since_epoch():
    data = serialize_timestamp(datetime(2020, 1, 1, tzinfo=timezone.utc))
    assert deserialize_uint64(data) == 1577836800000000000


def test_naive_timestamp_is_treated_as_utc():
    data = serialize_timestamp(datetime(2020, 1, 1))
    assert deserialize_timestamp(data) == datetime(2020, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [1234567890, 0, 9876543210, 18446744073709551615])
def test_uint64_round_trip(value):
    assert deserialize_uint64(serialize_uint64(value)) == value


def test_uint64_layout():
    assert serialize_uint64(1) == b"\x01" + b"\x00" * 7


@pytest.mark.parametrize("value", [-1, 2**64])
def test_uint64_out_of_range(value):
    with pytest.raises(ValueError):
        serialize_uint64(value)


def test_uint64_truncated():
    with pytest.raises(ValueError):
        deserialize_uint64(b"\x01\x02")