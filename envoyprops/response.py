"""Properties of the current HTTP response."""

from __future__ import annotations

from .host import get_property_string, get_property_string_map, get_property_uint64

_RESPONSE_CODE = ("response", "code")
_RESPONSE_CODE_DETAILS = ("response", "code_details")
_RESPONSE_FLAGS = ("response", "flags")
_RESPONSE_GRPC_STATUS_CODE = ("response", "grpc_status")
_RESPONSE_HEADERS = ("response", "headers")
_RESPONSE_TRAILERS = ("response", "trailers")
_RESPONSE_SIZE = ("response", "size")
_RESPONSE_TOTAL_SIZE = ("response", "total_size")


def get_response_code() -> int:
    """HTTP status code of the response."""
    return get_property_uint64(_RESPONSE_CODE)


def get_response_code_details() -> str:
    """Internal response code details."""
    return get_property_string(_RESPONSE_CODE_DETAILS)


def get_response_flags() -> int:
    """Additional response details encoded as a bit-vector."""
    return get_property_uint64(_RESPONSE_FLAGS)


def get_response_grpc_status_code() -> int:
    """gRPC status code of the response."""
    return get_property_uint64(_RESPONSE_GRPC_STATUS_CODE)


def get_response_headers() -> dict[str, str]:
    """All response headers keyed by lower-cased name."""
    return get_property_string_map(_RESPONSE_HEADERS)


def get_response_trailers() -> dict[str, str]:
    """All response trailers keyed by lower-cased name."""
    return get_property_string_map(_RESPONSE_TRAILERS)


def get_response_size() -> int:
    """Size of the response body."""
    return get_property_uint64(_RESPONSE_SIZE)


def get_response_total_size() -> int:
    """Total size of the response including headers and trailers."""
    return get_property_uint64(_RESPONSE_TOTAL_SIZE)