"""Properties of the current HTTP request."""

from __future__ import annotations

from datetime import datetime

from .host import (
    get_property_string,
    get_property_string_map,
    get_property_timestamp,
    get_property_uint64,
)

_REQUEST_PATH = ("request", "path")
_REQUEST_URL_PATH = ("request", "url_path")
_REQUEST_HOST = ("request", "host")
_REQUEST_SCHEME = ("request", "scheme")
_REQUEST_METHOD = ("request", "method")
_REQUEST_HEADERS = ("request", "headers")
_REQUEST_REFERER = ("request", "referer")
_REQUEST_USER_AGENT = ("request", "useragent")
_REQUEST_TIME = ("request", "time")
_REQUEST_ID = ("request", "id")
_REQUEST_PROTOCOL = ("request", "protocol")
_REQUEST_QUERY = ("request", "query")
_REQUEST_DURATION = ("request", "duration")
_REQUEST_SIZE = ("request", "size")
_REQUEST_TOTAL_SIZE = ("request", "total_size")


def get_request_path() -> str:
    """Path portion of the URL."""
    return get_property_string(_REQUEST_PATH)


def get_request_url_path() -> str:
    """Path portion of the URL without the query string."""
    return get_property_string(_REQUEST_URL_PATH)


def get_request_host() -> str:
    """Host portion of the URL."""
    return get_property_string(_REQUEST_HOST)


def get_request_scheme() -> str:
    """Scheme portion of the URL, e.g. ``http``."""
    return get_property_string(_REQUEST_SCHEME)


def get_request_method() -> str:
    """Request method, e.g. ``GET``."""
    return get_property_string(_REQUEST_METHOD)


def get_request_headers() -> dict[str, str]:
    """All request headers keyed by lower-cased name."""
    return get_property_string_map(_REQUEST_HEADERS)


def get_request_referer() -> str:
    """The referer request header."""
    return get_property_string(_REQUEST_REFERER)


def get_request_user_agent() -> str:
    """The user agent request header."""
    return get_property_string(_REQUEST_USER_AGENT)


def get_request_time() -> datetime:
    """UTC time of the first byte received."""
    return get_property_timestamp(_REQUEST_TIME)


def get_request_id() -> str:
    """Request ID from the x-request-id header."""
    return get_property_string(_REQUEST_ID)


def get_request_protocol() -> str:
    """Request protocol, e.g. ``HTTP/1.1``."""
    return get_property_string(_REQUEST_PROTOCOL)


def get_request_query() -> str:
    """Query portion of the URL."""
    return get_property_string(_REQUEST_QUERY)


def get_request_duration() -> int:
    """Total duration of the request in nanoseconds."""
    return get_property_uint64(_REQUEST_DURATION)


def get_request_size() -> int:
    """Size of the request body."""
    return get_property_uint64(_REQUEST_SIZE)


def get_request_total_size() -> int:
    """Total size of the request including headers."""
    return get_property_uint64(_REQUEST_TOTAL_SIZE)