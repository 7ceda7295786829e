"""Access to properties exposed by the proxy host.

Availability of any property depends on the proxy's version and configuration,
so callers should check that the properties they rely on are present.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime

from .serialization import (
    deserialize_bool,
    deserialize_byte_slice_map,
    deserialize_byte_slice_slice,
    deserialize_float64,
    deserialize_string_map,
    deserialize_string_slice,
    deserialize_timestamp,
    deserialize_uint64,
)
from .types import IstioFilterMetadata, IstioService


class PropertyNotFoundError(LookupError):
    """Raised when the host has no value for a property path."""

    def __init__(self, path: Sequence[str]):
        self.path = tuple(path)
        super().__init__(f"property not found: {'.'.join(self.path)}")


class PropertyHost:
    """An in-memory store of encoded property values keyed by path."""

    def __init__(self, properties: Mapping[Sequence[str], bytes] | None = None):
        self._properties: dict[tuple[str, ...], bytes] = {}
        for path, value in (properties or {}).items():
            self.set_property(path, value)

    def get_property(self, path: Sequence[str]) -> bytes:
        """Return the encoded value at ``path``."""
        try:
            return self._properties[tuple(path)]
        except KeyError:
            raise PropertyNotFoundError(path) from None

    def set_property(self, path: Sequence[str], value: bytes) -> None:
        """Store an encoded value at ``path``."""
        self._properties[tuple(path)] = bytes(value)


_current_host: ContextVar[PropertyHost | None] = ContextVar("envoyprops_host", default=None)


@contextmanager
def use_host(host: PropertyHost) -> Iterator[PropertyHost]:
    """Make ``host`` the source of properties within the block."""
    token = _current_host.set(host)
    try:
        yield host
    finally:
        _current_host.reset(token)


def get_property(path: Sequence[str]) -> bytes:
    """Return the raw bytes of a property from the active host."""
    host = _current_host.get()
    if host is None:
        raise RuntimeError("no property host is active")
    return host.get_property(path)


def get_property_bool(path: Sequence[str]) -> bool:
    return deserialize_bool(get_property(path))


def get_property_byte_slice_map(path: Sequence[str]) -> dict[str, bytes]:
    return deserialize_byte_slice_map(get_property(path))


def get_property_byte_slice_slice(path: Sequence[str]) -> list[bytes]:
    return deserialize_byte_slice_slice(get_property(path))


def get_property_float64(path: Sequence[str]) -> float:
    return deserialize_float64(get_property(path))


def get_property_string(path: Sequence[str]) -> str:
    return get_property(path).decode()


def get_property_string_map(path: Sequence[str]) -> dict[str, str]:
    return deserialize_string_map(get_property(path))


def get_property_string_slice(path: Sequence[str]) -> list[str]:
    return deserialize_string_slice(get_property(path))


def get_property_timestamp(path: Sequence[str]) -> datetime:
    """Return a timestamp property as a UTC datetime."""
    return deserialize_timestamp(get_property(path))


def get_property_uint64(path: Sequence[str]) -> int:
    return deserialize_uint64(get_property(path))


def get_istio_filter_metadata(path: Sequence[str]) -> IstioFilterMetadata:
    """Read filter metadata under ``path``; missing parts leave defaults."""
    base = tuple(path)
    result = IstioFilterMetadata()
    try:
        result.config = get_property_string(base + ("config",))
    except PropertyNotFoundError:
        return result
    try:
        services = get_property_byte_slice_slice(base + ("services",))
    except PropertyNotFoundError:
        return result
    for raw in services:
        if not raw:
            continue
        fields = deserialize_string_map(raw)
        result.services.append(
            IstioService(
                host=fields.get("host", ""),
                name=fields.get("name", ""),
                namespace=fields.get("namespace", ""),
            )
        )
    return result