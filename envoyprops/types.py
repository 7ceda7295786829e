"""Value types returned by the property accessors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class EnvoyTrafficDirection(IntEnum):
    """Direction of traffic relative to the local proxy."""

    UNSPECIFIED = 0
    INBOUND = 1
    OUTBOUND = 2

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int):
            return cls.UNSPECIFIED
        return None

    def __str__(self) -> str:
        return self.name


class IstioTrafficInterceptionMode(IntEnum):
    """How workload traffic is captured and sent to the proxy."""

    NONE = 0
    TPROXY = 1
    REDIRECT = 2

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int):
            return cls.REDIRECT
        return None

    def __str__(self) -> str:
        return self.name


def parse_istio_traffic_interception_mode(text: str) -> IstioTrafficInterceptionMode:
    """Parse an interception mode name; unknown names raise ValueError."""
    try:
        return IstioTrafficInterceptionMode[text]
    except KeyError:
        raise ValueError(f"invalid IstioTrafficInterceptionMode: {text}") from None


@dataclass
class EnvoyLocality:
    """Where the proxy or an upstream host runs."""

    region: str = ""
    zone: str = ""
    subzone: str = ""


@dataclass
class EnvoyExtension:
    """Name, category and type URLs of a proxy extension."""

    name: str = ""
    category: str = ""
    type_urls: list[str] = field(default_factory=list)


@dataclass
class IstioService:
    """Host, name and namespace of a mesh service."""

    host: str = ""
    name: str = ""
    namespace: str = ""


@dataclass
class IstioFilterMetadata:
    """Filter metadata: a config string and the services it applies to."""

    config: str = ""
    services: list[IstioService] = field(default_factory=list)


@dataclass
class IstioProxyStatsMatcher:
    """Stat name matchers; a field is None when it could not be fetched."""

    inclusion_prefixes: list[str] | None = None
    inclusion_regexps: list[str] | None = None
    inclusion_suffixes: list[str] | None = None