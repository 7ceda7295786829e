import pytest

from envoyprops.types import (
    EnvoyExtension,
    EnvoyTrafficDirection,
    IstioFilterMetadata,
    IstioProxyStatsMatcher,
    IstioTrafficInterceptionMode,
    parse_istio_traffic_interception_mode,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (EnvoyTrafficDirection.UNSPECIFIED, "UNSPECIFIED"),
        (EnvoyTrafficDirection.INBOUND, "INBOUND"),
        (EnvoyTrafficDirection.OUTBOUND, "OUTBOUND"),
        (EnvoyTrafficDirection(9999), "UNSPECIFIED"),
    ],
)
def test_envoy_traffic_direction_string(value, expected):
    assert str(value) == expected


@pytest.mark.parametrize("raw, expected", [(0, "UNSPECIFIED"), (1, "INBOUND"), (2, "OUTBOUND")])
def test_envoy_traffic_direction_from_int(raw, expected):
    assert EnvoyTrafficDirection(raw).name == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (IstioTrafficInterceptionMode.NONE, "NONE"),
        (IstioTrafficInterceptionMode.TPROXY, "TPROXY"),
        (IstioTrafficInterceptionMode.REDIRECT, "REDIRECT"),
        (IstioTrafficInterceptionMode(9999), "REDIRECT"),
    ],
)
def test_istio_traffic_interception_mode_string(value, expected):
    assert str(value) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("NONE", IstioTrafficInterceptionMode.NONE),
        ("TPROXY", IstioTrafficInterceptionMode.TPROXY),
        ("REDIRECT", IstioTrafficInterceptionMode.REDIRECT),
    ],
)
def test_parse_istio_traffic_interception_mode(text, expected):
    assert parse_istio_traffic_interception_mode(text) is expected


def test_parse_istio_traffic_interception_mode_invalid():
    with pytest.raises(ValueError, match="^invalid IstioTrafficInterceptionMode: INVALID$"):
        parse_istio_traffic_interception_mode("INVALID")


def test_dataclass_defaults():
    assert EnvoyExtension() == EnvoyExtension(name="", category="", type_urls=[])
    assert IstioFilterMetadata().services == []
    assert IstioProxyStatsMatcher().inclusion_prefixes is None