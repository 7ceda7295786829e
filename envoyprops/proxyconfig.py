"""Proxy configuration properties published in the node metadata."""

from __future__ import annotations

from .host import (
    PropertyNotFoundError,
    get_property_bool,
    get_property_float64,
    get_property_string,
    get_property_string_slice,
)
from .types import IstioProxyStatsMatcher

_PROXY_CONFIG = ("node", "metadata", "PROXY_CONFIG")

_BINARY_PATH = _PROXY_CONFIG + ("binaryPath",)
_CONCURRENCY = _PROXY_CONFIG + ("concurrency",)
_CONFIG_PATH = _PROXY_CONFIG + ("configPath",)
_CONTROL_PLANE_AUTH_POLICY = _PROXY_CONFIG + ("controlPlaneAuthPolicy",)
_DISCOVERY_ADDRESS = _PROXY_CONFIG + ("discoveryAddress",)
_DRAIN_DURATION = _PROXY_CONFIG + ("drainDuration",)
_EXTRA_STAT_TAGS = _PROXY_CONFIG + ("extraStatTags",)
_HOLD_APPLICATION_UNTIL_PROXY_STARTS = _PROXY_CONFIG + ("holdApplicationUntilProxyStarts",)
_PROXY_ADMIN_PORT = _PROXY_CONFIG + ("proxyAdminPort",)
_STATS_INCLUSION_PREFIXES = _PROXY_CONFIG + ("proxyStatsMatcher", "inclusionPrefixes")
_STATS_INCLUSION_REGEXPS = _PROXY_CONFIG + ("proxyStatsMatcher", "inclusionRegexps")
_STATS_INCLUSION_SUFFIXES = _PROXY_CONFIG + ("proxyStatsMatcher", "inclusionSuffixes")
_SERVICE_CLUSTER = _PROXY_CONFIG + ("serviceCluster",)
_STAT_NAME_LENGTH = _PROXY_CONFIG + ("statNameLength",)
_STATUS_PORT = _PROXY_CONFIG + ("statusPort",)
_TERMINATION_DRAIN_DURATION = _PROXY_CONFIG + ("terminationDrainDuration",)
_TRACING_DATADOG_ADDRESS = _PROXY_CONFIG + ("tracing", "datadog", "address")
_TRACING_OPENCENSUS_AGENT_ADDRESS = _PROXY_CONFIG + ("tracing", "opencensusagent", "address")
_TRACING_ZIPKIN_ADDRESS = _PROXY_CONFIG + ("tracing", "zipkin", "address")


def get_node_meta_proxy_config_binary_path() -> str:
    """Path to the proxy binary."""
    return get_property_string(_BINARY_PATH)


def get_node_meta_proxy_config_concurrency() -> float:
    """Number of worker threads the proxy runs."""
    return get_property_float64(_CONCURRENCY)


def get_node_meta_proxy_config_config_path() -> str:
    """Directory where the generated proxy configuration is stored."""
    return get_property_string(_CONFIG_PATH)


def get_node_proxy_config_control_plane_auth_policy() -> str:
    """How the proxy authenticates to the control plane."""
    return get_property_string(_CONTROL_PLANE_AUTH_POLICY)


def get_node_proxy_config_discovery_address() -> str:
    """Address of the discovery service."""
    return get_property_string(_DISCOVERY_ADDRESS)


def get_node_proxy_config_drain_duration() -> str:
    """Time the proxy drains connections during a hot restart."""
    return get_property_string(_DRAIN_DURATION)


def get_node_proxy_config_extra_stat_tags() -> list[str]:
    """Extra stat tags extracted from in-proxy telemetry."""
    return get_property_string_slice(_EXTRA_STAT_TAGS)


def get_node_proxy_config_hold_application_until_proxy_starts() -> bool:
    """Whether application start is delayed until the proxy is ready."""
    return get_property_bool(_HOLD_APPLICATION_UNTIL_PROXY_STARTS)


def get_node_proxy_config_proxy_admin_port() -> float:
    """Admin port of the proxy."""
    return get_property_float64(_PROXY_ADMIN_PORT)


def get_node_proxy_config_proxy_stats_matcher() -> IstioProxyStatsMatcher:
    """Stats matcher; raises LookupError only if no component is available."""
    matcher = IstioProxyStatsMatcher()
    found = 0
    for attribute, path in (
        ("inclusion_prefixes", _STATS_INCLUSION_PREFIXES),
        ("inclusion_regexps", _STATS_INCLUSION_REGEXPS),
        ("inclusion_suffixes", _STATS_INCLUSION_SUFFIXES),
    ):
        try:
            setattr(matcher, attribute, get_property_string_slice(path))
        except (PropertyNotFoundError, ValueError):
            continue
        found += 1
    if found == 0:
        raise LookupError("failed to fetch any components of IstioProxyStatsMatcher")
    return matcher


def get_node_proxy_config_service_cluster() -> str:
    """Service cluster name shared by all proxy instances."""
    return get_property_string(_SERVICE_CLUSTER)


def get_node_proxy_config_stat_name_length() -> float:
    """Maximum length of the name field of stats."""
    return get_property_float64(_STAT_NAME_LENGTH)


def get_node_proxy_config_status_port() -> float:
    """Port the agent listens on for administrative commands."""
    return get_property_float64(_STATUS_PORT)


def get_node_proxy_config_termination_drain_duration() -> str:
    """Time allowed for connections to complete on proxy shutdown."""
    return get_property_string(_TERMINATION_DRAIN_DURATION)


def get_node_proxy_config_tracing_datadog_address() -> str:
    """Address of the Datadog tracing service."""
    return get_property_string(_TRACING_DATADOG_ADDRESS)


def get_node_proxy_config_tracing_open_census_agent_address() -> str:
    """gRPC address of the OpenCensus agent."""
    return get_property_string(_TRACING_OPENCENSUS_AGENT_ADDRESS)


def get_node_proxy_config_tracing_zipkin_address() -> str:
    """Address of the Zipkin service."""
    return get_property_string(_TRACING_ZIPKIN_ADDRESS)