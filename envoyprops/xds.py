"""Properties describing the xDS configuration in effect."""

from __future__ import annotations

from .host import get_istio_filter_metadata, get_property_string
from .types import IstioFilterMetadata

_XDS_CLUSTER_NAME = ("xds", "cluster_name")
_XDS_CLUSTER_METADATA = ("xds", "cluster_metadata", "filter_metadata", "istio")
_XDS_ROUTE_NAME = ("xds", "route_name")
_XDS_ROUTE_METADATA = ("xds", "route_metadata", "filter_metadata", "istio")
_XDS_UPSTREAM_HOST_METADATA = ("xds", "upstream_host_metadata", "filter_metadata", "istio")
_XDS_LISTENER_FILTER_CHAIN_NAME = ("xds", "filter_chain_name")


def get_xds_cluster_name() -> str:
    """Upstream cluster name, e.g. ``outbound|80||httpbin.org``."""
    return get_property_string(_XDS_CLUSTER_NAME)


def get_xds_cluster_metadata() -> IstioFilterMetadata:
    """Upstream cluster metadata."""
    return get_istio_filter_metadata(_XDS_CLUSTER_METADATA)


def get_xds_route_name() -> str:
    """Route name, available on both request and response paths."""
    return get_property_string(_XDS_ROUTE_NAME)


def get_xds_route_metadata() -> IstioFilterMetadata:
    """Upstream route metadata."""
    return get_istio_filter_metadata(_XDS_ROUTE_METADATA)


def get_xds_upstream_host_metadata() -> IstioFilterMetadata:
    """Upstream host metadata."""
    return get_istio_filter_metadata(_XDS_UPSTREAM_HOST_METADATA)


def get_xds_listener_filter_chain_name() -> str:
    """Listener filter chain name."""
    return get_property_string(_XDS_LISTENER_FILTER_CHAIN_NAME)