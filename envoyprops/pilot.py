"""Node metadata properties set by the mesh control plane."""

from __future__ import annotations

from .host import (
    get_property_float64,
    get_property_string,
    get_property_string_map,
    get_property_string_slice,
)
from .types import IstioTrafficInterceptionMode, parse_istio_traffic_interception_mode

_NODE_META = ("node", "metadata")

_ANNOTATIONS = _NODE_META + ("ANNOTATIONS",)
_APP_CONTAINERS = _NODE_META + ("APP_CONTAINERS",)
_CLUSTER_ID = _NODE_META + ("CLUSTER_ID",)
_ENVOY_PROMETHEUS_PORT = _NODE_META + ("ENVOY_PROMETHEUS_PORT",)
_ENVOY_STATUS_PORT = _NODE_META + ("ENVOY_STATUS_PORT",)
_INSTANCE_IPS = _NODE_META + ("INSTANCE_IPS",)
_INTERCEPTION_MODE = _NODE_META + ("INTERCEPTION_MODE",)
_ISTIO_PROXY_SHA = _NODE_META + ("ISTIO_PROXY_SHA",)
_ISTIO_VERSION = _NODE_META + ("ISTIO_VERSION",)
_LABELS = _NODE_META + ("LABELS",)
_MESH_ID = _NODE_META + ("MESH_ID",)
_NAME = _NODE_META + ("NAME",)
_NAMESPACE = _NODE_META + ("NAMESPACE",)
_NODE_NAME = _NODE_META + ("NODE_NAME",)
_OWNER = _NODE_META + ("OWNER",)
_PILOT_SAN = _NODE_META + ("PILOT_SAN",)
_POD_PORTS = _NODE_META + ("POD_PORTS",)
_SERVICE_ACCOUNT = _NODE_META + ("SERVICE_ACCOUNT",)
_WORKLOAD_NAME = _NODE_META + ("WORKLOAD_NAME",)


def get_node_meta_annotations() -> dict[str, str]:
    """Annotations of the node."""
    return get_property_string_map(_ANNOTATIONS)


def get_node_meta_app_containers() -> str:
    """App containers of the node."""
    return get_property_string(_APP_CONTAINERS)


def get_node_meta_cluster_id() -> str:
    """ID of the cluster the node belongs to."""
    return get_property_string(_CLUSTER_ID)


def get_node_meta_envoy_prometheus_port() -> float:
    """Prometheus port of the proxy."""
    return get_property_float64(_ENVOY_PROMETHEUS_PORT)


def get_node_meta_envoy_status_port() -> float:
    """Status port of the proxy."""
    return get_property_float64(_ENVOY_STATUS_PORT)


def get_node_meta_instance_ips() -> str:
    """Instance IPs of the node."""
    return get_property_string(_INSTANCE_IPS)


def get_node_meta_interception_mode() -> IstioTrafficInterceptionMode:
    """Traffic interception mode; an unknown mode raises ValueError."""
    return parse_istio_traffic_interception_mode(get_property_string(_INTERCEPTION_MODE))


def get_node_meta_istio_proxy_sha() -> str:
    """SHA of the mesh proxy build."""
    return get_property_string(_ISTIO_PROXY_SHA)


def get_node_meta_istio_version() -> str:
    """Mesh version of the node."""
    return get_property_string(_ISTIO_VERSION)


def get_node_meta_labels() -> dict[str, str]:
    """Labels of the node."""
    return get_property_string_map(_LABELS)


def get_node_meta_mesh_id() -> str:
    """Mesh ID of the node."""
    return get_property_string(_MESH_ID)


def get_node_meta_name() -> str:
    """Name of the node."""
    return get_property_string(_NAME)


def get_node_meta_namespace() -> str:
    """Namespace of the node."""
    return get_property_string(_NAMESPACE)


def get_node_meta_node_name() -> str:
    """Node name of the node."""
    return get_property_string(_NODE_NAME)


def get_node_meta_owner() -> str:
    """Opaque owner of the workload instance."""
    return get_property_string(_OWNER)


def get_node_meta_pilot_san() -> list[str]:
    """Subject alternate names of the node's xDS server."""
    return get_property_string_slice(_PILOT_SAN)


def get_node_meta_pod_ports() -> str:
    """Pod ports of the node, used to look up named ports."""
    return get_property_string(_POD_PORTS)


def get_node_meta_service_account() -> str:
    """Service account of the node."""
    return get_property_string(_SERVICE_ACCOUNT)


def get_node_meta_workload_name() -> str:
    """Workload name of the node."""
    return get_property_string(_WORKLOAD_NAME)