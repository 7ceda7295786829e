"""Properties of the plugin and the proxy node it runs in."""

from __future__ import annotations

from .host import (
    PropertyNotFoundError,
    get_istio_filter_metadata,
    get_property,
    get_property_byte_slice_slice,
    get_property_string,
    get_property_string_slice,
    get_property_uint64,
)
from .serialization import deserialize_proto_string_slice
from .types import EnvoyExtension, EnvoyLocality, EnvoyTrafficDirection, IstioFilterMetadata

_PLUGIN_NAME = ("plugin_name",)
_PLUGIN_ROOT_ID = ("plugin_root_id",)
_PLUGIN_VM_ID = ("plugin_vm_id",)
_CLUSTER_NAME = ("cluster_name",)
_ROUTE_NAME = ("route_name",)
_LISTENER_DIRECTION = ("listener_direction",)
_NODE_ID = ("node", "id")
_NODE_CLUSTER = ("node", "cluster")
_NODE_DYNAMIC_PARAMS = ("node", "dynamic_parameters", "params")
_NODE_LOCALITY_REGION = ("node", "locality", "region")
_NODE_LOCALITY_ZONE = ("node", "locality", "zone")
_NODE_LOCALITY_SUBZONE = ("node", "locality", "subzone")
_NODE_USER_AGENT_NAME = ("node", "user_agent_name")
_NODE_USER_AGENT_VERSION = ("node", "user_agent_version")
_NODE_USER_AGENT_BUILD_VERSION = ("node", "user_agent_build_version", "metadata")
_NODE_EXTENSIONS = ("node", "extensions")
_NODE_CLIENT_FEATURES = ("node", "client_features")
_NODE_LISTENING_ADDRESSES = ("node", "listening_addresses")
_CLUSTER_METADATA = ("node", "cluster_metadata", "filter_metadata", "istio")
_LISTENER_METADATA = ("node", "listener_metadata", "filter_metadata", "istio")
_ROUTE_METADATA = ("node", "route_metadata", "filter_metadata", "istio")
_UPSTREAM_HOST_METADATA = ("node", "upstream_host_metadata", "filter_metadata", "istio")


def get_plugin_name() -> str:
    """Name of the plugin."""
    return get_property_string(_PLUGIN_NAME)


def get_plugin_root_id() -> str:
    """Root ID of the plugin."""
    return get_property_string(_PLUGIN_ROOT_ID)


def get_plugin_vm_id() -> str:
    """VM ID of the plugin."""
    return get_property_string(_PLUGIN_VM_ID)


def get_cluster_name() -> str:
    """Upstream cluster name, e.g. ``outbound|80||httpbin.org``."""
    return get_property_string(_CLUSTER_NAME)


def get_route_name() -> str:
    """Route name; only available on the response path."""
    return get_property_string(_ROUTE_NAME)


def get_listener_direction() -> EnvoyTrafficDirection:
    """Direction of the listener."""
    return EnvoyTrafficDirection(get_property_uint64(_LISTENER_DIRECTION))


def get_node_id() -> str:
    """Opaque identifier of the proxy node."""
    return get_property_string(_NODE_ID)


def get_node_cluster() -> str:
    """Local service cluster name of the node."""
    return get_property_string(_NODE_CLUSTER)


def get_node_dynamic_params() -> str:
    """Dynamic parameters of the node."""
    return get_property_string(_NODE_DYNAMIC_PARAMS)


def get_node_locality() -> EnvoyLocality:
    """Locality of the node; raises LookupError only if no part is available."""
    result = EnvoyLocality()
    errors: list[str] = []
    for attribute, path in (
        ("region", _NODE_LOCALITY_REGION),
        ("zone", _NODE_LOCALITY_ZONE),
        ("subzone", _NODE_LOCALITY_SUBZONE),
    ):
        try:
            setattr(result, attribute, get_property_string(path))
        except PropertyNotFoundError as exc:
            errors.append(str(exc))
    if len(errors) == 3:
        raise LookupError("; ".join(errors))
    return result


def get_node_user_agent_name() -> str:
    """User agent name of the node, e.g. ``envoy``."""
    return get_property_string(_NODE_USER_AGENT_NAME)


def get_node_user_agent_version() -> str:
    """User agent version of the node."""
    return get_property_string(_NODE_USER_AGENT_VERSION)


def get_node_user_agent_build_version() -> str:
    """User agent build version of the node."""
    return get_property_string(_NODE_USER_AGENT_BUILD_VERSION)


def get_node_extensions() -> list[EnvoyExtension]:
    """Extensions known to the node."""
    extensions = []
    for raw in get_property_byte_slice_slice(_NODE_EXTENSIONS):
        fields = deserialize_proto_string_slice(raw)
        extension = EnvoyExtension()
        if len(fields) > 0:
            extension.name = fields[0]
        if len(fields) > 1:
            extension.category = fields[1]
        if len(fields) > 2:
            extension.type_urls = list(fields[2:])
        extensions.append(extension)
    return extensions


def get_node_client_features() -> list[str]:
    """Well-known client features of the node."""
    return deserialize_proto_string_slice(get_property(_NODE_CLIENT_FEATURES))


def get_node_listening_addresses() -> list[str]:
    """Listening addresses of the node."""
    return get_property_string_slice(_NODE_LISTENING_ADDRESSES)


def get_cluster_metadata() -> IstioFilterMetadata:
    """Cluster metadata."""
    return get_istio_filter_metadata(_CLUSTER_METADATA)


def get_listener_metadata() -> IstioFilterMetadata:
    """Listener metadata."""
    return get_istio_filter_metadata(_LISTENER_METADATA)


def get_route_metadata() -> IstioFilterMetadata:
    """Route metadata."""
    return get_istio_filter_metadata(_ROUTE_METADATA)


def get_upstream_host_metadata() -> IstioFilterMetadata:
    """Upstream host metadata."""
    return get_istio_filter_metadata(_UPSTREAM_HOST_METADATA)