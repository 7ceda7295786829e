import pytest

from envoyprops import xds
from envoyprops.host import PropertyHost, PropertyNotFoundError, use_host
from envoyprops.serialization import serialize_byte_slice_slice, serialize_string_map
from envoyprops.types import IstioFilterMetadata, IstioService


def _host(properties):
    return use_host(PropertyHost(properties))


def test_get_xds_cluster_name():
    with _host({("xds", "cluster_name"): b"outbound|80||httpbin.org"}):
        assert xds.get_xds_cluster_name() == "outbound|80||httpbin.org"


def test_get_xds_route_name():
    with _host({("xds", "route_name"): b"routename"}):
        assert xds.get_xds_route_name() == "routename"


def test_get_xds_listener_filter_chain_name():
    with _host({("xds", "filter_chain_name"): b"mychain"}):
        assert xds.get_xds_listener_filter_chain_name() == "mychain"


def test_missing_cluster_name_raises():
    with _host({}):
        with pytest.raises(PropertyNotFoundError):
            xds.get_xds_cluster_name()


@pytest.mark.parametrize(
    "prefix, getter",
    [
        ("cluster_metadata", xds.get_xds_cluster_metadata),
        ("route_metadata", xds.get_xds_route_metadata),
        ("upstream_host_metadata", xds.get_xds_upstream_host_metadata),
    ],
)
def test_metadata_with_services(prefix, getter):
    base = ("xds", prefix, "filter_metadata", "istio")
    service = serialize_string_map(
        {"host": "httpbin.default.svc.cluster.local", "name": "httpbin", "namespace": "default"}
    )
    properties = {
        base + ("config",): b"/apis/networking.istio.io/v1/namespaces/default/x",
        base + ("services",): serialize_byte_slice_slice([service]),
    }
    with _host(properties):
        assert getter() == IstioFilterMetadata(
            config="/apis/networking.istio.io/v1/namespaces/default/x",
            services=[
                IstioService(
                    host="httpbin.default.svc.cluster.local",
                    name="httpbin",
                    namespace="default",
                )
            ],
        )


def test_metadata_missing_returns_empty():
    with _host({}):
        assert xds.get_xds_cluster_metadata() == IstioFilterMetadata()


def test_metadata_without_services_keeps_config():
    base = ("xds", "route_metadata", "filter_metadata", "istio")
    with _host({base + ("config",): b"cfg"}):
        assert xds.get_xds_route_metadata() == IstioFilterMetadata(config="cfg")