import pytest

from envoyprops import upstream
from envoyprops.host import PropertyHost, PropertyNotFoundError, use_host
from envoyprops.serialization import serialize_uint64

SUBJECT = "CN=example.com,OU=IT,O=example,L=San Francisco,ST=California,C=US"


def _host(properties):
    return use_host(PropertyHost(properties))


@pytest.mark.parametrize(
    "path, value, getter",
    [
        (("upstream", "address"), "127.0.0.1", upstream.get_upstream_address),
        (("upstream", "tls_version"), "TLSv1.3", upstream.get_upstream_tls_version),
        (("upstream", "subject_local_certificate"), SUBJECT,
         upstream.get_upstream_subject_local_certificate),
        (("upstream", "subject_peer_certificate"), SUBJECT,
         upstream.get_upstream_subject_peer_certificate),
        (("upstream", "dns_san_local_certificate"), "example.com",
         upstream.get_upstream_dns_san_local_certificate),
        (("upstream", "dns_san_peer_certificate"), "example.com",
         upstream.get_upstream_dns_san_peer_certificate),
        (("upstream", "uri_san_local_certificate"), "example.com",
         upstream.get_upstream_uri_san_local_certificate),
        (("upstream", "uri_san_peer_certificate"), "example.com",
         upstream.get_upstream_uri_san_peer_certificate),
        (("upstream", "sha256_peer_certificate_digest"),
         "b714f3d6f83efc2fddf80b8feda3e3b21b3e27b5",
         upstream.get_upstream_sha256_peer_certificate_digest),
        (("upstream", "local_address"), "192.168.1.1", upstream.get_upstream_local_address),
        (("upstream", "transport_failure_reason"), "connection closed",
         upstream.get_upstream_transport_failure_reason),
    ],
)
def test_string_properties(path, value, getter):
    with _host({path: value.encode()}):
        assert getter() == value


def test_get_upstream_port():
    with _host({("upstream", "port"): serialize_uint64(8080)}):
        assert upstream.get_upstream_port() == 8080


def test_missing_upstream_port_raises():
    with _host({}):
        with pytest.raises(PropertyNotFoundError):
            upstream.get_upstream_port()