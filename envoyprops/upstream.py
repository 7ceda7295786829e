"""Properties of the upstream connection."""

from __future__ import annotations

from .host import get_property_string, get_property_uint64

_UPSTREAM_ADDRESS = ("upstream", "address")
_UPSTREAM_PORT = ("upstream", "port")
_UPSTREAM_TLS_VERSION = ("upstream", "tls_version")
_UPSTREAM_SUBJECT_LOCAL_CERT = ("upstream", "subject_local_certificate")
_UPSTREAM_SUBJECT_PEER_CERT = ("upstream", "subject_peer_certificate")
_UPSTREAM_DNS_SAN_LOCAL_CERT = ("upstream", "dns_san_local_certificate")
_UPSTREAM_DNS_SAN_PEER_CERT = ("upstream", "dns_san_peer_certificate")
_UPSTREAM_URI_SAN_LOCAL_CERT = ("upstream", "uri_san_local_certificate")
_UPSTREAM_URI_SAN_PEER_CERT = ("upstream", "uri_san_peer_certificate")
_UPSTREAM_SHA256_PEER_CERT_DIGEST = ("upstream", "sha256_peer_certificate_digest")
_UPSTREAM_LOCAL_ADDRESS = ("upstream", "local_address")
_UPSTREAM_TRANSPORT_FAILURE_REASON = ("upstream", "transport_failure_reason")


def get_upstream_address() -> str:
    """Remote address of the upstream connection."""
    return get_property_string(_UPSTREAM_ADDRESS)


def get_upstream_port() -> int:
    """Remote port of the upstream connection."""
    return get_property_uint64(_UPSTREAM_PORT)


def get_upstream_tls_version() -> str:
    """TLS version of the upstream connection."""
    return get_property_string(_UPSTREAM_TLS_VERSION)


def get_upstream_subject_local_certificate() -> str:
    """Subject of the local certificate in the upstream TLS connection."""
    return get_property_string(_UPSTREAM_SUBJECT_LOCAL_CERT)


def get_upstream_subject_peer_certificate() -> str:
    """Subject of the peer certificate in the upstream TLS connection."""
    return get_property_string(_UPSTREAM_SUBJECT_PEER_CERT)


def get_upstream_dns_san_local_certificate() -> str:
    """First DNS SAN entry of the local certificate upstream."""
    return get_property_string(_UPSTREAM_DNS_SAN_LOCAL_CERT)


def get_upstream_dns_san_peer_certificate() -> str:
    """First DNS SAN entry of the peer certificate upstream."""
    return get_property_string(_UPSTREAM_DNS_SAN_PEER_CERT)


def get_upstream_uri_san_local_certificate() -> str:
    """First URI SAN entry of the local certificate upstream."""
    return get_property_string(_UPSTREAM_URI_SAN_LOCAL_CERT)


def get_upstream_uri_san_peer_certificate() -> str:
    """First URI SAN entry of the peer certificate upstream."""
    return get_property_string(_UPSTREAM_URI_SAN_PEER_CERT)


def get_upstream_sha256_peer_certificate_digest() -> str:
    """SHA256 digest of the upstream peer certificate."""
    return get_property_string(_UPSTREAM_SHA256_PEER_CERT_DIGEST)


def get_upstream_local_address() -> str:
    """Local address of the upstream connection."""
    return get_property_string(_UPSTREAM_LOCAL_ADDRESS)


def get_upstream_transport_failure_reason() -> str:
    """Reason the upstream transport failed."""
    return get_property_string(_UPSTREAM_TRANSPORT_FAILURE_REASON)