"""Properties of the downstream connection."""

from __future__ import annotations

from .host import get_property_bool, get_property_string, get_property_uint64

_SOURCE_ADDRESS = ("source", "address")
_SOURCE_PORT = ("source", "port")
_DESTINATION_ADDRESS = ("destination", "address")
_DESTINATION_PORT = ("destination", "port")
_CONNECTION_ID = ("connection", "id")
_CONNECTION_MTLS = ("connection", "mtls")
_CONNECTION_REQUESTED_SERVER_NAME = ("connection", "requested_server_name")
_CONNECTION_TLS_VERSION = ("connection", "tls_version")
_CONNECTION_SUBJECT_LOCAL_CERT = ("connection", "subject_local_certificate")
_CONNECTION_SUBJECT_PEER_CERT = ("connection", "subject_peer_certificate")
_CONNECTION_DNS_SAN_LOCAL_CERT = ("connection", "dns_san_local_certificate")
_CONNECTION_DNS_SAN_PEER_CERT = ("connection", "dns_san_peer_certificate")
_CONNECTION_URI_SAN_LOCAL_CERT = ("connection", "uri_san_local_certificate")
_CONNECTION_URI_SAN_PEER_CERT = ("connection", "uri_san_peer_certificate")
_CONNECTION_SHA256_PEER_CERT_DIGEST = ("connection", "sha256_peer_certificate_digest")
_CONNECTION_TERMINATION_DETAILS = ("connection", "termination_details")


def get_downstream_remote_address() -> str:
    """Remote address of the downstream connection."""
    return get_property_string(_SOURCE_ADDRESS)


def get_downstream_remote_port() -> int:
    """Remote port of the downstream connection."""
    return get_property_uint64(_SOURCE_PORT)


def get_downstream_local_address() -> str:
    """Local address of the downstream connection."""
    return get_property_string(_DESTINATION_ADDRESS)


def get_downstream_local_port() -> int:
    """Local port of the downstream connection."""
    return get_property_uint64(_DESTINATION_PORT)


def get_downstream_connection_id() -> int:
    """Connection ID of the downstream connection."""
    return get_property_uint64(_CONNECTION_ID)


def is_downstream_connection_tls() -> bool:
    """Whether the downstream connection uses TLS."""
    return get_property_bool(_CONNECTION_MTLS)


def get_downstream_requested_server_name() -> str:
    """Requested server name of the downstream connection."""
    return get_property_string(_CONNECTION_REQUESTED_SERVER_NAME)


def get_downstream_tls_version() -> str:
    """TLS version of the downstream connection."""
    return get_property_string(_CONNECTION_TLS_VERSION)


def get_downstream_subject_local_certificate() -> str:
    """Subject of the local certificate in the downstream TLS connection."""
    return get_property_string(_CONNECTION_SUBJECT_LOCAL_CERT)


def get_downstream_subject_peer_certificate() -> str:
    """Subject of the peer certificate in the downstream TLS connection."""
    return get_property_string(_CONNECTION_SUBJECT_PEER_CERT)


def get_downstream_dns_san_local_certificate() -> str:
    """First DNS SAN entry of the local certificate downstream."""
    return get_property_string(_CONNECTION_DNS_SAN_LOCAL_CERT)


def get_downstream_dns_san_peer_certificate() -> str:
    """First DNS SAN entry of the peer certificate downstream."""
    return get_property_string(_CONNECTION_DNS_SAN_PEER_CERT)


def get_downstream_uri_san_local_certificate() -> str:
    """First URI SAN entry of the local certificate downstream."""
    return get_property_string(_CONNECTION_URI_SAN_LOCAL_CERT)


def get_downstream_uri_san_peer_certificate() -> str:
    """First URI SAN entry of the peer certificate downstream."""
    return get_property_string(_CONNECTION_URI_SAN_PEER_CERT)


def get_downstream_sha256_peer_certificate_digest() -> str:
    """SHA256 digest of the downstream peer certificate."""
    return get_property_string(_CONNECTION_SHA256_PEER_CERT_DIGEST)


def get_downstream_termination_details() -> str:
    """Internal termination details of the connection."""
    return get_property_string(_CONNECTION_TERMINATION_DETAILS)