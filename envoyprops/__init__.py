"""Typed accessors and binary codecs for Envoy and Istio host properties."""

__version__ = "0.1.0"
__all__ = [
    "connection",
    "host",
    "pilot",
    "proxyconfig",
    "request",
    "response",
    "serialization",
    "types",
    "upstream",
    "wasm",
    "xds",
]