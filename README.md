# envoyprops

Typed accessors for the properties (attributes) that an Envoy or Istio proxy
exposes to a plugin, together with the binary encodings those property values
use.

Properties are read from a `PropertyHost`, an in-memory store that maps
property paths (sequences of strings) to raw bytes. `use_host` is a context
manager that makes a host the active one; every accessor reads from the active
host and decodes the value into a Python type: `str`, `int`, `float`, `bool`,
`datetime`, `dict`, `list`, or one of the dataclasses and enums in
`envoyprops.types`.

## Installation

```
pip install envoyprops
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "envoyprops[test]"
pytest
```

## Example

```python
from envoyprops.host import PropertyHost, use_host
from envoyprops.serialization import serialize_uint64, serialize_string_map
from envoyprops.connection import get_downstream_remote_address, get_downstream_remote_port
from envoyprops.request import get_request_headers

host = PropertyHost({
    ("source", "address"): b"10.244.0.1:63649",
    ("source", "port"): serialize_uint64(63649),
    ("request", "headers"): serialize_string_map({":method": "GET"}),
})

with use_host(host):
    get_downstream_remote_address()   # "10.244.0.1:63649"
    get_downstream_remote_port()      # 63649
    get_request_headers()             # {":method": "GET"}
```

`PropertyHost.set_property(path, value)` adds or replaces a value after the
host is created, and `PropertyHost.get_property(path)` returns the raw bytes.

## Errors

- A missing property raises `envoyprops.host.PropertyNotFoundError`, a
  subclass of `LookupError`.
- Calling an accessor when no host is active raises `RuntimeError`.
- `get_node_meta_interception_mode()` and
  `parse_istio_traffic_interception_mode()` raise `ValueError` for an unknown
  mode name.
- `get_node_locality()` and `get_node_proxy_config_proxy_stats_matcher()`
  return whatever parts are present and raise `LookupError` only when none is.
- The filter metadata accessors (`get_cluster_metadata()`,
  `get_xds_route_metadata()` and the like) never raise for missing parts;
  they return an `IstioFilterMetadata` with defaults left in place.
- Decoders raise `ValueError` on truncated data, and `deserialize_bool`
  raises it for input longer than one byte.

## Modules

- `envoyprops.serialization`: `serialize_*` / `deserialize_*` pairs for bool,
  uint64, float64, timestamp (nanoseconds since the epoch, decoded to a UTC
  `datetime` with microsecond precision), string list, string map, byte-string
  list, byte-string map, and protobuf-style string list.
- `envoyprops.types`: the enums `EnvoyTrafficDirection` (unknown values map to
  `UNSPECIFIED`) and `IstioTrafficInterceptionMode` (unknown values map to
  `REDIRECT`), `parse_istio_traffic_interception_mode`, and the dataclasses
  `EnvoyLocality`, `EnvoyExtension`, `IstioService`, `IstioFilterMetadata`
  and `IstioProxyStatsMatcher`.
- `envoyprops.host`: `PropertyHost`, `PropertyNotFoundError`, `use_host`,
  `get_property` and the typed readers `get_property_bool`,
  `get_property_uint64`, `get_property_float64`, `get_property_string`,
  `get_property_string_map`, `get_property_string_slice`,
  `get_property_byte_slice_map`, `get_property_byte_slice_slice`,
  `get_property_timestamp` and `get_istio_filter_metadata`.
- `envoyprops.connection`, `envoyprops.request`, `envoyprops.response`,
  `envoyprops.upstream` and `envoyprops.xds`: downstream connection, request,
  response, upstream connection and xDS configuration attributes.
- `envoyprops.wasm`: plugin and node attributes (plugin name, listener
  direction, node locality, extensions, client features, metadata).
- `envoyprops.pilot`: Istio node metadata (labels, annotations, interception
  mode, mesh ID and others).
- `envoyprops.proxyconfig`: Istio ProxyConfig values from the node metadata.

## What this package does not do

It does not connect to a running proxy or load into one. Property values come
only from a `PropertyHost` you fill yourself, so the package is suited to
decoding property bytes and to testing plugin logic against prepared values.
Which properties a real proxy provides depends on its version and
configuration.