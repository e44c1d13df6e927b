"""Semantic aliases for Gateway API scalar fields.

Each alias documents the syntax the upstream API validates server-side.
None of it is enforced here: a syntactically valid document with, say, an
uppercase hostname decodes fine and is rejected later by the cluster.
"""

from __future__ import annotations

GATEWAY_API_GROUP = "gateway.networking.k8s.io"
# The empty group is the core Kubernetes API group.
CORE_GROUP = ""

# Fully qualified domain name (RFC 1123) without IPs. May start with a single
# wildcard label, e.g. "*.example.com".
type Hostname = str

# Like Hostname, but wildcards are not allowed.
type PreciseHostname = str

# Name of a Kubernetes object (RFC 1123 subdomain/label or RFC 1035 label).
type ObjectName = str

# RFC 1123 label, e.g. "example". "example.com" is invalid.
type Namespace = str

# Empty string (core group) or an RFC 1123 subdomain, e.g. "networking.k8s.io".
type Group = str

# Kubernetes kind, e.g. "Service" or "HTTPRoute". "/" is invalid.
type Kind = str

# Name of a section within a resource, e.g. a Gateway listener name.
type SectionName = str

# Domain-prefixed path naming a controller, e.g. "example.com/bar".
type GatewayController = str

# Qualified name used as a map key in TLS options, labels and annotations.
type AnnotationKey = str
type AnnotationValue = str

# How a Gateway address is written: "IPAddress", "Hostname" or a
# domain-prefixed custom type.
type AddressType = str

# Network port, 1-65535.
type PortNumber = int

# Listener protocol: "HTTP", "HTTPS", "TLS", "TCP", "UDP" or a
# domain-prefixed custom protocol.
type ProtocolType = str

# Listener TLS mode: "Terminate" (default) or "Passthrough".
type TlsModeType = str

# Namespaces a listener accepts routes from: "All", "Selector" or "Same".
type FromNamespaces = str

# HTTP header name, matched case-insensitively (RFC 7230).
type HttpHeaderName = str

# HTTP method, e.g. "GET".
type HttpMethod = str

# Feature name reported in GatewayClass status.
type SupportedFeature = str

# GEP-2257 duration, e.g. "1h30m" or "500ms". See gwapi._duration.
type Duration = str

type GatewayConditionType = str
type GatewayConditionReason = str
type GatewayClassConditionType = str
type GatewayClassConditionReason = str
type ListenerConditionType = str
type ListenerConditionReason = str
type RouteConditionType = str
type RouteConditionReason = str
