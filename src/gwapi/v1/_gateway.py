"""Gateway: a request for a data plane, instantiated from a GatewayClass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi._meta import Condition, LabelSelector, ObjectMeta
from gwapi._references import SecretObjectReference
from gwapi._resource import Resource
from gwapi._types import (
    AddressType,
    AnnotationKey,
    AnnotationValue,
    FromNamespaces,
    Hostname,
    Kind,
    ObjectName,
    PortNumber,
    ProtocolType,
    SectionName,
    TlsModeType,
)

API_VERSION = "gateway.networking.k8s.io/v1"


@dataclass(frozen=True, slots=True)
class RouteGroupKind:
    """A route kind a listener accepts. ``group`` unset means the Gateway API group."""

    kind: Kind
    group: str | None = None


@dataclass(frozen=True, slots=True)
class RouteNamespaces:
    """Namespaces routes may attach from.

    ``from_`` is "All", "Selector" or "Same" (the default). ``selector``
    applies only to "Selector".
    """

    from_: FromNamespaces | None = None
    selector: LabelSelector | None = None


@dataclass(frozen=True, slots=True)
class AllowedRoutes:
    """Which routes may attach to a listener, by namespace and kind."""

    namespaces: RouteNamespaces | None = None
    kinds: tuple[RouteGroupKind, ...] | None = None


@dataclass(frozen=True, slots=True)
class GatewayTlsConfig:
    """TLS settings for a listener.

    ``mode`` is "Terminate" (default) or "Passthrough". ``options`` carries
    implementation-specific settings.
    """

    mode: TlsModeType | None = None
    certificate_refs: tuple[SecretObjectReference, ...] | None = None
    options: dict[str, str] | None = None


@dataclass(frozen=True, slots=True)
class Listener:
    """A logical endpoint bound on the Gateway's addresses.

    Listeners are distinct when their port, protocol and hostname (for HTTP
    and HTTPS) or port (for TCP and UDP) differ.
    """

    name: SectionName
    port: PortNumber
    protocol: ProtocolType
    hostname: Hostname | None = None
    tls: GatewayTlsConfig | None = None
    allowed_routes: AllowedRoutes | None = None


@dataclass(frozen=True, slots=True)
class GatewayAddress:
    """A requested or assigned address. ``type`` defaults to "IPAddress"."""

    value: str
    type: AddressType | None = None


@dataclass(frozen=True, slots=True)
class GatewayInfrastructure:
    """Labels and annotations propagated to resources generated for the Gateway."""

    labels: dict[AnnotationKey, AnnotationValue] | None = None
    annotations: dict[AnnotationKey, AnnotationValue] | None = None


@dataclass(frozen=True, slots=True)
class GatewaySpec:
    gateway_class_name: ObjectName
    listeners: tuple[Listener, ...]
    addresses: tuple[GatewayAddress, ...] | None = None
    infrastructure: GatewayInfrastructure | None = None


@dataclass(frozen=True, slots=True)
class ListenerStatus:
    """Observed state of one listener."""

    name: SectionName
    supported_kinds: tuple[RouteGroupKind, ...]
    attached_routes: int
    conditions: tuple[Condition, ...]


@dataclass(frozen=True, slots=True)
class GatewayStatus:
    addresses: tuple[GatewayAddress, ...] | None = None
    conditions: tuple[Condition, ...] | None = None
    listeners: tuple[ListenerStatus, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Gateway(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "Gateway"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: GatewaySpec
    status: GatewayStatus | None = None
