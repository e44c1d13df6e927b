"""GRPCRoute: gRPC request routing, matched on service/method and metadata.

GRPCRoute filters, backends and status have HTTPRoute counterparts that
carry the same information. The conversions below let a data plane that
only understands HTTPRoute serve gRPC routes too; they are total and
lossless.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi import v1
from gwapi._codec import flatten, register_decoder, tagged_decoder
from gwapi._matchers import GrpcHeaderMatch, GrpcMethodMatch
from gwapi._meta import ObjectMeta
from gwapi._references import BackendObjectReference, LocalObjectReference
from gwapi._resource import Resource
from gwapi._shared import DEFAULT_WEIGHT, BackendRef, CommonRouteSpec, RouteStatus
from gwapi._types import Hostname
from gwapi.v1alpha2._gateway import API_VERSION

# ═══════════════════════════════════════════════════════════════════════════════
# Matching
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class GrpcRouteMatch:
    """Predicate over a gRPC request. Every set field must match (AND).

    A method match that names neither service nor method decodes as None.
    """

    method: GrpcMethodMatch | None = None
    headers: tuple[GrpcHeaderMatch, ...] | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Filters
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class GrpcExtensionRef:
    TYPE: ClassVar[str] = "ExtensionRef"

    extension_ref: LocalObjectReference


@dataclass(frozen=True, slots=True)
class GrpcRequestMirror:
    TYPE: ClassVar[str] = "RequestMirror"

    request_mirror: v1.HttpRequestMirrorFilter


@dataclass(frozen=True, slots=True)
class GrpcRequestHeaderModifier:
    TYPE: ClassVar[str] = "RequestHeaderModifier"

    request_header_modifier: v1.HttpHeaderFilter


@dataclass(frozen=True, slots=True)
class GrpcResponseHeaderModifier:
    TYPE: ClassVar[str] = "ResponseHeaderModifier"

    response_header_modifier: v1.HttpHeaderFilter


type GrpcRouteFilter = (
    GrpcExtensionRef | GrpcRequestMirror | GrpcRequestHeaderModifier | GrpcResponseHeaderModifier
)

register_decoder(
    GrpcRouteFilter,
    tagged_decoder(
        GrpcExtensionRef,
        GrpcRequestMirror,
        GrpcRequestHeaderModifier,
        GrpcResponseHeaderModifier,
    ),
)


def http_route_filter(grpc_filter: GrpcRouteFilter) -> v1.HttpRouteFilter:
    """Convert a GRPCRoute filter to the HTTPRoute filter of the same kind."""
    match grpc_filter:
        case GrpcExtensionRef(extension_ref=ref):
            return v1.ExtensionRef(extension_ref=ref)
        case GrpcRequestMirror(request_mirror=mirror):
            return v1.RequestMirror(request_mirror=mirror)
        case GrpcRequestHeaderModifier(request_header_modifier=modifier):
            return v1.RequestHeaderModifier(request_header_modifier=modifier)
        case GrpcResponseHeaderModifier(response_header_modifier=modifier):
            return v1.ResponseHeaderModifier(response_header_modifier=modifier)
        case _:
            msg = f"not a GRPCRoute filter: {type(grpc_filter).__name__}"
            raise TypeError(msg)


# ═══════════════════════════════════════════════════════════════════════════════
# Rules and backends
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class GrpcBackendRef:
    """A weighted gRPC backend with its own filters.

    The object reference is flattened into this object, as for BackendRef.
    """

    backend: BackendObjectReference = flatten()
    filters: tuple[GrpcRouteFilter, ...] | None = None
    weight: int | None = None

    @property
    def effective_weight(self) -> int:
        return DEFAULT_WEIGHT if self.weight is None else self.weight

    def to_http(self) -> v1.HttpBackendRef:
        """The equivalent HTTPRoute backend: same target, weight and filters."""
        filters = None
        if self.filters is not None:
            filters = tuple(http_route_filter(f) for f in self.filters)
        return v1.HttpBackendRef(
            backend_ref=BackendRef(backend=self.backend, weight=self.weight),
            filters=filters,
        )


@dataclass(frozen=True, slots=True)
class GrpcRouteRule:
    matches: tuple[GrpcRouteMatch, ...] | None = None
    filters: tuple[GrpcRouteFilter, ...] | None = None
    backend_refs: tuple[GrpcBackendRef, ...] | None = None


@dataclass(frozen=True, slots=True)
class GrpcRouteSpec:
    common: CommonRouteSpec = flatten(default_factory=CommonRouteSpec)
    hostnames: tuple[Hostname, ...] | None = None
    rules: tuple[GrpcRouteRule, ...] | None = None


@dataclass(frozen=True, slots=True)
class GrpcRouteStatus:
    common: RouteStatus = flatten()

    def to_http(self) -> v1.HttpRouteStatus:
        return v1.HttpRouteStatus(common=self.common)


@dataclass(frozen=True, slots=True, kw_only=True)
class GrpcRoute(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "GRPCRoute"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: GrpcRouteSpec
    status: GrpcRouteStatus | None = None
