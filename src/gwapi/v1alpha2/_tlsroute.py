"""TLSRoute: routes TLS connections by SNI without terminating them.

``hostnames`` are matched against the ClientHello server name. Wildcards
cover exactly one leading label.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi._codec import flatten
from gwapi._meta import ObjectMeta
from gwapi._resource import Resource
from gwapi._shared import BackendRef, CommonRouteSpec, RouteStatus
from gwapi._types import Hostname
from gwapi.v1alpha2._gateway import API_VERSION


@dataclass(frozen=True, slots=True)
class TlsRouteRule:
    backend_refs: tuple[BackendRef, ...]


@dataclass(frozen=True, slots=True)
class TlsRouteSpec:
    rules: tuple[TlsRouteRule, ...]
    common: CommonRouteSpec = flatten(default_factory=CommonRouteSpec)
    hostnames: tuple[Hostname, ...] | None = None


@dataclass(frozen=True, slots=True)
class TlsRouteStatus:
    common: RouteStatus = flatten()


@dataclass(frozen=True, slots=True, kw_only=True)
class TlsRoute(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "TLSRoute"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: TlsRouteSpec
    status: TlsRouteStatus | None = None
