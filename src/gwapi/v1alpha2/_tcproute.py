"""TCPRoute: forwards TCP connections from a listener port to backends."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi._codec import flatten
from gwapi._meta import ObjectMeta
from gwapi._resource import Resource
from gwapi._shared import BackendRef, CommonRouteSpec, RouteStatus
from gwapi.v1alpha2._gateway import API_VERSION


@dataclass(frozen=True, slots=True)
class TcpRouteRule:
    """Connections are spread over ``backend_refs`` by weight."""

    backend_refs: tuple[BackendRef, ...]


@dataclass(frozen=True, slots=True)
class TcpRouteSpec:
    rules: tuple[TcpRouteRule, ...]
    common: CommonRouteSpec = flatten(default_factory=CommonRouteSpec)


@dataclass(frozen=True, slots=True)
class TcpRouteStatus:
    common: RouteStatus = flatten()


@dataclass(frozen=True, slots=True, kw_only=True)
class TcpRoute(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "TCPRoute"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: TcpRouteSpec
    status: TcpRouteStatus | None = None
