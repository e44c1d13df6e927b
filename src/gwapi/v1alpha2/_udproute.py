"""UDPRoute: forwards UDP datagrams from a listener port to backends."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi._codec import flatten
from gwapi._meta import ObjectMeta
from gwapi._resource import Resource
from gwapi._shared import BackendRef, CommonRouteSpec, RouteStatus
from gwapi.v1alpha2._gateway import API_VERSION


@dataclass(frozen=True, slots=True)
class UdpRouteRule:
    backend_refs: tuple[BackendRef, ...]


@dataclass(frozen=True, slots=True)
class UdpRouteSpec:
    rules: tuple[UdpRouteRule, ...]
    common: CommonRouteSpec = flatten(default_factory=CommonRouteSpec)


@dataclass(frozen=True, slots=True)
class UdpRouteStatus:
    common: RouteStatus = flatten()


@dataclass(frozen=True, slots=True, kw_only=True)
class UdpRoute(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "UDPRoute"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: UdpRouteSpec
    status: UdpRouteStatus | None = None
