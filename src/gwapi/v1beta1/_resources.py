"""Gateway, GatewayClass and HTTPRoute served at v1beta1.

The v1beta1 schemas are identical to v1; only the apiVersion differs. The
resource classes are distinct so a document decodes into the class of the
version it declares.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi._meta import ObjectMeta
from gwapi._resource import Resource
from gwapi.v1 import (
    GatewayClassSpec,
    GatewayClassStatus,
    GatewaySpec,
    GatewayStatus,
    HttpRouteSpec,
    HttpRouteStatus,
)

API_VERSION = "gateway.networking.k8s.io/v1beta1"


@dataclass(frozen=True, slots=True, kw_only=True)
class Gateway(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "Gateway"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: GatewaySpec
    status: GatewayStatus | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GatewayClass(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "GatewayClass"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: GatewayClassSpec
    status: GatewayClassStatus | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class HttpRoute(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "HTTPRoute"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: HttpRouteSpec
    status: HttpRouteStatus | None = None
