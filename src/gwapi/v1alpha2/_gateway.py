"""Gateway and GatewayClass as first served at v1alpha2.

The v1alpha2 Gateway has no ``infrastructure`` block, and the v1alpha2
GatewayClass status reports only conditions. Everything below the spec
root is shaped as in v1.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi._meta import Condition, ObjectMeta
from gwapi._resource import Resource
from gwapi._types import ObjectName
from gwapi.v1 import GatewayAddress, GatewayClassSpec, GatewayStatus, Listener

API_VERSION = "gateway.networking.k8s.io/v1alpha2"


@dataclass(frozen=True, slots=True)
class GatewaySpec:
    gateway_class_name: ObjectName
    listeners: tuple[Listener, ...]
    addresses: tuple[GatewayAddress, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Gateway(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "Gateway"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: GatewaySpec
    status: GatewayStatus | None = None


@dataclass(frozen=True, slots=True)
class GatewayClassStatus:
    conditions: tuple[Condition, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GatewayClass(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "GatewayClass"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: GatewayClassSpec
    status: GatewayClassStatus | None = None
