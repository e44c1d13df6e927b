"""Registration of the v1 resource kinds."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gwapi.v1._gateway import Gateway
from gwapi.v1._gatewayclass import GatewayClass
from gwapi.v1._httproute import HttpRoute

if TYPE_CHECKING:
    from gwapi._registry import RegistryBuilder


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register Gateway, GatewayClass and HTTPRoute at gateway.networking.k8s.io/v1."""
    return builder.resource(Gateway).resource(GatewayClass).resource(HttpRoute)
