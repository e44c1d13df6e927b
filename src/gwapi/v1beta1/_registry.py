"""Registration of the v1beta1 resource kinds."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gwapi.v1beta1._referencegrant import ReferenceGrant
from gwapi.v1beta1._resources import Gateway, GatewayClass, HttpRoute

if TYPE_CHECKING:
    from gwapi._registry import RegistryBuilder


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register Gateway, GatewayClass, HTTPRoute and ReferenceGrant at v1beta1."""
    return (
        builder.resource(Gateway)
        .resource(GatewayClass)
        .resource(HttpRoute)
        .resource(ReferenceGrant)
    )
