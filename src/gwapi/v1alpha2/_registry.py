"""Registration of the v1alpha2 resource kinds."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gwapi.v1alpha2._gateway import Gateway, GatewayClass
from gwapi.v1alpha2._grpcroute import GrpcRoute
from gwapi.v1alpha2._httproute import HttpRoute
from gwapi.v1alpha2._referencepolicy import ReferencePolicy
from gwapi.v1alpha2._tcproute import TcpRoute
from gwapi.v1alpha2._tlsroute import TlsRoute
from gwapi.v1alpha2._udproute import UdpRoute

if TYPE_CHECKING:
    from gwapi._registry import RegistryBuilder


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register the experimental routes and the legacy v1alpha2 kinds."""
    return (
        builder.resource(GrpcRoute)
        .resource(TcpRoute)
        .resource(TlsRoute)
        .resource(UdpRoute)
        .resource(Gateway)
        .resource(GatewayClass)
        .resource(HttpRoute)
        .resource(ReferencePolicy)
    )
