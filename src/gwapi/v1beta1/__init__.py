"""gwapi.v1beta1 — resources at gateway.networking.k8s.io/v1beta1.

Gateway, GatewayClass and HTTPRoute reuse the v1 spec and status types.
ReferenceGrant is only served at this version.
"""

from gwapi.v1beta1._referencegrant import (
    ReferenceGrant,
    ReferenceGrantFrom,
    ReferenceGrantSpec,
    ReferenceGrantTo,
)
from gwapi.v1beta1._registry import register
from gwapi.v1beta1._resources import API_VERSION, Gateway, GatewayClass, HttpRoute

__all__ = [
    "API_VERSION",
    # Resources
    "Gateway",
    "GatewayClass",
    "HttpRoute",
    # ReferenceGrant
    "ReferenceGrant",
    "ReferenceGrantSpec",
    "ReferenceGrantFrom",
    "ReferenceGrantTo",
    # Registry
    "register",
]
