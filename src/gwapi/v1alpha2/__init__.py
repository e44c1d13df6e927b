"""gwapi.v1alpha2 — resources at gateway.networking.k8s.io/v1alpha2.

Experimental routes (GRPCRoute, TCPRoute, TLSRoute, UDPRoute) built on the
shared route plumbing, and the legacy v1alpha2 Gateway, GatewayClass,
HTTPRoute and ReferencePolicy with their own shapes.
"""

from gwapi.v1alpha2._gateway import (
    API_VERSION,
    Gateway,
    GatewayClass,
    GatewayClassStatus,
    GatewaySpec,
)
from gwapi.v1alpha2._grpcroute import (
    GrpcBackendRef,
    GrpcExtensionRef,
    GrpcRequestHeaderModifier,
    GrpcRequestMirror,
    GrpcResponseHeaderModifier,
    GrpcRoute,
    GrpcRouteFilter,
    GrpcRouteMatch,
    GrpcRouteRule,
    GrpcRouteSpec,
    GrpcRouteStatus,
    http_route_filter,
)
from gwapi.v1alpha2._httproute import (
    HttpBackendRef,
    HttpHeaderMatch,
    HttpPathMatch,
    HttpPathModifier,
    HttpQueryParamMatch,
    HttpRequestRedirectFilter,
    HttpRoute,
    HttpRouteFilter,
    HttpRouteMatch,
    HttpRouteRule,
    HttpRouteSpec,
    HttpRouteStatus,
    HttpUrlRewriteFilter,
)
from gwapi.v1alpha2._policy import PolicyTargetReference
from gwapi.v1alpha2._referencepolicy import (
    ReferencePolicy,
    ReferencePolicyFrom,
    ReferencePolicySpec,
    ReferencePolicyTo,
)
from gwapi.v1alpha2._registry import register
from gwapi.v1alpha2._tcproute import TcpRoute, TcpRouteRule, TcpRouteSpec, TcpRouteStatus
from gwapi.v1alpha2._tlsroute import TlsRoute, TlsRouteRule, TlsRouteSpec, TlsRouteStatus
from gwapi.v1alpha2._udproute import UdpRoute, UdpRouteRule, UdpRouteSpec, UdpRouteStatus

__all__ = [
    "API_VERSION",
    # GRPCRoute
    "GrpcRoute",
    "GrpcRouteSpec",
    "GrpcRouteStatus",
    "GrpcRouteRule",
    "GrpcRouteMatch",
    "GrpcBackendRef",
    "GrpcRouteFilter",
    "GrpcExtensionRef",
    "GrpcRequestMirror",
    "GrpcRequestHeaderModifier",
    "GrpcResponseHeaderModifier",
    "http_route_filter",
    # TCPRoute / TLSRoute / UDPRoute
    "TcpRoute",
    "TcpRouteSpec",
    "TcpRouteStatus",
    "TcpRouteRule",
    "TlsRoute",
    "TlsRouteSpec",
    "TlsRouteStatus",
    "TlsRouteRule",
    "UdpRoute",
    "UdpRouteSpec",
    "UdpRouteStatus",
    "UdpRouteRule",
    # Legacy Gateway / GatewayClass
    "Gateway",
    "GatewaySpec",
    "GatewayClass",
    "GatewayClassStatus",
    # Legacy HTTPRoute
    "HttpRoute",
    "HttpRouteSpec",
    "HttpRouteStatus",
    "HttpRouteRule",
    "HttpRouteMatch",
    "HttpPathMatch",
    "HttpHeaderMatch",
    "HttpQueryParamMatch",
    "HttpRouteFilter",
    "HttpPathModifier",
    "HttpRequestRedirectFilter",
    "HttpUrlRewriteFilter",
    "HttpBackendRef",
    # Policy
    "ReferencePolicy",
    "ReferencePolicySpec",
    "ReferencePolicyFrom",
    "ReferencePolicyTo",
    "PolicyTargetReference",
    # Registry
    "register",
]
