"""gwapi.v1 — standard channel resources at gateway.networking.k8s.io/v1.

Gateway, GatewayClass and HTTPRoute with their spec and status types.
"""

from gwapi.v1._gateway import (
    API_VERSION,
    AllowedRoutes,
    Gateway,
    GatewayAddress,
    GatewayInfrastructure,
    GatewaySpec,
    GatewayStatus,
    GatewayTlsConfig,
    Listener,
    ListenerStatus,
    RouteGroupKind,
    RouteNamespaces,
)
from gwapi.v1._gatewayclass import (
    GatewayClass,
    GatewayClassSpec,
    GatewayClassStatus,
    ParametersReference,
)
from gwapi.v1._httproute import (
    DEFAULT_MATCH,
    ExtensionRef,
    HttpBackendRef,
    HttpHeader,
    HttpHeaderFilter,
    HttpPathModifier,
    HttpRequestMirrorFilter,
    HttpRequestRedirectFilter,
    HttpRoute,
    HttpRouteFilter,
    HttpRouteMatch,
    HttpRouteRule,
    HttpRouteSpec,
    HttpRouteStatus,
    HttpRouteTimeouts,
    HttpUrlRewriteFilter,
    ReplaceFullPath,
    ReplacePrefixMatch,
    RequestHeaderModifier,
    RequestMirror,
    RequestRedirect,
    ResponseHeaderModifier,
    UrlRewrite,
)
from gwapi.v1._registry import register

__all__ = [
    "API_VERSION",
    # Gateway
    "Gateway",
    "GatewaySpec",
    "GatewayStatus",
    "Listener",
    "ListenerStatus",
    "GatewayTlsConfig",
    "AllowedRoutes",
    "RouteNamespaces",
    "RouteGroupKind",
    "GatewayAddress",
    "GatewayInfrastructure",
    # GatewayClass
    "GatewayClass",
    "GatewayClassSpec",
    "GatewayClassStatus",
    "ParametersReference",
    # HTTPRoute
    "HttpRoute",
    "HttpRouteSpec",
    "HttpRouteStatus",
    "HttpRouteRule",
    "HttpRouteMatch",
    "HttpRouteTimeouts",
    "HttpBackendRef",
    "DEFAULT_MATCH",
    # Filters
    "HttpRouteFilter",
    "RequestHeaderModifier",
    "ResponseHeaderModifier",
    "RequestMirror",
    "RequestRedirect",
    "UrlRewrite",
    "ExtensionRef",
    "HttpHeaderFilter",
    "HttpHeader",
    "HttpRequestMirrorFilter",
    "HttpRequestRedirectFilter",
    "HttpUrlRewriteFilter",
    "HttpPathModifier",
    "ReplaceFullPath",
    "ReplacePrefixMatch",
    # Registry
    "register",
]
