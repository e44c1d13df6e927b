"""HTTPRoute as served at v1alpha2.

Before v1beta1, matchers, filters and path modifiers were plain objects
with a string ``type`` next to optional payload fields; nothing ties the
payload to the type. They are modeled that way here, so a v1alpha2 document
round-trips exactly, including combinations a later version would reject.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi._codec import flatten
from gwapi._meta import ObjectMeta
from gwapi._references import LocalObjectReference
from gwapi._resource import Resource
from gwapi._shared import BackendRef, CommonRouteSpec, RouteStatus
from gwapi._types import Hostname, HttpHeaderName, HttpMethod, PortNumber, PreciseHostname
from gwapi.v1 import HttpHeaderFilter, HttpRequestMirrorFilter
from gwapi.v1alpha2._gateway import API_VERSION

# ═══════════════════════════════════════════════════════════════════════════════
# Matching
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HttpPathMatch:
    """``type`` is "Exact", "PathPrefix" (default) or "RegularExpression"."""

    type: str | None = None
    value: str | None = None


@dataclass(frozen=True, slots=True)
class HttpHeaderMatch:
    type: str
    name: HttpHeaderName
    value: str


@dataclass(frozen=True, slots=True)
class HttpQueryParamMatch:
    type: str
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class HttpRouteMatch:
    path: HttpPathMatch | None = None
    headers: tuple[HttpHeaderMatch, ...] | None = None
    query_params: tuple[HttpQueryParamMatch, ...] | None = None
    method: HttpMethod | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Filters
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HttpPathModifier:
    """``type`` is "ReplaceFullPath" or "ReplacePrefixMatch"."""

    type: str
    replace_full_path: str | None = None
    replace_prefix_match: str | None = None


@dataclass(frozen=True, slots=True)
class HttpRequestRedirectFilter:
    scheme: str | None = None
    hostname: PreciseHostname | None = None
    path: HttpPathModifier | None = None
    port: PortNumber | None = None
    status_code: int | None = None


@dataclass(frozen=True, slots=True)
class HttpUrlRewriteFilter:
    hostname: PreciseHostname | None = None
    path: HttpPathModifier | None = None


@dataclass(frozen=True, slots=True)
class HttpRouteFilter:
    """One filter. ``type`` names which of the payload fields is meant."""

    type: str
    request_header_modifier: HttpHeaderFilter | None = None
    request_mirror: HttpRequestMirrorFilter | None = None
    request_redirect: HttpRequestRedirectFilter | None = None
    url_rewrite: HttpUrlRewriteFilter | None = None
    extension_ref: LocalObjectReference | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Rules and backends
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HttpBackendRef:
    backend_ref: BackendRef | None = flatten(default=None)
    filters: tuple[HttpRouteFilter, ...] | None = None


@dataclass(frozen=True, slots=True)
class HttpRouteRule:
    matches: tuple[HttpRouteMatch, ...] | None = None
    filters: tuple[HttpRouteFilter, ...] | None = None
    backend_refs: tuple[HttpBackendRef, ...] | None = None


@dataclass(frozen=True, slots=True)
class HttpRouteSpec:
    common: CommonRouteSpec = flatten(default_factory=CommonRouteSpec)
    hostnames: tuple[Hostname, ...] | None = None
    rules: tuple[HttpRouteRule, ...] | None = None


@dataclass(frozen=True, slots=True)
class HttpRouteStatus:
    common: RouteStatus = flatten()


@dataclass(frozen=True, slots=True, kw_only=True)
class HttpRoute(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "HTTPRoute"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: HttpRouteSpec
    status: HttpRouteStatus | None = None
