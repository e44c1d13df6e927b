"""HTTPRoute: HTTP request routing from listeners to backends.

Filters and path modifiers are ``type``-discriminated unions whose payload
is nested under the camelCase form of the variant name::

    {"type": "RequestHeaderModifier", "requestHeaderModifier": {"add": [...]}}

Unlike match predicates they have no default variant: ``type`` is required.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi._codec import flatten, register_decoder, tagged_decoder
from gwapi._matchers import (
    HttpHeaderMatch,
    HttpPathMatch,
    HttpQueryParamMatch,
    PathPrefix,
)
from gwapi._meta import ObjectMeta
from gwapi._references import BackendObjectReference, LocalObjectReference
from gwapi._resource import Resource
from gwapi._shared import BackendRef, CommonRouteSpec, RouteStatus
from gwapi._types import (
    Duration,
    Hostname,
    HttpHeaderName,
    HttpMethod,
    PortNumber,
    PreciseHostname,
)
from gwapi.v1._gateway import API_VERSION

# ═══════════════════════════════════════════════════════════════════════════════
# Matching
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HttpRouteMatch:
    """Predicate over a request. Every set field must match (AND).

    A rule's matches are ORed: the rule applies if any one of them matches.
    """

    path: HttpPathMatch | None = None
    headers: tuple[HttpHeaderMatch, ...] | None = None
    query_params: tuple[HttpQueryParamMatch, ...] | None = None
    method: HttpMethod | None = None


DEFAULT_MATCH = HttpRouteMatch(path=PathPrefix())

# ═══════════════════════════════════════════════════════════════════════════════
# Filters
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HttpHeader:
    name: HttpHeaderName
    value: str


@dataclass(frozen=True, slots=True)
class HttpHeaderFilter:
    """Header edits: ``set`` overwrites, ``add`` appends, ``remove`` deletes by name."""

    set: tuple[HttpHeader, ...] | None = None
    add: tuple[HttpHeader, ...] | None = None
    remove: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class ReplaceFullPath:
    TYPE: ClassVar[str] = "ReplaceFullPath"

    replace_full_path: str


@dataclass(frozen=True, slots=True)
class ReplacePrefixMatch:
    """Replace the portion of the path matched by a PathPrefix match."""

    TYPE: ClassVar[str] = "ReplacePrefixMatch"

    replace_prefix_match: str


type HttpPathModifier = ReplaceFullPath | ReplacePrefixMatch


@dataclass(frozen=True, slots=True)
class HttpRequestRedirectFilter:
    """Redirect response parameters. Unset fields keep the request's values."""

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
class HttpRequestMirrorFilter:
    """Send a copy of each request to another backend; its responses are dropped."""

    backend_ref: BackendObjectReference


@dataclass(frozen=True, slots=True)
class RequestHeaderModifier:
    TYPE: ClassVar[str] = "RequestHeaderModifier"

    request_header_modifier: HttpHeaderFilter


@dataclass(frozen=True, slots=True)
class ResponseHeaderModifier:
    TYPE: ClassVar[str] = "ResponseHeaderModifier"

    response_header_modifier: HttpHeaderFilter


@dataclass(frozen=True, slots=True)
class RequestMirror:
    TYPE: ClassVar[str] = "RequestMirror"

    request_mirror: HttpRequestMirrorFilter


@dataclass(frozen=True, slots=True)
class RequestRedirect:
    TYPE: ClassVar[str] = "RequestRedirect"

    request_redirect: HttpRequestRedirectFilter


@dataclass(frozen=True, slots=True)
class UrlRewrite:
    TYPE: ClassVar[str] = "URLRewrite"

    url_rewrite: HttpUrlRewriteFilter


@dataclass(frozen=True, slots=True)
class ExtensionRef:
    """Implementation-specific filter defined by another resource."""

    TYPE: ClassVar[str] = "ExtensionRef"

    extension_ref: LocalObjectReference


type HttpRouteFilter = (
    RequestHeaderModifier
    | ResponseHeaderModifier
    | RequestMirror
    | RequestRedirect
    | UrlRewrite
    | ExtensionRef
)

register_decoder(HttpPathModifier, tagged_decoder(ReplaceFullPath, ReplacePrefixMatch))
register_decoder(
    HttpRouteFilter,
    tagged_decoder(
        RequestHeaderModifier,
        ResponseHeaderModifier,
        RequestMirror,
        RequestRedirect,
        UrlRewrite,
        ExtensionRef,
    ),
)

# ═══════════════════════════════════════════════════════════════════════════════
# Rules and backends
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HttpBackendRef:
    """A weighted backend with filters applied only to traffic sent to it.

    The BackendRef is flattened into this object and is None when the
    document names no backend fields at all.
    """

    backend_ref: BackendRef | None = flatten(default=None)
    filters: tuple[HttpRouteFilter, ...] | None = None


@dataclass(frozen=True, slots=True)
class HttpRouteTimeouts:
    """GEP-2257 duration strings; see parse_duration()."""

    request: Duration | None = None
    backend_request: Duration | None = None


@dataclass(frozen=True, slots=True)
class HttpRouteRule:
    matches: tuple[HttpRouteMatch, ...] | None = None
    filters: tuple[HttpRouteFilter, ...] | None = None
    backend_refs: tuple[HttpBackendRef, ...] | None = None
    timeouts: HttpRouteTimeouts | None = None

    def effective_matches(self) -> tuple[HttpRouteMatch, ...]:
        """The rule's matches, or a single PathPrefix "/" match when none are given."""
        return self.matches or (DEFAULT_MATCH,)


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
