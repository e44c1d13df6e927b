"""Tests for HTTPRoute at v1."""

from __future__ import annotations

import pytest

from gwapi import (
    BackendObjectReference,
    BackendRef,
    HeaderExact,
    InvalidDiscriminantError,
    InvalidTypeError,
    LocalObjectReference,
    MissingFieldError,
    ParentReference,
    PathExact,
    PathPrefix,
    QueryParamRegularExpression,
    ResourceKindError,
    decode,
    encode,
    parse_duration,
)
from gwapi.v1 import (
    DEFAULT_MATCH,
    ExtensionRef,
    HttpBackendRef,
    HttpHeader,
    HttpHeaderFilter,
    HttpRoute,
    HttpRouteFilter,
    HttpRouteMatch,
    HttpRouteRule,
    HttpRouteSpec,
    HttpUrlRewriteFilter,
    ReplaceFullPath,
    ReplacePrefixMatch,
    RequestHeaderModifier,
    RequestRedirect,
    UrlRewrite,
)


@pytest.fixture
def route(manifest) -> HttpRoute:
    return HttpRoute.from_yaml(manifest("v1_httproute.yaml"))


class TestHttpRouteDecode:
    def test_common_spec_flattened(self, route: HttpRoute) -> None:
        assert route.spec.common.parent_refs == (
            ParentReference(name="prod-web", namespace="infra", section_name="https"),
        )
        assert "common" not in route.to_dict()["spec"]

    def test_match(self, route: HttpRoute) -> None:
        match = route.spec.rules[0].matches[0]
        assert match.path == PathPrefix("/api")
        assert match.headers == (HeaderExact("env", "canary"),)
        assert match.query_params == (QueryParamRegularExpression("version", "v[0-9]+"),)
        assert match.method == "GET"

    def test_filters(self, route: HttpRoute) -> None:
        filters = route.spec.rules[0].filters
        assert [f.TYPE for f in filters] == [
            "RequestHeaderModifier",
            "ResponseHeaderModifier",
            "RequestMirror",
            "URLRewrite",
        ]
        assert filters[0] == RequestHeaderModifier(
            request_header_modifier=HttpHeaderFilter(
                set=(HttpHeader("x-route", "store"),),
                add=(HttpHeader("x-trace", "1"),),
                remove=("x-debug",),
            )
        )
        assert filters[3] == UrlRewrite(
            url_rewrite=HttpUrlRewriteFilter(
                hostname="internal.example.com", path=ReplacePrefixMatch("/")
            )
        )

    def test_redirect(self, route: HttpRoute) -> None:
        (redirect,) = route.spec.rules[1].filters
        assert isinstance(redirect, RequestRedirect)
        assert redirect.request_redirect.path == ReplaceFullPath("/signin")
        assert redirect.request_redirect.status_code == 301

    def test_backend_refs(self, route: HttpRoute) -> None:
        refs = route.spec.rules[0].backend_refs
        assert [(r.backend_ref.backend.name, r.backend_ref.weight) for r in refs] == [
            ("store-v1", 90),
            ("store-v2", 10),
        ]
        assert refs[1].filters == (
            ExtensionRef(extension_ref=LocalObjectReference("example.com", "RateLimit", "strict")),
        )

    def test_timeouts(self, route: HttpRoute) -> None:
        timeouts = route.spec.rules[0].timeouts
        assert timeouts.request == "10s"
        assert parse_duration(timeouts.backend_request).total_seconds() == 2

    def test_status(self, route: HttpRoute) -> None:
        (parent,) = route.status.common.parents
        assert parent.controller_name == "example.com/gateway-controller"
        assert [c.type for c in parent.conditions] == ["Accepted", "ResolvedRefs"]
        assert parent.conditions[0].observed_generation == 3


class TestHttpRouteFilter:
    def test_type_required(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            decode(HttpRouteFilter, {"requestHeaderModifier": {}})
        assert exc_info.value.name == "type"

    def test_unknown_type(self) -> None:
        with pytest.raises(InvalidDiscriminantError) as exc_info:
            decode(HttpRouteFilter, {"type": "UrlRewrite", "urlRewrite": {}})
        assert "URLRewrite" in exc_info.value.allowed

    def test_payload_required(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            decode(HttpRouteFilter, {"type": "RequestMirror"})
        assert exc_info.value.name == "requestMirror"

    def test_payload_nested_under_variant_key(self) -> None:
        url_rewrite = UrlRewrite(url_rewrite=HttpUrlRewriteFilter(hostname="a.example.com"))
        assert encode(url_rewrite) == {
            "type": "URLRewrite",
            "urlRewrite": {"hostname": "a.example.com"},
        }

    def test_other_variant_payload_ignored(self) -> None:
        result = decode(
            HttpRouteFilter,
            {
                "type": "ExtensionRef",
                "extensionRef": {"group": "g", "kind": "k", "name": "n"},
                "requestMirror": {"backendRef": {"name": "x"}},
            },
        )
        assert result == ExtensionRef(extension_ref=LocalObjectReference("g", "k", "n"))


class TestHttpRouteRule:
    def test_effective_matches_default(self) -> None:
        assert HttpRouteRule().effective_matches() == (DEFAULT_MATCH,)
        assert HttpRouteRule(matches=()).effective_matches() == (HttpRouteMatch(PathPrefix("/")),)

    def test_effective_matches_given(self) -> None:
        match = HttpRouteMatch(path=PathExact("/login"))
        assert HttpRouteRule(matches=(match,)).effective_matches() == (match,)

    def test_backend_ref_round_trip(self) -> None:
        ref = HttpBackendRef(
            backend_ref=BackendRef(backend=BackendObjectReference(name="svc", port=80), weight=2),
        )
        assert encode(ref) == {"name": "svc", "port": 80, "weight": 2}
        assert decode(HttpBackendRef, encode(ref)) == ref


class TestHttpRouteResource:
    def test_to_dict_header_first(self) -> None:
        route = HttpRoute(spec=HttpRouteSpec())
        assert list(route.to_dict()) == ["apiVersion", "kind", "metadata", "spec"]
        assert route.to_dict()["apiVersion"] == "gateway.networking.k8s.io/v1"

    def test_missing_header_accepted(self) -> None:
        route = HttpRoute.from_dict({"spec": {"hostnames": ["a.example.com"]}})
        assert route.spec.hostnames == ("a.example.com",)

    def test_wrong_version_rejected(self) -> None:
        with pytest.raises(ResourceKindError) as exc_info:
            HttpRoute.from_dict(
                {"apiVersion": "gateway.networking.k8s.io/v1beta1", "kind": "HTTPRoute", "spec": {}}
            )
        assert exc_info.value.expected == "gateway.networking.k8s.io/v1/HTTPRoute"
        assert exc_info.value.got == "gateway.networking.k8s.io/v1beta1/HTTPRoute"

    def test_wrong_kind_rejected(self) -> None:
        with pytest.raises(ResourceKindError):
            HttpRoute.from_dict(
                {"apiVersion": "gateway.networking.k8s.io/v1", "kind": "GRPCRoute", "spec": {}}
            )

    def test_header_checked_before_body(self) -> None:
        # No spec either; the kind mismatch is reported first.
        with pytest.raises(ResourceKindError) as exc_info:
            HttpRoute.from_dict({"apiVersion": "gateway.networking.k8s.io/v1", "kind": "Gateway"})
        assert exc_info.value.got == "gateway.networking.k8s.io/v1/Gateway"

    def test_not_an_object(self) -> None:
        with pytest.raises(InvalidTypeError):
            HttpRoute.from_dict(["spec"])

    def test_spec_required(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            HttpRoute.from_dict({"metadata": {"name": "r"}})
        assert exc_info.value.name == "spec"

    def test_json_indent(self) -> None:
        text = HttpRoute(spec=HttpRouteSpec(hostnames=("a",))).to_json(indent=2)
        assert text.startswith('{\n  "apiVersion"')
