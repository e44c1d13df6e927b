"""Tests for the v1beta1 resources."""

from __future__ import annotations

import pytest

from gwapi import ResourceKindError, loads_json
from gwapi import v1
from gwapi.v1beta1 import (
    API_VERSION,
    Gateway,
    HttpRoute,
    ReferenceGrant,
    ReferenceGrantFrom,
    ReferenceGrantTo,
)


class TestSharedSchemas:
    def test_http_route_nulls_and_url_rewrite(self) -> None:
        text = """{
            "apiVersion": "gateway.networking.k8s.io/v1beta1",
            "kind": "HTTPRoute",
            "metadata": {"name": "route_name"},
            "spec": {
                "parentRefs": null,
                "hostnames": null,
                "rules": [{
                    "matches": null,
                    "filters": [{
                        "type": "URLRewrite",
                        "urlRewrite": {
                            "hostname": null,
                            "path": {"type": "ReplacePrefixMatch", "replacePrefixMatch": "/"}
                        }
                    }],
                    "backendRefs": null
                }]
            }
        }"""
        route = HttpRoute.from_dict(loads_json(text))
        (rule,) = route.spec.rules
        assert rule.matches is None
        assert rule.filters == (
            v1.UrlRewrite(
                url_rewrite=v1.HttpUrlRewriteFilter(path=v1.ReplacePrefixMatch("/")),
            ),
        )

    def test_spec_types_shared_with_v1(self) -> None:
        listener = {"name": "a", "port": 1, "protocol": "TCP"}
        doc = {"spec": {"gatewayClassName": "c", "listeners": [listener]}}
        assert Gateway.from_dict(doc).spec == v1.Gateway.from_dict(doc).spec

    def test_resource_classes_distinct(self) -> None:
        assert Gateway is not v1.Gateway
        assert Gateway.API_VERSION == API_VERSION == "gateway.networking.k8s.io/v1beta1"

    def test_v1_document_rejected(self) -> None:
        with pytest.raises(ResourceKindError):
            HttpRoute.from_dict({"apiVersion": "gateway.networking.k8s.io/v1", "spec": {}})


class TestReferenceGrant:
    def test_decode(self, manifest) -> None:
        grant = ReferenceGrant.from_yaml(manifest("v1beta1.yaml").split("---")[0])
        assert grant.spec.from_ == (
            ReferenceGrantFrom(
                group="gateway.networking.k8s.io", kind="HTTPRoute", namespace="apps"
            ),
        )
        assert grant.spec.to == (
            ReferenceGrantTo(group="", kind="Service"),
            ReferenceGrantTo(group="", kind="Secret", name="shared-cert"),
        )

    def test_to_name_optional(self) -> None:
        assert ReferenceGrantTo(group="", kind="Service").name is None

    def test_no_status(self) -> None:
        grant = ReferenceGrant.from_dict({"spec": {"from": [], "to": []}})
        assert "status" not in grant.to_dict()
        assert not hasattr(grant, "status")

    def test_to_entries_use_to_shape(self) -> None:
        doc = {
            "spec": {
                "from": [{"group": "", "kind": "Pod", "namespace": "a"}],
                "to": [{"group": "", "kind": "Service", "name": "svc"}],
            }
        }
        grant = ReferenceGrant.from_dict(doc)
        assert grant.spec.to[0] == ReferenceGrantTo(group="", kind="Service", name="svc")
