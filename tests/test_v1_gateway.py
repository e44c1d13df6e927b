"""Tests for Gateway and GatewayClass at v1."""

from __future__ import annotations

import dataclasses

import pytest

from gwapi import (
    InvalidTypeError,
    LabelSelectorRequirement,
    MissingFieldError,
    ObjectKey,
    OwnerReference,
    loads_yaml_all,
)
from gwapi.v1 import (
    Gateway,
    GatewayClass,
    GatewayClassSpec,
    GatewaySpec,
    Listener,
    RouteGroupKind,
)


@pytest.fixture
def documents(manifest) -> list:
    return loads_yaml_all(manifest("v1_gateway.yaml"))


class TestGateway:
    def test_listeners(self, documents: list) -> None:
        gateway = Gateway.from_dict(documents[1])
        http, https = gateway.spec.listeners
        assert (http.name, http.port, http.protocol) == ("http", 80, "HTTP")
        assert http.hostname is None
        assert https.hostname == "*.example.com"
        assert https.allowed_routes.kinds == (RouteGroupKind(kind="HTTPRoute"),)

    def test_route_namespaces_selector(self, documents: list) -> None:
        gateway = Gateway.from_dict(documents[1])
        namespaces = gateway.spec.listeners[0].allowed_routes.namespaces
        assert namespaces.from_ == "Selector"
        assert namespaces.selector.match_labels == {"shared-gateway-access": "true"}
        assert namespaces.selector.match_expressions == (
            LabelSelectorRequirement(key="env", operator="In", values=("prod", "staging")),
        )

    def test_tls_certificate_refs(self, documents: list) -> None:
        gateway = Gateway.from_dict(documents[1])
        tls = gateway.spec.listeners[1].tls
        assert tls.mode == "Terminate"
        assert tls.options == {"example.com/cipher-suites": "modern"}
        (cert,) = tls.certificate_refs
        assert cert.key("infra") == ObjectKey("", "Secret", "infra", "wildcard-cert")

    def test_infrastructure(self, documents: list) -> None:
        gateway = Gateway.from_dict(documents[1])
        assert gateway.spec.infrastructure.labels == {"cost-center": "edge"}

    def test_status(self, documents: list) -> None:
        gateway = Gateway.from_dict(documents[1])
        (listener,) = gateway.status.listeners
        assert listener.attached_routes == 2
        assert listener.supported_kinds[0].group == "gateway.networking.k8s.io"
        assert gateway.status.conditions[0].type == "Programmed"

    def test_metadata(self, documents: list) -> None:
        meta = Gateway.from_dict(documents[1]).metadata
        assert meta.finalizers == ("gateway-exists-finalizer.gateway.networking.k8s.io",)
        assert meta.owner_references == (
            OwnerReference(
                api_version="example.com/v1",
                kind="EdgeStack",
                name="prod",
                uid="9f6a1c3e-55d2-4b8e-8c1a-7e2d4f6b0a91",
                controller=True,
                block_owner_deletion=True,
            ),
        )
        assert meta.deletion_grace_period_seconds == 30
        (entry,) = meta.managed_fields
        assert entry.manager == "example-controller"
        assert entry.fields_v1 == {"f:spec": {"f:gatewayClassName": {}}}

    def test_metadata_survives_update(self, documents: list) -> None:
        gateway = Gateway.from_dict(documents[1])
        updated = dataclasses.replace(
            gateway,
            spec=dataclasses.replace(gateway.spec, gateway_class_name="other"),
        )
        assert updated.to_dict()["metadata"] == documents[1]["metadata"]

    def test_listeners_required(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            Gateway.from_dict({"spec": {"gatewayClassName": "example"}})
        assert exc_info.value.name == "listeners"
        assert exc_info.value.path == "spec"

    def test_port_must_be_integer(self) -> None:
        with pytest.raises(InvalidTypeError) as exc_info:
            Gateway.from_dict(
                {
                    "spec": {
                        "gatewayClassName": "example",
                        "listeners": [{"name": "http", "port": "80", "protocol": "HTTP"}],
                    }
                }
            )
        assert exc_info.value.path == "spec.listeners[0].port"

    def test_constructed_round_trip(self) -> None:
        gateway = Gateway(
            spec=GatewaySpec(
                gateway_class_name="example",
                listeners=(Listener(name="http", port=80, protocol="HTTP"),),
            )
        )
        assert gateway.to_dict()["spec"] == {
            "gatewayClassName": "example",
            "listeners": [{"name": "http", "port": 80, "protocol": "HTTP"}],
        }
        assert Gateway.from_json(gateway.to_json()) == gateway


class TestGatewayClass:
    def test_parameters_ref_wire_key(self, documents: list) -> None:
        gateway_class = GatewayClass.from_dict(documents[0])
        ref = gateway_class.spec.parameters_ref
        assert (ref.group, ref.kind, ref.name, ref.namespace) == (
            "example.com",
            "GatewayConfig",
            "defaults",
            "infra",
        )
        assert "parametersRef" in gateway_class.to_dict()["spec"]

    def test_status_supported_features(self, documents: list) -> None:
        gateway_class = GatewayClass.from_dict(documents[0])
        assert gateway_class.status.supported_features == (
            "HTTPRoute",
            "HTTPRouteQueryParamMatching",
        )

    def test_minimal(self) -> None:
        gateway_class = GatewayClass.from_dict({"spec": {"controllerName": "example.com/c"}})
        assert gateway_class.spec == GatewayClassSpec(controller_name="example.com/c")
        assert gateway_class.status is None
        assert gateway_class.metadata.name is None
