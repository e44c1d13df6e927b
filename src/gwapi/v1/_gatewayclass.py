"""GatewayClass: a cluster-scoped class of Gateways and the controller behind it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi._meta import Condition, ObjectMeta
from gwapi._resource import Resource
from gwapi._types import GatewayController, Group, Kind, SupportedFeature
from gwapi.v1._gateway import API_VERSION


@dataclass(frozen=True, slots=True)
class ParametersReference:
    """Reference to controller-specific configuration for the class."""

    group: Group
    kind: Kind
    name: str
    namespace: str | None = None


@dataclass(frozen=True, slots=True)
class GatewayClassSpec:
    """``controller_name`` is a domain-prefixed path and is immutable once set."""

    controller_name: GatewayController
    parameters_ref: ParametersReference | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class GatewayClassStatus:
    conditions: tuple[Condition, ...] | None = None
    supported_features: tuple[SupportedFeature, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GatewayClass(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "GatewayClass"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: GatewayClassSpec
    status: GatewayClassStatus | None = None
