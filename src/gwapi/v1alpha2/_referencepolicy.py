"""ReferencePolicy: the v1alpha2 predecessor of ReferenceGrant."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi._meta import ObjectMeta
from gwapi._resource import Resource
from gwapi._types import Group, Kind, Namespace, ObjectName
from gwapi.v1alpha2._gateway import API_VERSION


@dataclass(frozen=True, slots=True)
class ReferencePolicyFrom:
    group: Group
    kind: Kind
    namespace: Namespace


@dataclass(frozen=True, slots=True)
class ReferencePolicyTo:
    """``name`` unset means every object of the kind."""

    group: Group
    kind: Kind
    name: ObjectName | None = None


@dataclass(frozen=True, slots=True)
class ReferencePolicySpec:
    from_: tuple[ReferencePolicyFrom, ...]
    to: tuple[ReferencePolicyTo, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferencePolicy(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "ReferencePolicy"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ReferencePolicySpec
