"""ReferenceGrant: consent for cross-namespace references into this namespace.

A route in namespace A may reference a Service in namespace B only if a
ReferenceGrant in B lists A's route kind under ``from_`` and the Service
kind under ``to``. Grants only ever widen what is allowed; deleting one
revokes access.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gwapi._meta import ObjectMeta
from gwapi._resource import Resource
from gwapi._types import Group, Kind, Namespace, ObjectName
from gwapi.v1beta1._resources import API_VERSION


@dataclass(frozen=True, slots=True)
class ReferenceGrantFrom:
    """Referrers the grant trusts: every ``kind`` object in ``namespace``."""

    group: Group
    kind: Kind
    namespace: Namespace


@dataclass(frozen=True, slots=True)
class ReferenceGrantTo:
    """Referents the grant exposes. ``name`` unset means every object of the kind."""

    group: Group
    kind: Kind
    name: ObjectName | None = None


@dataclass(frozen=True, slots=True)
class ReferenceGrantSpec:
    from_: tuple[ReferenceGrantFrom, ...]
    to: tuple[ReferenceGrantTo, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferenceGrant(Resource):
    API_VERSION: ClassVar[str] = API_VERSION
    KIND: ClassVar[str] = "ReferenceGrant"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ReferenceGrantSpec
