"""Object references used across Gateway API resources.

Most fields of a reference are optional on the wire and carry documented
defaults. The model keeps what the document said (so it round-trips), and
``key()`` resolves the defaults when a consumer needs to compare targets:

| Reference                | group default                 | kind default |
|--------------------------|-------------------------------|--------------|
| SecretObjectReference    | "" (core)                     | Secret       |
| BackendObjectReference   | "" (core)                     | Service      |
| ParentReference          | gateway.networking.k8s.io     | Gateway      |

An unset or empty namespace means the namespace of the referring resource.
"""

from __future__ import annotations

from dataclasses import dataclass

from gwapi._types import (
    CORE_GROUP,
    GATEWAY_API_GROUP,
    Group,
    Kind,
    Namespace,
    ObjectName,
    PortNumber,
    SectionName,
)


@dataclass(frozen=True, slots=True)
class ObjectKey:
    """A reference with every default resolved."""

    group: str
    kind: str
    namespace: str
    name: str


@dataclass(frozen=True, slots=True)
class LocalObjectReference:
    """Reference to an object in the same namespace as the referrer.

    Used by ExtensionRef filters. All fields are required.
    """

    group: Group
    kind: Kind
    name: ObjectName

    def key(self, namespace: str) -> ObjectKey:
        return ObjectKey(self.group, self.kind, namespace, self.name)


@dataclass(frozen=True, slots=True)
class SecretObjectReference:
    """Reference to a Secret, e.g. a listener's TLS certificate.

    A namespace other than the Gateway's needs a ReferenceGrant in the
    target namespace.
    """

    name: ObjectName
    group: Group | None = None
    kind: Kind | None = None
    namespace: Namespace | None = None

    def key(self, namespace: str) -> ObjectKey:
        """Resolve defaults against the referrer's namespace."""
        return ObjectKey(
            group=CORE_GROUP if self.group is None else self.group,
            kind=self.kind or "Secret",
            namespace=self.namespace or namespace,
            name=self.name,
        )


@dataclass(frozen=True, slots=True)
class BackendObjectReference:
    """Reference to a backend, typically a Service.

    ``port`` is required when the referent is a Kubernetes Service. A
    namespace other than the route's needs a ReferenceGrant in the target
    namespace.
    """

    name: ObjectName
    group: Group | None = None
    kind: Kind | None = None
    namespace: Namespace | None = None
    port: PortNumber | None = None

    def key(self, namespace: str) -> ObjectKey:
        """Resolve defaults against the referrer's namespace.

        A reference with ``kind`` omitted resolves to the same key as one
        with ``kind="Service"``.
        """
        return ObjectKey(
            group=CORE_GROUP if self.group is None else self.group,
            kind=self.kind or "Service",
            namespace=self.namespace or namespace,
            name=self.name,
        )


@dataclass(frozen=True, slots=True)
class ParentReference:
    """Reference to the object a route attaches to, usually a Gateway.

    ``section_name`` selects a listener by name. ``port`` selects every
    listener on that port; when both are set, the listener must match both.
    An attachment counts as successful if at least one selected listener
    accepts the route.
    """

    name: ObjectName
    group: Group | None = None
    kind: Kind | None = None
    namespace: Namespace | None = None
    section_name: SectionName | None = None
    port: PortNumber | None = None

    def key(self, namespace: str) -> ObjectKey:
        """Resolve defaults against the route's namespace."""
        return ObjectKey(
            group=GATEWAY_API_GROUP if self.group is None else self.group,
            kind=self.kind or "Gateway",
            namespace=self.namespace or namespace,
            name=self.name,
        )
