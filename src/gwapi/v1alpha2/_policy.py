"""Policy attachment target, for implementation-defined policy resources."""

from __future__ import annotations

from dataclasses import dataclass

from gwapi._references import ObjectKey
from gwapi._types import Group, Kind, Namespace, ObjectName


@dataclass(frozen=True, slots=True)
class PolicyTargetReference:
    """The resource a policy applies to.

    A namespace other than the policy's is only honored where the target
    namespace grants it via ReferencePolicy.
    """

    group: Group
    kind: Kind
    name: ObjectName
    namespace: Namespace | None = None

    def key(self, namespace: str) -> ObjectKey:
        return ObjectKey(self.group, self.kind, self.namespace or namespace, self.name)
