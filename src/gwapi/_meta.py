"""Kubernetes metadata shapes embedded in Gateway API resources.

These belong to the surrounding API machinery (``meta/v1``). They are
decoded and encoded structurally and otherwise left alone: timestamps stay
RFC 3339 strings, managed-field sets stay opaque objects, and condition
merging is the controller's business. Every ``meta/v1`` field is modeled so
a read-modify-write cycle keeps finalizers and owner references intact.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class OwnerReference:
    """Identifies an object that owns this one (garbage collection)."""

    api_version: str
    kind: str
    name: str
    uid: str
    controller: bool | None = None
    block_owner_deletion: bool | None = None


@dataclass(frozen=True, slots=True)
class ManagedFieldsEntry:
    """Server-side apply bookkeeping for one field manager.

    ``fields_v1`` is the serialized field set, kept as an opaque object.
    """

    manager: str | None = None
    operation: str | None = None
    api_version: str | None = None
    time: str | None = None
    fields_type: str | None = None
    fields_v1: dict[str, Any] | None = None
    subresource: str | None = None


@dataclass(frozen=True, slots=True)
class ObjectMeta:
    """Standard object metadata."""

    name: str | None = None
    generate_name: str | None = None
    namespace: str | None = None
    self_link: str | None = None
    uid: str | None = None
    resource_version: str | None = None
    generation: int | None = None
    creation_timestamp: str | None = None
    deletion_timestamp: str | None = None
    deletion_grace_period_seconds: int | None = None
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None
    owner_references: tuple[OwnerReference, ...] | None = None
    finalizers: tuple[str, ...] | None = None
    managed_fields: tuple[ManagedFieldsEntry, ...] | None = None


@dataclass(frozen=True, slots=True)
class Condition:
    """One aspect of the current state of a resource.

    ``status`` is "True", "False" or "Unknown". ``observed_generation`` is
    the ``metadata.generation`` the condition was computed from.
    """

    type: str
    status: str
    reason: str
    message: str
    last_transition_time: str
    observed_generation: int | None = None


@dataclass(frozen=True, slots=True)
class LabelSelectorRequirement:
    """A selector requirement: ``key`` related to ``values`` by ``operator``.

    Operators: In, NotIn, Exists, DoesNotExist.
    """

    key: str
    operator: str
    values: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class LabelSelector:
    """Label query over a set of resources. Requirements are ANDed."""

    match_labels: dict[str, str] | None = None
    match_expressions: tuple[LabelSelectorRequirement, ...] | None = None
