"""Kind registry for decoding documents of unknown type.

A manifest stream mixes Gateways, routes and grants across API versions.
The registry maps each document's ``(apiVersion, kind)`` to the Resource
class that decodes it:

- RegistryBuilder → .build() → Registry (immutable)
- each version package contributes a ``register(builder)`` function
- default_registry() knows every kind this library models

Example::

    registry = RegistryBuilder().resource(HttpRoute).resource(Gateway).build()
    for resource in registry.decode_yaml(manifest_text):
        print(resource.type_id(), resource.metadata.name)
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from gwapi._codec import (
    DecodeError,
    InvalidTypeError,
    MissingFieldError,
    check_duplicates,
    loads_json,
    loads_yaml_all,
)
from gwapi._resource import Resource

logger = logging.getLogger(__name__)

type ResourceKey = tuple[str, str]

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownResourceError(DecodeError):
    """No Resource class is registered for a document's apiVersion/kind."""

    def __init__(self, api_version: str, kind: str, available: list[str], path: str = "") -> None:
        self.api_version = api_version
        self.kind = kind
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown resource {api_version}/{kind} (registered: {registered})"
        else:
            msg = f"unknown resource {api_version}/{kind} (no resources are registered)"
        super().__init__(msg, path)


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register Resource classes, then call build() to produce an immutable
    Registry. Registering the same apiVersion/kind twice keeps the last class.
    """

    def __init__(self) -> None:
        self._resources: dict[ResourceKey, type[Resource]] = {}

    def resource(self, cls: type[Resource]) -> RegistryBuilder:
        """Register a Resource class under its apiVersion/kind."""
        self._resources[(cls.API_VERSION, cls.KIND)] = cls
        return self

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        logger.debug("built resource registry with %d kinds", len(self._resources))
        return Registry(_resources=MappingProxyType(dict(self._resources)))


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable apiVersion/kind → Resource class table.

    Constructed via RegistryBuilder.
    """

    _resources: MappingProxyType[ResourceKey, type[Resource]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def decode(self, data: Any) -> Resource:
        """Decode a parsed document into the Resource class its header names.

        Raises:
            MissingFieldError: apiVersion or kind absent
            UnknownResourceError: apiVersion/kind not registered
            DecodeError: document doesn't fit the resource shape
        """
        if not isinstance(data, Mapping):
            raise InvalidTypeError("object", data)
        check_duplicates(data, ("apiVersion", "kind"))
        for key in ("apiVersion", "kind"):
            if key not in data:
                raise MissingFieldError(key)
            if not isinstance(data[key], str):
                raise InvalidTypeError("string", data[key], key)

        api_version, kind = data["apiVersion"], data["kind"]
        cls = self._resources.get((api_version, kind))
        if cls is None:
            raise UnknownResourceError(api_version, kind, self.kinds())
        return cls.from_dict(data)

    def decode_json(self, text: str | bytes) -> Resource:
        """Decode a single JSON document."""
        return self.decode(loads_json(text))

    def decode_yaml(self, text: str | bytes) -> list[Resource]:
        """Decode a multi-document YAML manifest. Empty documents are skipped."""
        resources: list[Resource] = []
        for i, doc in enumerate(loads_yaml_all(text)):
            try:
                resources.append(self.decode(doc))
            except DecodeError as e:
                e.add_note(f"in YAML document {i}")
                raise
        return resources

    def contains(self, api_version: str, kind: str) -> bool:
        """Check if an apiVersion/kind is registered."""
        return (api_version, kind) in self._resources

    def kinds(self) -> list[str]:
        """Return all registered ``apiVersion/kind`` labels (sorted)."""
        return sorted(f"{api_version}/{kind}" for api_version, kind in self._resources)

    @property
    def count(self) -> int:
        """Number of registered resource kinds."""
        return len(self._resources)


@functools.cache
def default_registry() -> Registry:
    """Registry of every resource kind in v1, v1beta1 and v1alpha2."""
    from gwapi import v1, v1alpha2, v1beta1

    builder = RegistryBuilder()
    for version in (v1, v1beta1, v1alpha2):
        version.register(builder)
    return builder.build()
