"""Top-level Kubernetes resource documents.

A Resource subclass is a frozen dataclass with ``metadata``, ``spec`` and
(usually) ``status`` fields plus two class constants naming its
``apiVersion`` and ``kind``. The constants are written on every encode and
checked on decode, so a GRPCRoute document can't be read as an HTTPRoute.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, ClassVar, Self

import yaml

from gwapi._codec import (
    DecodeError,
    InvalidTypeError,
    check_duplicates,
    decode_struct,
    encode_struct,
    loads_json,
    loads_yaml,
)

_HEADER_KEYS = ("apiVersion", "kind")


class ResourceKindError(DecodeError):
    """A document's apiVersion/kind doesn't belong to the class decoding it."""

    def __init__(self, expected: str, got: str, path: str = "") -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"expected {expected}, got {got}", path)


class Resource:
    """Base class for Gateway API resource dataclasses.

    Subclasses set ``API_VERSION`` and ``KIND`` and declare their fields as a
    frozen dataclass.
    """

    __slots__ = ()

    API_VERSION: ClassVar[str]
    KIND: ClassVar[str]

    @classmethod
    def type_id(cls) -> str:
        """``apiVersion/kind`` label, e.g. ``gateway.networking.k8s.io/v1/Gateway``."""
        return f"{cls.API_VERSION}/{cls.KIND}"

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """Decode a parsed document.

        ``apiVersion`` and ``kind`` may be omitted; when present they must
        match this class.

        Raises:
            DecodeError: If the document doesn't fit the resource shape.
        """
        if not isinstance(data, Mapping):
            raise InvalidTypeError("object", data)
        check_duplicates(data, _HEADER_KEYS)
        api_version = data.get("apiVersion", cls.API_VERSION)
        kind = data.get("kind", cls.KIND)
        if (api_version, kind) != (cls.API_VERSION, cls.KIND):
            raise ResourceKindError(cls.type_id(), f"{api_version}/{kind}")
        return decode_struct(cls, data)

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        return cls.from_dict(loads_json(text))

    @classmethod
    def from_yaml(cls, text: str | bytes) -> Self:
        return cls.from_dict(loads_yaml(text))

    def to_dict(self) -> dict[str, Any]:
        """Encode as a wire document, ``apiVersion`` and ``kind`` first."""
        return {"apiVersion": self.API_VERSION, "kind": self.KIND, **encode_struct(self)}

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False)
