"""Wire codec shared by every API version.

Gateway API values are frozen dataclasses. Decoding walks the dataclass
field type hints and maps snake_case attributes to camelCase wire keys:

  text → loads_json()/loads_yaml() → WireObject → decode(cls, obj) → dataclass
  dataclass → encode() → dict → json/yaml dump

| Python type            | Wire shape                              |
|------------------------|-----------------------------------------|
| str / int / bool       | string / number / boolean               |
| X | None               | absent or null ↔ None                   |
| tuple[X, ...]          | list                                    |
| dict[str, X]           | object with arbitrary keys              |
| frozen dataclass       | object, fields in camelCase             |
| flatten() field        | embedded fields on the parent's object  |
| registered union alias | ``type``-discriminated object           |

Tagged unions (match predicates, filters, path modifiers) can't be decoded
from type hints alone, so each union alias registers a decoder built on
decode_tagged().
"""

from __future__ import annotations

import dataclasses
import functools
import json
import logging
import types
import typing
from collections.abc import Callable, Collection, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAliasType

import yaml

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class DecodeError(Exception):
    """Error decoding a wire document into typed values.

    ``path`` locates the offending value, e.g. ``spec.rules[0].matches[1]``.
    """

    def __init__(self, msg: str, path: str = "") -> None:
        self.path = path
        super().__init__(f"{path}: {msg}" if path else msg)


class MissingFieldError(DecodeError):
    """A required field is absent."""

    def __init__(self, name: str, path: str = "") -> None:
        self.name = name
        super().__init__(f"missing required field {name!r}", path)


class InvalidTypeError(DecodeError):
    """A value has the wrong wire type (null included)."""

    def __init__(self, expected: str, got: Any, path: str = "") -> None:
        self.expected = expected
        self.got = _wire_type_name(got)
        super().__init__(f"expected {expected}, got {self.got}", path)


class DuplicateFieldError(DecodeError):
    """A recognized key appears more than once in the same object."""

    def __init__(self, name: str, path: str = "") -> None:
        self.name = name
        super().__init__(f"duplicate field {name!r}", path)


class InvalidDiscriminantError(DecodeError):
    """A ``type`` discriminant names no known variant."""

    def __init__(self, value: str, allowed: Collection[str], path: str = "") -> None:
        self.value = value
        self.allowed = tuple(allowed)
        expected = ", ".join(repr(name) for name in self.allowed)
        super().__init__(
            f"invalid value {value!r} for field 'type', expected one of: {expected}",
            path,
        )


def _wire_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


# ═══════════════════════════════════════════════════════════════════════════════
# Text loading
# ═══════════════════════════════════════════════════════════════════════════════


class WireObject(dict[str, Any]):
    """A JSON/YAML object that remembers which keys were repeated.

    Plain dicts keep the last value of a repeated key and forget the rest.
    The mapping does the same, but ``duplicates`` records the repetition so
    the decoder can reject ambiguous documents instead of letting the last
    write win.
    """

    __slots__ = ("duplicates",)

    def __init__(self, pairs: Any = (), duplicates: Collection[str] = ()) -> None:
        super().__init__(pairs)
        self.duplicates = frozenset(duplicates)

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, Any]]) -> WireObject:
        return cls(pairs, _repeated(key for key, _ in pairs))


def _repeated(keys: Iterable[Any]) -> set[Any]:
    seen: set[Any] = set()
    repeated: set[Any] = set()
    for key in keys:
        if key in seen:
            repeated.add(key)
        seen.add(key)
    return repeated


def loads_json(text: str | bytes) -> Any:
    """Parse JSON text, building WireObjects for every object."""
    try:
        return json.loads(text, object_pairs_hook=WireObject.from_pairs)
    except json.JSONDecodeError as e:
        msg = f"invalid JSON: {e}"
        raise DecodeError(msg) from e


class _WireLoader(yaml.SafeLoader):
    """SafeLoader that builds WireObjects and keeps timestamps as strings."""


_MERGE_TAG = "tag:yaml.org,2002:merge"


def _construct_wire_object(loader: _WireLoader, node: yaml.MappingNode) -> WireObject:
    # Keys pulled in through "<<" merges may be overridden; only keys written
    # out in this mapping count as duplicates.
    explicit = [
        loader.construct_object(key, deep=True)
        for key, _ in node.value
        if key.tag != _MERGE_TAG
    ]
    loader.flatten_mapping(node)
    pairs = [
        (loader.construct_object(key, deep=True), loader.construct_object(value, deep=True))
        for key, value in node.value
    ]
    return WireObject(pairs, _repeated(explicit))


def _construct_timestamp(loader: _WireLoader, node: yaml.ScalarNode) -> str:
    return loader.construct_scalar(node)


_WireLoader.add_constructor(yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_wire_object)
_WireLoader.add_constructor("tag:yaml.org,2002:timestamp", _construct_timestamp)


def loads_yaml(text: str | bytes) -> Any:
    """Parse a single YAML document, building WireObjects for every mapping."""
    try:
        return yaml.load(text, Loader=_WireLoader)  # noqa: S506
    except yaml.YAMLError as e:
        msg = f"invalid YAML: {e}"
        raise DecodeError(msg) from e


def loads_yaml_all(text: str | bytes) -> list[Any]:
    """Parse a multi-document YAML stream, skipping empty documents."""
    try:
        docs = yaml.load_all(text, Loader=_WireLoader)  # noqa: S506
        return [doc for doc in docs if doc is not None]
    except yaml.YAMLError as e:
        msg = f"invalid YAML: {e}"
        raise DecodeError(msg) from e


# ═══════════════════════════════════════════════════════════════════════════════
# Struct reflection
# ═══════════════════════════════════════════════════════════════════════════════

_FLATTEN = "gwapi.flatten"


def flatten(**kwargs: Any) -> Any:
    """Declare a dataclass field whose value shares its parent's wire object.

    Accepts the same ``default``/``default_factory`` arguments as
    ``dataclasses.field``.
    """
    return field(metadata={_FLATTEN: True}, **kwargs)


@dataclass(frozen=True, slots=True)
class _Field:
    name: str
    wire: str
    hint: Any
    flatten: bool
    required: bool


def _camel(name: str) -> str:
    """snake_case attribute → camelCase wire key (``from_`` → ``from``)."""
    head, *rest = name.rstrip("_").split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


@functools.cache
def _fields(cls: type) -> tuple[_Field, ...]:
    hints = typing.get_type_hints(cls)
    return tuple(
        _Field(
            name=f.name,
            wire=_camel(f.name),
            hint=hints[f.name],
            flatten=bool(f.metadata.get(_FLATTEN)),
            required=f.default is dataclasses.MISSING
            and f.default_factory is dataclasses.MISSING,
        )
        for f in dataclasses.fields(cls)
        if f.init
    )


def _strip_optional(tp: Any) -> tuple[Any, bool]:
    """Split ``X | None`` into (X, True); anything else into (tp, False)."""
    if typing.get_origin(tp) in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(members) == 1 and len(typing.get_args(tp)) == 2:
            return members[0], True
    return tp, False


@functools.cache
def wire_keys(cls: type) -> frozenset[str]:
    """All wire keys a dataclass reads, flattened fields included."""
    keys: set[str] = set()
    for f in _fields(cls):
        if f.flatten:
            keys |= wire_keys(_strip_optional(f.hint)[0])
        else:
            keys.add(f.wire)
    return frozenset(keys)


def check_duplicates(data: Mapping[str, Any], keys: Collection[str], path: str = "") -> None:
    """Raise DuplicateFieldError if any of ``keys`` was repeated in ``data``."""
    if not isinstance(data, WireObject):
        return
    repeated = data.duplicates.intersection(keys)
    if repeated:
        raise DuplicateFieldError(min(repeated), path)


# ═══════════════════════════════════════════════════════════════════════════════
# Decoding
# ═══════════════════════════════════════════════════════════════════════════════

type Decoder = Callable[[Any, str], Any]

_DECODERS: dict[Any, Decoder] = {}


def register_decoder(tp: Any, decoder: Decoder) -> None:
    """Bind a hand-written decoder to a type (usually a union alias)."""
    _DECODERS[tp] = decoder


def decode(tp: Any, data: Any, path: str = "") -> Any:
    """Decode wire data into ``tp``.

    Raises:
        DecodeError: If the data does not fit the type.
    """
    decoder = _DECODERS.get(tp)
    if decoder is not None:
        return decoder(data, path)
    if isinstance(tp, TypeAliasType):
        return decode(tp.__value__, data, path)

    origin = typing.get_origin(tp)
    if origin in (typing.Union, types.UnionType):
        inner, optional = _strip_optional(tp)
        if not optional:
            msg = f"no decoder registered for union {tp!r}"
            raise TypeError(msg)
        return None if data is None else decode(inner, data, path)
    if origin is tuple:
        if not isinstance(data, list):
            raise InvalidTypeError("list", data, path)
        item_tp = typing.get_args(tp)[0]
        return tuple(decode(item_tp, item, f"{path}[{i}]") for i, item in enumerate(data))
    if origin is dict:
        if not isinstance(data, Mapping):
            raise InvalidTypeError("object", data, path)
        value_tp = typing.get_args(tp)[1]
        result = {}
        for key, value in data.items():
            if not isinstance(key, str):
                raise InvalidTypeError("string key", key, path)
            result[key] = decode(value_tp, value, _join(path, key))
        return result

    if tp is str:
        if not isinstance(data, str):
            raise InvalidTypeError("string", data, path)
        return data
    if tp is int:
        if not isinstance(data, int) or isinstance(data, bool):
            raise InvalidTypeError("integer", data, path)
        return data
    if tp is bool:
        if not isinstance(data, bool):
            raise InvalidTypeError("boolean", data, path)
        return data
    if tp is Any:
        return data
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return decode_struct(tp, data, path)

    msg = f"cannot decode into {tp!r}"
    raise TypeError(msg)


def decode_struct[T](cls: type[T], data: Any, path: str = "") -> T:
    """Decode a wire object into a dataclass.

    Optional fields that are absent or null take their default. Required
    fields must be present and non-null. Unknown keys are ignored.
    """
    if not isinstance(data, Mapping):
        raise InvalidTypeError("object", data, path)
    check_duplicates(data, wire_keys(cls), path)

    kwargs: dict[str, Any] = {}
    for f in _fields(cls):
        if f.flatten:
            kwargs[f.name] = _decode_flattened(f, data, path)
            continue
        if f.wire not in data:
            if f.required:
                raise MissingFieldError(f.wire, path)
            continue
        raw = data[f.wire]
        if raw is None and not f.required:
            continue
        kwargs[f.name] = decode(f.hint, raw, _join(path, f.wire))
    return cls(**kwargs)


def _decode_flattened(f: _Field, data: Mapping[str, Any], path: str) -> Any:
    inner, optional = _strip_optional(f.hint)
    if optional and wire_keys(inner).isdisjoint(data.keys()):
        return None
    return decode_struct(inner, data, path)


def decode_tagged(
    data: Any,
    variants: Mapping[str, type],
    *,
    path: str = "",
    default: str | None = None,
    empty_as_absent: Collection[str] = (),
) -> Any:
    """Decode one variant of a ``type``-discriminated union.

    Two phases. First, every recognized key (``type`` plus the payload keys
    of all variants) is collected once, rejecting repeated keys, and the
    fields named in ``empty_as_absent`` are dropped when they hold an empty
    string. Then the discriminant picks the variant:

    - absent or empty → ``default`` (MissingFieldError if there is none)
    - a known variant name → that variant
    - anything else → InvalidDiscriminantError listing ``variants``

    The variant is built from its own payload keys only; payload keys that
    belong to other variants are ignored.
    """
    if not isinstance(data, Mapping):
        raise InvalidTypeError("object", data, path)

    recognized = {"type"}.union(*(wire_keys(v) for v in variants.values()))
    check_duplicates(data, recognized, path)
    collected = {key: data[key] for key in recognized if key in data}
    for key in empty_as_absent:
        if collected.get(key) == "":
            del collected[key]

    tag = collected.pop("type", None)
    if tag is None or tag == "":
        if default is None:
            raise MissingFieldError("type", path)
        logger.debug("%s: no discriminant, using default variant %r", path or "<root>", default)
        tag = default
    elif not isinstance(tag, str):
        raise InvalidTypeError("string", tag, _join(path, "type"))

    variant = variants.get(tag)
    if variant is None:
        raise InvalidDiscriminantError(tag, list(variants), path)
    return decode_struct(variant, collected, path)


def tagged_decoder(
    *variants: type,
    default: str | None = None,
    empty_as_absent: Collection[str] = (),
) -> Decoder:
    """Build a Decoder over variant classes keyed by their ``TYPE`` constant."""
    by_tag = {cls.TYPE: cls for cls in variants}  # type: ignore[attr-defined]

    def _decode(data: Any, path: str) -> Any:
        return decode_tagged(
            data, by_tag, path=path, default=default, empty_as_absent=empty_as_absent
        )

    return _decode


# ═══════════════════════════════════════════════════════════════════════════════
# Encoding
# ═══════════════════════════════════════════════════════════════════════════════


def encode(value: Any) -> Any:
    """Encode a value into JSON-compatible wire data."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return encode_struct(value)
    if isinstance(value, (tuple, list)):
        return [encode(item) for item in value]
    if isinstance(value, Mapping):
        return {key: encode(item) for key, item in value.items()}
    return value


def encode_struct(obj: Any) -> dict[str, Any]:
    """Encode a dataclass into a wire object.

    Variant classes write their ``type`` discriminant first. None-valued
    fields are omitted and flattened fields merge into this object.
    """
    out: dict[str, Any] = {}
    tag = getattr(type(obj), "TYPE", None)
    if tag is not None:
        out["type"] = tag
    for f in _fields(type(obj)):
        value = getattr(obj, f.name)
        if value is None:
            continue
        if f.flatten:
            out.update(encode_struct(value))
        else:
            out[f.wire] = encode(value)
    return out
