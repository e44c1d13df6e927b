"""Route match predicates: tagged unions with defaulted discriminants.

Each predicate family is a closed union of frozen variant classes. The
variant is selected on the wire by a sibling ``type`` field, and the payload
fields sit flat next to it::

    {"type": "Exact", "name": "env", "value": "canary"}

| Union               | Variants                               | Default    |
|---------------------|----------------------------------------|------------|
| HttpPathMatch       | Exact, PathPrefix, RegularExpression   | PathPrefix |
| HttpHeaderMatch     | Exact, RegularExpression               | Exact      |
| HttpQueryParamMatch | Exact, RegularExpression               | Exact      |
| GrpcMethodMatch     | Exact, RegularExpression               | Exact      |

Decoding rules (shared by all families, see decode_tagged):

- ``type`` absent or empty → default variant.
- ``type`` naming no variant → InvalidDiscriminantError, never a fallback.
- A recognized key repeated in the source text → DuplicateFieldError.

GrpcMethodMatch is more lenient: empty ``service``/``method`` strings count
as absent, and a method match with neither decodes to None, exactly as if
the field had been omitted ("match every service and method").

Encoding always writes ``type`` explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

from gwapi._codec import decode_tagged, register_decoder, tagged_decoder
from gwapi._types import HttpHeaderName

logger = logging.getLogger(__name__)

DEFAULT_PATH = "/"

# ═══════════════════════════════════════════════════════════════════════════════
# HTTP path
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PathExact:
    """Match the request path exactly (case sensitive)."""

    TYPE: ClassVar[str] = "Exact"

    value: str = DEFAULT_PATH


@dataclass(frozen=True, slots=True)
class PathPrefix:
    """Match on path elements split by "/", so "/abc" matches "/abc/x" but not "/abcd"."""

    TYPE: ClassVar[str] = "PathPrefix"

    value: str = DEFAULT_PATH


@dataclass(frozen=True, slots=True)
class PathRegularExpression:
    """Match the path against a regular expression (dialect is implementation-specific)."""

    TYPE: ClassVar[str] = "RegularExpression"

    value: str = DEFAULT_PATH


type HttpPathMatch = PathExact | PathPrefix | PathRegularExpression

# ═══════════════════════════════════════════════════════════════════════════════
# HTTP header / query parameter
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HeaderExact:
    """Match a header value exactly. Header names compare case-insensitively."""

    TYPE: ClassVar[str] = "Exact"

    name: HttpHeaderName
    value: str


@dataclass(frozen=True, slots=True)
class HeaderRegularExpression:
    """Match a header value against a regular expression."""

    TYPE: ClassVar[str] = "RegularExpression"

    name: HttpHeaderName
    value: str


type HttpHeaderMatch = HeaderExact | HeaderRegularExpression

# gRPC metadata matches have the same shape as HTTP header matches.
type GrpcHeaderMatch = HttpHeaderMatch


@dataclass(frozen=True, slots=True)
class QueryParamExact:
    """Match a query parameter value exactly. Names compare case-sensitively."""

    TYPE: ClassVar[str] = "Exact"

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class QueryParamRegularExpression:
    """Match a query parameter value against a regular expression."""

    TYPE: ClassVar[str] = "RegularExpression"

    name: str
    value: str


type HttpQueryParamMatch = QueryParamExact | QueryParamRegularExpression

# ═══════════════════════════════════════════════════════════════════════════════
# gRPC method
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class MethodExact:
    """Match the gRPC service and/or method name exactly.

    An omitted service matches any service; an omitted method matches any
    method. At least one of them must be set.
    """

    TYPE: ClassVar[str] = "Exact"

    service: str | None = None
    method: str | None = None


@dataclass(frozen=True, slots=True)
class MethodRegularExpression:
    """Match the gRPC service and/or method name against regular expressions."""

    TYPE: ClassVar[str] = "RegularExpression"

    service: str | None = None
    method: str | None = None


type GrpcMethodMatch = MethodExact | MethodRegularExpression


def is_empty(method_match: GrpcMethodMatch) -> bool:
    """True if neither service nor method is set (or both are empty)."""
    return not method_match.service and not method_match.method


# ═══════════════════════════════════════════════════════════════════════════════
# Decoders
# ═══════════════════════════════════════════════════════════════════════════════

_METHOD_VARIANTS = {cls.TYPE: cls for cls in (MethodExact, MethodRegularExpression)}


def _decode_method_match(data: Any, path: str) -> GrpcMethodMatch | None:
    method_match = decode_tagged(
        data,
        _METHOD_VARIANTS,
        path=path,
        default=MethodExact.TYPE,
        empty_as_absent=("service", "method"),
    )
    if is_empty(method_match):
        logger.debug(
            "%s: method match sets neither service nor method, treating as unspecified", path
        )
        return None
    return method_match


register_decoder(
    HttpPathMatch,
    tagged_decoder(PathExact, PathPrefix, PathRegularExpression, default=PathPrefix.TYPE),
)
register_decoder(
    HttpHeaderMatch,
    tagged_decoder(HeaderExact, HeaderRegularExpression, default=HeaderExact.TYPE),
)
register_decoder(
    HttpQueryParamMatch,
    tagged_decoder(QueryParamExact, QueryParamRegularExpression, default=QueryParamExact.TYPE),
)
register_decoder(GrpcMethodMatch, _decode_method_match)
