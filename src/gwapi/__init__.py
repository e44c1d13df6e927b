"""gwapi — typed data bindings for the Kubernetes Gateway API.

Shared building blocks are exported from this module for flat imports:

    from gwapi import DecodeError, ParentReference, PathPrefix, default_registry

Resources live in the version packages:

    from gwapi.v1 import Gateway, HttpRoute
    from gwapi.v1beta1 import ReferenceGrant
    from gwapi.v1alpha2 import GrpcRoute, TcpRoute
"""

import logging

__version__ = "0.1.0"

# Codec — see gwapi._codec for details
from gwapi._codec import (
    DecodeError,
    DuplicateFieldError,
    InvalidDiscriminantError,
    InvalidTypeError,
    MissingFieldError,
    WireObject,
    decode,
    decode_tagged,
    encode,
    flatten,
    loads_json,
    loads_yaml,
    loads_yaml_all,
    register_decoder,
    tagged_decoder,
)
from gwapi._duration import format_duration, parse_duration

# Match predicates
from gwapi._matchers import (
    GrpcHeaderMatch,
    GrpcMethodMatch,
    HeaderExact,
    HeaderRegularExpression,
    HttpHeaderMatch,
    HttpPathMatch,
    HttpQueryParamMatch,
    MethodExact,
    MethodRegularExpression,
    PathExact,
    PathPrefix,
    PathRegularExpression,
    QueryParamExact,
    QueryParamRegularExpression,
    is_empty,
)
from gwapi._meta import (
    Condition,
    LabelSelector,
    LabelSelectorRequirement,
    ManagedFieldsEntry,
    ObjectMeta,
    OwnerReference,
)
from gwapi._references import (
    BackendObjectReference,
    LocalObjectReference,
    ObjectKey,
    ParentReference,
    SecretObjectReference,
)

# Resources and registry
from gwapi._registry import Registry, RegistryBuilder, UnknownResourceError, default_registry
from gwapi._resource import Resource, ResourceKindError
from gwapi._shared import (
    DEFAULT_WEIGHT,
    BackendRef,
    CommonRouteSpec,
    RouteParentStatus,
    RouteStatus,
)
from gwapi._types import CORE_GROUP, GATEWAY_API_GROUP

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "DecodeError",
    "MissingFieldError",
    "InvalidTypeError",
    "DuplicateFieldError",
    "InvalidDiscriminantError",
    "ResourceKindError",
    "UnknownResourceError",
    # Codec
    "WireObject",
    "loads_json",
    "loads_yaml",
    "loads_yaml_all",
    "decode",
    "encode",
    "decode_tagged",
    "tagged_decoder",
    "register_decoder",
    "flatten",
    # Durations
    "parse_duration",
    "format_duration",
    # Metadata
    "ObjectMeta",
    "OwnerReference",
    "ManagedFieldsEntry",
    "Condition",
    "LabelSelector",
    "LabelSelectorRequirement",
    # References
    "GATEWAY_API_GROUP",
    "CORE_GROUP",
    "ObjectKey",
    "LocalObjectReference",
    "SecretObjectReference",
    "BackendObjectReference",
    "ParentReference",
    # Shared route plumbing
    "DEFAULT_WEIGHT",
    "CommonRouteSpec",
    "BackendRef",
    "RouteParentStatus",
    "RouteStatus",
    # Match predicates
    "HttpPathMatch",
    "PathExact",
    "PathPrefix",
    "PathRegularExpression",
    "HttpHeaderMatch",
    "HeaderExact",
    "HeaderRegularExpression",
    "HttpQueryParamMatch",
    "QueryParamExact",
    "QueryParamRegularExpression",
    "GrpcMethodMatch",
    "MethodExact",
    "MethodRegularExpression",
    "GrpcHeaderMatch",
    "is_empty",
    # Resources
    "Resource",
    "Registry",
    "RegistryBuilder",
    "default_registry",
]
