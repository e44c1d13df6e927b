"""Route plumbing shared by every route kind and version."""

from __future__ import annotations

from dataclasses import dataclass

from gwapi._codec import flatten
from gwapi._meta import Condition
from gwapi._references import BackendObjectReference, ParentReference
from gwapi._types import GatewayController

DEFAULT_WEIGHT = 1


@dataclass(frozen=True, slots=True)
class CommonRouteSpec:
    """Attributes every route spec carries, flattened into the spec object.

    ``parent_refs`` lists the resources (usually Gateways) the route wants to
    attach to. The parent must also allow the attachment. Referencing an
    identical parent twice is invalid; distinct sections of one parent are
    fine.
    """

    parent_refs: tuple[ParentReference, ...] | None = None


@dataclass(frozen=True, slots=True)
class BackendRef:
    """A weighted backend. The object reference is flattened on the wire.

    Weight is a proportion of the sum of weights in the list, not a
    percentage. Unset means 1; 0 means no traffic goes here.
    """

    backend: BackendObjectReference = flatten()
    weight: int | None = None

    @property
    def effective_weight(self) -> int:
        return DEFAULT_WEIGHT if self.weight is None else self.weight


@dataclass(frozen=True, slots=True)
class RouteParentStatus:
    """Status of a route with respect to one parent.

    ``controller_name`` identifies the controller that wrote the entry
    (same format as GatewayClass.spec.controllerName). The parent's
    controller sets the "Accepted" condition when it can see the route.
    """

    parent_ref: ParentReference
    controller_name: GatewayController
    conditions: tuple[Condition, ...]


@dataclass(frozen=True, slots=True)
class RouteStatus:
    """Status every route kind carries, flattened into the status object.

    At most 32 parents are listed. An empty list means the route has not
    been attached to any parent.
    """

    parents: tuple[RouteParentStatus, ...]
