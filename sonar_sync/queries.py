"""sonar_sync/queries.py

Logical queries understood by a :class:`sonar_sync.client.ServerClient`.

Each query knows its web-service path and how to encode itself as request
params. The HTTP client only has to issue the GET.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from .types import ALL_SEVERITIES

UNLIMITED_DEPTH = -1

ResourceRef = Union[int, str]


@dataclass(frozen=True)
class ResourceQuery:
    path = "/api/resources"

    resource: Optional[ResourceRef] = None
    qualifiers: Tuple[str, ...] = ()
    depth: Optional[int] = None
    metrics: Tuple[str, ...] = ()

    @classmethod
    def for_qualifiers(cls, *qualifiers: str) -> "ResourceQuery":
        return cls(qualifiers=tuple(qualifiers))

    @classmethod
    def for_children(cls, resource: ResourceRef, *qualifiers: str) -> "ResourceQuery":
        return cls(resource=resource, qualifiers=tuple(qualifiers), depth=UNLIMITED_DEPTH)

    @classmethod
    def for_metrics(cls, resource: ResourceRef, *metrics: str) -> "ResourceQuery":
        return cls(resource=resource, metrics=tuple(metrics))

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.resource is not None:
            params["resource"] = str(self.resource)
        if self.qualifiers:
            params["qualifiers"] = ",".join(self.qualifiers)
        if self.depth is not None:
            params["depth"] = str(self.depth)
        if self.metrics:
            params["metrics"] = ",".join(self.metrics)
        return params


@dataclass(frozen=True)
class RuleQuery:
    path = "/api/rules"

    language: str

    def to_params(self) -> Dict[str, str]:
        return {"language": self.language}


@dataclass(frozen=True)
class ViolationQuery:
    path = "/api/violations"

    resource: str
    depth: Optional[int] = None
    severities: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def for_resource(cls, resource: str) -> "ViolationQuery":
        """All violations under ``resource`` at any depth, for every known severity."""
        return cls(resource=resource, depth=UNLIMITED_DEPTH, severities=ALL_SEVERITIES)

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {"resource": self.resource}
        if self.depth is not None:
            params["depth"] = str(self.depth)
        if self.severities:
            # the server filters on "priorities"
            params["priorities"] = ",".join(self.severities)
        return params
